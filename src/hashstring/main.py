import argparse
import logging
import sys


def main():
    parser = argparse.ArgumentParser(
        description="hashstring - inspect and build Argon2i hash strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hashstring decode '$argon2i$m=120,t=5000,p=2$4fXXG0spB92WPB1NitT8/OH0VKI'
  hashstring check '$argon2i$m=120,t=5000,p=2' '$argon2i$m=15,t=5000,p=2'
  hashstring encode --m 120 --t 5000 --p 2 --salt 4fXXG0spB92WPB1NitT8/OH0VKI
  hashstring settings
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    decode_parser = subparsers.add_parser("decode", help="Decode a hash string")
    decode_parser.add_argument("text", help="Hash string to decode")

    check_parser = subparsers.add_parser("check", help="Validate hash strings")
    check_parser.add_argument("texts", nargs="+", help="Hash strings to validate")

    encode_parser = subparsers.add_parser("encode", help="Build a hash string")
    encode_parser.add_argument("--m", type=int, required=True, help="Memory cost")
    encode_parser.add_argument("--t", type=int, required=True, help="Time cost")
    encode_parser.add_argument("--p", type=int, required=True, help="Parallelism")
    encode_parser.add_argument("--keyid", default="", help="Key identifier (Base64)")
    encode_parser.add_argument("--data", default="", help="Associated data (Base64)")
    encode_parser.add_argument("--salt", default="", help="Salt (Base64)")
    encode_parser.add_argument("--output", default="", help="Hash output (Base64)")
    encode_parser.add_argument(
        "--capacity", "-c", type=_positive_int,
        help="Destination capacity including the terminator (defaults to settings)"
    )

    subparsers.add_parser("settings", help="Show current configuration")

    args = parser.parse_args()

    settings = _load_settings_or_exit()
    _configure_logging(settings.log_level)

    if args.command is None:
        parser.print_help()
        sys.exit(0)
    elif args.command == "decode":
        run_decode(args.text)
    elif args.command == "check":
        run_check(args.texts)
    elif args.command == "encode":
        capacity = args.capacity if args.capacity is not None else settings.encode_capacity
        run_encode(
            m=args.m,
            t=args.t,
            p=args.p,
            keyid=args.keyid,
            data=args.data,
            salt=args.salt,
            output=args.output,
            capacity=capacity,
        )
    elif args.command == "settings":
        run_settings()
    else:
        parser.print_help()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {number}")
    return number


def _load_settings_or_exit():
    from rich.console import Console
    from rich.markup import escape

    from hashstring.config import load_settings
    from hashstring.core.errors import ConfigurationError

    try:
        return load_settings()
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)


def _configure_logging(level: str) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _describe_binary(value: bytes) -> str:
    from hashstring.encoding import b64encode

    if not value:
        return "[dim]absent[/dim]"
    return f"{b64encode(value)} [dim]({len(value)} bytes)[/dim]"


def run_decode(text: str):
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    from hashstring.core.errors import ParseError
    from hashstring.phc import decode

    console = Console()

    try:
        record = decode(text)
    except ParseError as e:
        console.print(f"[red]Error ({e.kind.value}): {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)

    table = Table(title="Hash String", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Shape", record.shape.value)
    table.add_row("Memory cost (m)", str(record.m))
    table.add_row("Time cost (t)", str(record.t))
    table.add_row("Parallelism (p)", str(record.p))
    table.add_row("Key ID", _describe_binary(record.key_id))
    table.add_row("Associated data", _describe_binary(record.associated_data))
    table.add_row("Salt", _describe_binary(record.salt))
    table.add_row("Output", _describe_binary(record.output))

    console.print(table)


def run_check(texts: list[str]):
    from rich.console import Console
    from rich.markup import escape

    from hashstring.core.errors import ParseError
    from hashstring.phc import decode

    console = Console()
    rejected = 0

    for text in texts:
        try:
            decode(text)
        except ParseError as e:
            rejected += 1
            console.print(
                f"[red]REJECTED[/red] ({e.kind.value}) {escape(text)}",
                highlight=False,
                soft_wrap=True,
            )
            continue
        console.print(f"[green]OK[/green] {escape(text)}", highlight=False, soft_wrap=True)

    if rejected:
        console.print(f"[yellow]{rejected} of {len(texts)} rejected[/yellow]")
        sys.exit(1)


def run_encode(
    m: int,
    t: int,
    p: int,
    keyid: str = "",
    data: str = "",
    salt: str = "",
    output: str = "",
    capacity: int = 300,
):
    from pydantic import ValidationError
    from rich.console import Console
    from rich.markup import escape

    from hashstring.core.errors import CapacityError, ParseError
    from hashstring.encoding import b64decode
    from hashstring.phc import ParsedRecord, encode, encoded_length

    console = Console()

    try:
        fields = {
            name: b64decode(value)
            for name, value in (
                ("key_id", keyid),
                ("associated_data", data),
                ("salt", salt),
                ("output", output),
            )
        }
    except ParseError as e:
        console.print(f"[red]Error: invalid Base64 ({escape(str(e))})[/red]", highlight=False)
        sys.exit(1)

    try:
        record = ParsedRecord(m=m, t=t, p=p, **fields)
    except ValidationError as e:
        console.print(f"[red]Error: invalid record[/red]\n{escape(str(e))}", highlight=False)
        sys.exit(1)

    try:
        encoded = encode(record, capacity=capacity)
    except CapacityError:
        needed = encoded_length(record) + 1
        console.print(
            f"[red]Error: capacity {capacity} is too small, need at least {needed}[/red]"
        )
        sys.exit(1)

    console.print(encoded, markup=False, highlight=False, soft_wrap=True)


def run_settings():
    from rich.console import Console
    from rich.table import Table

    from hashstring.config import get_settings

    console = Console()
    settings = get_settings()

    table = Table(title="Codec Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Encode Capacity", str(settings.codec.encode_capacity))
    fits = "[green]yes[/green]" if settings.codec.fits_any_record else "[yellow]no[/yellow]"
    table.add_row("Fits Any Record", fits)
    table.add_row("Log Level", settings.codec.log_level)

    console.print(table)


if __name__ == "__main__":
    main()
