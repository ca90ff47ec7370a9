"""Tests for the command-line front end."""

from unittest.mock import patch

import pytest

from hashstring.main import main

PARAMS = "$argon2i$m=120,t=5000,p=2"
SALT_B64 = "4fXXG0spB92WPB1NitT8/OH0VKI"


def run_cli(*args: str) -> int:
    """Run main() with the given arguments and return the exit code."""
    with patch("sys.argv", ["hashstring", *args]):
        try:
            main()
        except SystemExit as e:
            return e.code or 0
    return 0


class TestDecodeCommand:
    def test_decode_prints_fields(self, capsys):
        code = run_cli("decode", f"{PARAMS}${SALT_B64}")
        out = capsys.readouterr().out

        assert code == 0
        assert "salted" in out
        assert "5000" in out
        assert SALT_B64 in out
        assert "20 bytes" in out

    def test_decode_reports_error_kind(self, capsys):
        code = run_cli("decode", "$argon2i$m=15,t=5000,p=2")
        out = capsys.readouterr().out

        assert code == 1
        assert "Error (range)" in out


class TestCheckCommand:
    def test_all_valid(self, capsys):
        code = run_cli("check", PARAMS, f"{PARAMS}${SALT_B64}")
        out = capsys.readouterr().out

        assert code == 0
        assert out.count("OK") == 2

    def test_some_rejected(self, capsys):
        code = run_cli("check", PARAMS, "$argon2i$m=0120,t=5000,p=2")
        out = capsys.readouterr().out

        assert code == 1
        assert "REJECTED (numeric)" in out
        assert "1 of 2 rejected" in out


class TestEncodeCommand:
    def test_encode_salted(self, capsys):
        code = run_cli("encode", "--m", "120", "--t", "5000", "--p", "2", "--salt", SALT_B64)
        out = capsys.readouterr().out

        assert code == 0
        assert out.strip() == f"{PARAMS}${SALT_B64}"

    def test_encode_parameters_only(self, capsys):
        code = run_cli("encode", "--m", "120", "--t", "5000", "--p", "2")

        assert code == 0
        assert capsys.readouterr().out.strip() == PARAMS

    def test_invalid_record(self, capsys):
        code = run_cli("encode", "--m", "15", "--t", "5000", "--p", "2")
        out = capsys.readouterr().out

        assert code == 1
        assert "invalid record" in out

    def test_invalid_base64(self, capsys):
        code = run_cli("encode", "--m", "120", "--t", "5000", "--p", "2", "--salt", "AB")
        out = capsys.readouterr().out

        assert code == 1
        assert "invalid Base64" in out

    def test_capacity_too_small(self, capsys):
        code = run_cli(
            "encode", "--m", "120", "--t", "5000", "--p", "2",
            "--salt", SALT_B64, "--capacity", "30",
        )
        out = capsys.readouterr().out

        assert code == 1
        assert f"need at least {len(PARAMS) + 1 + len(SALT_B64) + 1}" in out

    @pytest.mark.parametrize("capacity", ["-1", "0"])
    def test_non_positive_capacity_rejected(self, capsys, capacity):
        """argparse refuses the value before any encoding is attempted."""
        code = run_cli(
            "encode", "--m", "120", "--t", "5000", "--p", "2", "--capacity", capacity,
        )
        err = capsys.readouterr().err

        assert code == 2
        assert "must be a positive integer" in err

    def test_negative_capacity_reported_cleanly(self, capsys):
        """run_encode turns a negative capacity into an error line and exit 1."""
        from hashstring.main import run_encode

        with pytest.raises(SystemExit) as exc_info:
            run_encode(m=120, t=5000, p=2, capacity=-1)

        assert exc_info.value.code == 1
        assert f"need at least {len(PARAMS) + 1}" in capsys.readouterr().out

    def test_capacity_from_settings(self, capsys, monkeypatch):
        monkeypatch.setenv("HASHSTRING_ENCODE_CAPACITY", "26")

        code = run_cli("encode", "--m", "120", "--t", "5000", "--p", "2")

        assert code == 0
        assert capsys.readouterr().out.strip() == PARAMS


class TestSettingsCommand:
    def test_settings_table(self, capsys):
        code = run_cli("settings")
        out = capsys.readouterr().out

        assert code == 0
        assert "Encode Capacity" in out
        assert "Log Level" in out

    def test_invalid_settings_exit(self, capsys, monkeypatch):
        monkeypatch.setenv("HASHSTRING_ENCODE_CAPACITY", "5")

        code = run_cli("settings")

        assert code == 1
        assert "Invalid hashstring settings" in capsys.readouterr().err


@pytest.mark.parametrize("args", [[], ["--help"]])
def test_help(args, capsys):
    code = run_cli(*args)

    assert code == 0
    assert "hashstring" in capsys.readouterr().out
