from __future__ import annotations

import logging

from hashstring.core.errors import CapacityError

logger = logging.getLogger(__name__)


class OutputBuffer:
    """Fixed-capacity text sink.

    The capacity counts one terminator slot, so a buffer of capacity ``n``
    holds at most ``n - 1`` characters.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise CapacityError(
                "Destination capacity must be non-negative",
                required=1,
                available=capacity,
            )
        self.capacity = capacity
        self._parts: list[str] = []
        self._length = 0

    @property
    def remaining(self) -> int:
        return self.capacity - self._length

    def __len__(self) -> int:
        return self._length

    def write(self, text: str) -> None:
        if len(text) >= self.remaining:
            logger.debug(
                f"Buffer full: need {len(text) + 1}, have {self.remaining}"
            )
            raise CapacityError(
                "Destination buffer too small",
                required=self._length + len(text) + 1,
                available=self.capacity,
                position=self._length,
            )
        self._parts.append(text)
        self._length += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)
