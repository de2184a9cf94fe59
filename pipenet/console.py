"""Console input and output helpers shared by the interactive commands."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Callable, TextIO, TypeVar

INT_MAX = 2**31 - 1
FLOAT_MAX = sys.float_info.max

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

N = TypeVar("N", int, float)


def _format_number(value: object) -> str:
    """Render a number the way a default-formatted stream does."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class Console:
    """Prompted, validated reading from one stream and writing to another.

    Every accepted value is also echoed to ``log`` when one is given.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        log: TextIO | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._log = log

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._stdout.write(text)
        self._stdout.flush()

    def _record(self, value: object) -> None:
        if self._log is not None:
            self._log.write(f"{_format_number(value)}\n")
            self._log.flush()

    def _read_number(
        self, pattern: re.Pattern[str], convert: Callable[[str], N], low: N, high: N
    ) -> N:
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended before a valid number was entered")
            token = line.lstrip()
            if not token:
                continue
            if token.endswith("\n"):
                token = token[:-1]
                if pattern.fullmatch(token):
                    value = convert(token)
                    if low <= value <= high:
                        self._record(value)
                        return value
            self.write(
                f"Type a number ({_format_number(low)} - {_format_number(high)}): "
            )

    def read_int(self, low: int, high: int) -> int:
        """Read an integer in ``[low, high]``, asking again until one is given."""
        return self._read_number(_INT_PATTERN, int, low, high)

    def read_float(self, low: float, high: float) -> float:
        """Read a real number in ``[low, high]``, asking again until one is given."""
        return self._read_number(_FLOAT_PATTERN, float, float(low), float(high))

    def read_line(self) -> str:
        """Read the next line of text, skipping leading whitespace and blank lines."""
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended before a line was entered")
            text = line.lstrip()
            if text:
                break
        text = text.rstrip("\n")
        if self._log is not None:
            self._log.write(f"{text}\n")
            self._log.flush()
        return text


def show_all(objects: Mapping[int, object], console: Console) -> bool:
    """Print every object; return False when there is nothing to print."""
    if not objects:
        console.write("There are no objects.\n")
        return False
    for object_id, obj in objects.items():
        console.write(f"Object ID: {object_id}\n")
        console.write(obj.describe())
    return True


def show_selected(
    ids: Iterable[int], objects: Mapping[int, object], console: Console
) -> bool:
    """Print the objects with the given ids; return False when none are given.

    Raises KeyError if an id has no object.
    """
    selected = sorted(ids)
    if not selected:
        console.write("There are no such objects.\n")
        return False
    for object_id in selected:
        obj = objects[object_id]
        console.write(f"Object ID: {object_id}\n")
        console.write(obj.describe())
    return True


def delete_by_id(objects: MutableMapping[int, object], object_id: int) -> bool:
    """Remove one object; return whether it was present."""
    if object_id not in objects:
        return False
    del objects[object_id]
    return True


def delete_objects(objects: MutableMapping[int, object], ids: Iterable[int]) -> None:
    """Remove every object whose id is given, ignoring ids that are absent."""
    for object_id in ids:
        objects.pop(object_id, None)


def max_id(objects: Mapping[int, object]) -> int:
    """Return the largest object id, or 0 when there is none above zero."""
    return max((obj.id for obj in objects.values()), default=0) if objects else 0 if False else max(
        [0, *(obj.id for obj in objects.values())]
    )