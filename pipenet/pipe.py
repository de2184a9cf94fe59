"""Pipes of the gas transport network."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from .console import FLOAT_MAX, Console, _format_number

_SEPARATOR = "----------------------------------------\n"
_STATE_MENU = "1. Pipe is under repair\n2. Pipe is operational\n"


@dataclass
class Pipe:
    """A pipe with a name, length, diameter and repair state."""

    name: str = ""
    length: float = 0.0
    diameter: float = 0.0
    in_repair: bool = False
    id: int = field(init=False, compare=False)

    _last_id: ClassVar[int] = 0

    def __post_init__(self) -> None:
        Pipe._last_id += 1
        self.id = Pipe._last_id

    @classmethod
    def from_console(cls, console: Console) -> Pipe:
        """Ask for every field of a new pipe."""
        console.write("Enter pipe name: ")
        name = console.read_line()
        console.write("Enter pipe length: ")
        length = console.read_float(0.0, FLOAT_MAX)
        console.write("Enter pipe diameter: ")
        diameter = console.read_float(0.0, FLOAT_MAX)
        console.write("Pipe state:\n" + _STATE_MENU)
        in_repair = console.read_int(1, 2) == 1
        return cls(name, length, diameter, in_repair)

    def edit(self, console: Console) -> None:
        """Ask for the new repair state."""
        console.write("Choose the pipe state:\n" + _STATE_MENU)
        self.in_repair = console.read_int(1, 2) == 1

    def describe(self) -> str:
        """Return a human-readable block describing the pipe."""
        state = "Under repair" if self.in_repair else "Operational"
        return (
            _SEPARATOR
            + f"Pipe information: (ID: {self.id})\n"
            + f"Name: {self.name}\n"
            + f"Length: {_format_number(self.length)}\n"
            + f"Diameter: {_format_number(self.diameter)}\n"
            + f"State: {state}\n"
            + _SEPARATOR
        )

    def __str__(self) -> str:
        return self.describe()

    def to_record(self) -> list[str]:
        """Return the lines that store this pipe in a data file."""
        return [
            self.name,
            f"{_format_number(self.length)} {_format_number(self.diameter)} "
            f"{int(self.in_repair)}",
        ]

    @classmethod
    def from_record(cls, lines: Iterable[str]) -> Pipe:
        """Build a pipe from the lines written by :meth:`to_record`."""
        source = iter(lines)
        try:
            name = next(source).rstrip("\n")
            fields = next(source).split()
        except StopIteration:
            raise ValueError("pipe record is truncated") from None
        if len(fields) != 3:
            raise ValueError(f"malformed pipe record: {fields!r}")
        length_text, diameter_text, state_text = fields
        if state_text not in ("0", "1"):
            raise ValueError(f"invalid repair flag: {state_text!r}")
        try:
            length = float(length_text)
            diameter = float(diameter_text)
        except ValueError:
            raise ValueError(f"malformed pipe record: {fields!r}") from None
        return cls(name, length, diameter, state_text == "1")