"""Compressor stations of the gas transport network."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from .console import FLOAT_MAX, INT_MAX, Console, _format_number

_SEPARATOR = "----------------------------------------------------------------\n"


@dataclass
class CompressorStation:
    """A station with a number of workshops, some of them running."""

    name: str = ""
    total_workshops: int = 0
    running_workshops: int = 0
    efficiency: float = 0.0
    id: int = field(init=False, compare=False)

    _last_id: ClassVar[int] = 0

    def __post_init__(self) -> None:
        CompressorStation._last_id += 1
        self.id = CompressorStation._last_id

    def usage_percentage(self) -> float:
        """Share of running workshops, in percent."""
        if self.total_workshops <= 0:
            return 0.0
        return self.running_workshops / self.total_workshops * 100

    @classmethod
    def from_console(cls, console: Console) -> CompressorStation:
        """Ask for every field of a new station."""
        console.write("Enter compressor station name: ")
        name = console.read_line()
        console.write("Enter total number of workshops: ")
        total = console.read_int(0, INT_MAX)
        console.write("Enter number of running workshops: ")
        running = console.read_int(0, total)
        console.write("Enter station efficiency: ")
        efficiency = console.read_float(0.0, FLOAT_MAX)
        return cls(name, total, running, efficiency)

    def edit(self, console: Console) -> None:
        """Ask for the new number of running workshops."""
        console.write(
            f"Input new number of running workshops (0 to {self.total_workshops}): "
        )
        self.running_workshops = console.read_int(0, self.total_workshops)

    def update_running_workshops(self, delta: int, console: Console) -> None:
        """Change the running workshops by ``delta``, clamped to the valid range."""
        new_value = self.running_workshops + delta
        if new_value > self.total_workshops:
            console.write(
                "Cannot add more running workshops than total workshops "
                f"(ID: {self.id})\n"
            )
            self.running_workshops = self.total_workshops
        elif new_value < 0:
            console.write(f"Cannot have negative running workshops (ID: {self.id})\n")
            self.running_workshops = 0
        else:
            console.write(f"Updating number of running workshops (ID: {self.id})\n")
            self.running_workshops = new_value

    def describe(self) -> str:
        """Return a human-readable block describing the station."""
        return (
            _SEPARATOR
            + f"Compressor Station (ID: {self.id})\n"
            + f"Name: {self.name}\n"
            + f"Total Workshops: {self.total_workshops}\n"
            + f"Running Workshops: {self.running_workshops}\n"
            + f"Efficiency: {_format_number(self.efficiency)}\n"
            + f"Usage: {_format_number(self.usage_percentage())}%\n"
            + _SEPARATOR
        )

    def __str__(self) -> str:
        return self.describe()

    def to_record(self) -> list[str]:
        """Return the lines that store this station in a data file."""
        return [
            str(self.id),
            self.name,
            f"{self.total_workshops} {self.running_workshops} "
            f"{_format_number(self.efficiency)}",
        ]

    @classmethod
    def from_record(cls, lines: Iterable[str]) -> CompressorStation:
        """Build a station from the lines written by :meth:`to_record`.

        The stored id is kept, and later stations are numbered after it.
        """
        source = iter(lines)
        try:
            id_text = next(source).strip()
            name = next(source).rstrip("\n")
            fields = next(source).split()
        except StopIteration:
            raise ValueError("station record is truncated") from None
        if len(fields) != 3:
            raise ValueError(f"malformed station record: {fields!r}")
        try:
            stored_id = int(id_text)
            total = int(fields[0])
            running = int(fields[1])
            efficiency = float(fields[2])
        except ValueError:
            raise ValueError("malformed station record") from None
        station = cls(name, total, running, efficiency)
        station.id = stored_id
        CompressorStation._last_id = stored_id
        return station