"""Saving and loading the network to and from plain-text data files."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path

from .pipe import Pipe
from .station import CompressorStation


def _data_path(file_name: str | Path) -> Path:
    return Path(f"{file_name}.txt")


def _read_key(source: Iterator[str]) -> int:
    line = next(source, None)
    if line is None:
        raise ValueError("data file is truncated")
    try:
        return int(line.strip())
    except ValueError:
        raise ValueError(f"malformed object key: {line!r}") from None


def save_data(
    file_name: str | Path,
    pipes: Mapping[int, Pipe],
    stations: Mapping[int, CompressorStation],
) -> Path:
    """Write pipes and stations to ``<file_name>.txt`` and return its path.

    Raises OSError when the file cannot be written.
    """
    lines = [f"{len(pipes)} {len(stations)}"]
    for key, pipe in pipes.items():
        lines.append(str(key))
        lines.extend(pipe.to_record())
    for key, station in stations.items():
        lines.append(str(key))
        lines.extend(station.to_record())
    path = _data_path(file_name)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write("\n".join(lines) + "\n")
    return path


def load_data(
    file_name: str | Path,
) -> tuple[dict[int, Pipe], dict[int, CompressorStation]]:
    """Read pipes and stations back from ``<file_name>.txt``.

    Loaded pipes get fresh ids; stations keep the ids they were saved with.
    Raises FileNotFoundError when there is no such file and ValueError when
    its contents are malformed.
    """
    with _data_path(file_name).open(encoding="utf-8") as handle:
        source = iter(handle.read().splitlines())

    header = next(source, None)
    if header is None:
        raise ValueError("data file is empty")
    counts = header.split()
    if len(counts) != 2:
        raise ValueError(f"malformed header: {header!r}")
    try:
        pipe_count, station_count = (int(count) for count in counts)
    except ValueError:
        raise ValueError(f"malformed header: {header!r}") from None
    if pipe_count < 0 or station_count < 0:
        raise ValueError(f"negative object count in header: {header!r}")

    pipes: dict[int, Pipe] = {}
    for _ in range(pipe_count):
        _read_key(source)
        pipe = Pipe.from_record(source)
        pipes[pipe.id] = pipe

    stations: dict[int, CompressorStation] = {}
    for _ in range(station_count):
        _read_key(source)
        station = CompressorStation.from_record(source)
        stations[station.id] = station

    return pipes, stations