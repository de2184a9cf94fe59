"""Predicates and helpers for selecting pipes and stations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .pipe import Pipe
from .station import CompressorStation

T = TypeVar("T")
P = TypeVar("P")


def check_by_name(obj: Any, name: str) -> bool:
    """True when ``name`` occurs in the object's name."""
    return name in obj.name


def check_pipe_in_repair(pipe: Pipe, in_repair: bool) -> bool:
    """True when the pipe's repair state equals ``in_repair``."""
    return pipe.in_repair == in_repair


def check_usage_percentage(station: CompressorStation, percent: float) -> bool:
    """True when the station's usage is at least ``percent``."""
    return station.usage_percentage() >= percent


def find_ids(
    objects: Mapping[int, T], predicate: Callable[[T, P], bool], param: P
) -> set[int]:
    """Return the ids of objects for which the predicate holds."""
    return {object_id for object_id, obj in objects.items() if predicate(obj, param)}


def filter_by(
    ids: set[int],
    objects: Mapping[int, T],
    predicate: Callable[[T, P], bool],
    param: P,
) -> set[int]:
    """Add matching ids to ``ids`` and return a copy of the result."""
    ids.update(find_ids(objects, predicate, param))
    return set(ids)