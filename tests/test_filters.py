from pipenet.filters import (
    check_by_name,
    check_pipe_in_repair,
    check_usage_percentage,
    filter_by,
    find_ids,
)
from pipenet.pipe import Pipe
from pipenet.station import CompressorStation


def pipes():
    return {
        1: Pipe("north main", 10.0, 1.0, True),
        2: Pipe("south branch", 5.0, 0.5, False),
        3: Pipe("north spur", 2.0, 0.3, False),
    }


def test_check_by_name_substring():
    pipe = Pipe("north main")
    assert check_by_name(pipe, "main") is True
    assert check_by_name(pipe, "") is True
    assert check_by_name(pipe, "Main") is False


def test_check_pipe_in_repair():
    assert check_pipe_in_repair(Pipe(in_repair=True), True) is True
    assert check_pipe_in_repair(Pipe(in_repair=True), False) is False


def test_check_usage_percentage_inclusive():
    station = CompressorStation("s", 4, 2, 1.0)
    assert check_usage_percentage(station, station.usage_percentage()) is True
    assert check_usage_percentage(station, station.usage_percentage() + 1) is False


def test_find_ids_by_name():
    assert find_ids(pipes(), check_by_name, "north") == {1, 3}


def test_find_ids_by_state():
    objects = pipes()
    repairing = find_ids(objects, check_pipe_in_repair, True)
    working = find_ids(objects, check_pipe_in_repair, False)
    assert repairing == {1}
    assert repairing | working == set(objects)
    assert not repairing & working


def test_find_ids_stations():
    stations = {
        7: CompressorStation("a", 4, 4, 1.0),
        8: CompressorStation("b", 4, 0, 1.0),
    }
    assert find_ids(stations, check_usage_percentage, 100.0) == {7}
    assert find_ids(stations, check_usage_percentage, 0.0) == {7, 8}


def test_filter_by_extends_existing_set():
    ids = {2}
    result = filter_by(ids, pipes(), check_by_name, "spur")
    assert ids == {2, 3}
    assert result == ids
    result.add(99)
    assert 99 not in ids


def test_filter_by_no_match_keeps_ids():
    ids = set()
    assert filter_by(ids, pipes(), check_by_name, "east") == set()
    assert ids == set()