# pipenet

A small interactive console program that keeps track of the pipes and
compressor stations in a gas transport network.

## Installation

```
pip install .
```

## Running

```
pipenet
```

`pipenet --help` prints a short description; the command takes no other
options. Pick an action from the menu by typing its number:

```
1. Add a pipe
2. Add a CS
3. View all objects
4. Delete single pipe
5. Delete single CS
6. Edit single pipe
7. Edit single CS
8. Filter pipes
9. Filter CS
10. Save
11. Load
0. Exit
```

- **Pipes** have a name, a length, a diameter and a state (under repair or
  operational). Editing a pipe changes its state.
- **Compressor stations** have a name, a total number of workshops, a number of
  running workshops and an efficiency. The usage percentage is the share of
  workshops that are running. Editing a station sets its number of running
  workshops.
- **Filtering pipes** (8) selects pipes whose name contains a given text, or
  pipes by state. The matches are listed; you can then pick some of them by id
  (enter `-1` to stop picking) and delete them or give them all a new state.
- **Saving** (10) writes every object to `<name>.txt` in the current
  directory. **Loading** (11) reads that file back and replaces what is in
  memory. Loaded pipes get new ids; stations keep the ids they were saved with.

A numeric prompt asks again until a number in the allowed range is entered.
Every value accepted at a prompt is also written to a session log,
`log_<dd-mm-YYYY>_<HH:MM:SS>.txt`, in the current directory (if that file
cannot be created, the program runs without a log). The program stops on `0`
or when input ends.

## What it does not do

Menu item 9, **Filter CS**, only reports `in develop` (or `There are no CS`
when there are none); filtering stations is not reachable from the menu. The
function `pipenet.app.filter_compressor_stations` holds that dialogue and can
be called directly with a `Console`.

## Using it as a library

```python
from pipenet.filters import check_by_name, check_pipe_in_repair, find_ids
from pipenet.pipe import Pipe
from pipenet.station import CompressorStation
from pipenet.storage import load_data, save_data

pipe = Pipe("North line", 1200.0, 1.4, in_repair=True)
station = CompressorStation("Hub", total_workshops=10, running_workshops=7, efficiency=0.9)
pipes = {pipe.id: pipe}
stations = {station.id: station}

print(station.usage_percentage())                      # 70.0
print(find_ids(pipes, check_pipe_in_repair, True))     # ids of pipes under repair
print(find_ids(stations, check_by_name, "Hu"))         # ids whose name contains "Hu"

save_data("network", pipes, stations)                  # writes network.txt
pipes, stations = load_data("network")
```

Modules:

- `pipenet.console` – `Console` (prompted, range-checked reading of integers,
  real numbers and lines, with an optional log stream) and the helpers
  `show_all`, `show_selected`, `delete_by_id`, `delete_objects`, `max_id`.
- `pipenet.pipe` – `Pipe`.
- `pipenet.station` – `CompressorStation`, with `usage_percentage` and
  `update_running_workshops`, which clamps the result to `0 … total_workshops`.
- `pipenet.filters` – `check_by_name`, `check_pipe_in_repair`,
  `check_usage_percentage`, `find_ids`, `filter_by`.
- `pipenet.storage` – `save_data` returns the path written; `load_data`
  returns `(pipes, stations)`, raises `OSError` (such as `FileNotFoundError`)
  when the file cannot be opened and `ValueError` when it is malformed.
- `pipenet.app` – the menu dialogues and `main`.

## Tests

```
pip install ".[test]"
pytest
```