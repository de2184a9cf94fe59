"""Interactive menu for managing pipes and compressor stations."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, MutableMapping
from contextlib import ExitStack
from datetime import datetime
from typing import Protocol, TypeVar

from .console import (
    INT_MAX,
    Console,
    delete_by_id,
    delete_objects,
    show_all,
    show_selected,
)
from .filters import (
    check_by_name,
    check_pipe_in_repair,
    check_usage_percentage,
    filter_by,
)
from .pipe import Pipe
from .station import CompressorStation
from .storage import load_data, save_data


class _Editable(Protocol):
    id: int

    def edit(self, console: Console) -> None: ...

    def describe(self) -> str: ...


T = TypeVar("T", bound=_Editable)

_COMMANDS = (
    "1. Add a pipe\n"
    "2. Add a CS\n"
    "3. View all objects\n"
    "4. Delete single pipe\n"
    "5. Delete single CS\n"
    "6. Edit single pipe\n"
    "7. Edit single CS\n"
    "8. Filter pipes\n"
    "9. Filter CS\n"
    "10. Save\n"
    "11. Load\n"
    "0. Exit\n"
    "\nEnter your choice: "
)


def get_new_ids(ids: Iterable[int], console: Console) -> set[int]:
    """Let the user pick ids out of ``ids`` until -1 is entered."""
    allowed = set(ids)
    selected: set[int] = set()
    while True:
        console.write("Input -1 to close.\nInput selected id: ")
        object_id = console.read_int(-1, INT_MAX)
        if object_id == -1:
            return selected
        if object_id in allowed:
            selected.add(object_id)
        else:
            console.write("There is no object with that id\n")


def pipe_input_edit(console: Console) -> bool:
    """Ask for a pipe state; True means under repair."""
    console.write(
        "Выберите состояние трубы:\n1. Труба находится в ремонте\n2. Труба работает\n"
    )
    return console.read_int(1, 2) == 1


def choose(console: Console) -> int:
    """Ask whether to act on all objects or on some of them."""
    console.write("1.Choose all objects\n2.Choose some objects\n")
    return console.read_int(1, 3)


def delete_or_edit(console: Console) -> int:
    """Ask whether to delete or edit the selected objects."""
    console.write("1.Delete objects\n2.Edit objects\n")
    return console.read_int(1, 3)


def filter_pipes(pipes: MutableMapping[int, Pipe], console: Console) -> None:
    """Select pipes by a filter, then optionally delete or edit some of them."""
    if not pipes:
        console.write("There are no Pipes\n")
        return
    console.write(
        '1.Filter by name\n2.Filter by "In repearing"\n3.Filter by "Working"\n'
    )
    choice = console.read_int(1, 4)
    ids: set[int] = set()
    if choice == 1:
        console.write("Input name of pipe: ")
        name = console.read_line()
        filter_by(ids, pipes, check_by_name, name)
    elif choice == 2:
        filter_by(ids, pipes, check_pipe_in_repair, True)
    elif choice == 3:
        filter_by(ids, pipes, check_pipe_in_repair, False)

    if not show_selected(ids, pipes, console):
        return
    console.write("1.close\n2.filter pipes\n")
    if console.read_int(1, 3) != 2:
        return
    ids = get_new_ids(ids, console)
    action = delete_or_edit(console)
    if action == 1:
        delete_objects(pipes, ids)
    elif action == 2:
        console.write("Choose status: 1.In repairing, 2.Working\n")
        in_repair = pipe_input_edit(console)
        for object_id in ids:
            pipes[object_id].in_repair = in_repair


def filter_compressor_stations(
    stations: MutableMapping[int, CompressorStation], console: Console
) -> None:
    """Select stations by a filter, then optionally delete or edit them."""
    console.write(
        '1.Filter by name\n2.Filter by "percent of used worcstataoins >= "\n'
    )
    choice = console.read_int(1, 5)
    ids: set[int] = set()
    if choice == 1:
        console.write("Input name of pipe: ")
        name = console.read_line()
        filter_by(ids, stations, check_by_name, name)
    elif choice == 2:
        percent = console.read_float(0.0, 100.0)
        filter_by(ids, stations, check_usage_percentage, percent)

    if not show_selected(ids, stations, console):
        return
    console.write("1.close\n2.filter CS\n")
    if console.read_int(1, 3) != 2:
        return
    if choose(console) == 2:
        ids = get_new_ids(ids, console)
    action = delete_or_edit(console)
    if action == 1:
        delete_objects(stations, ids)
    elif action == 2:
        console.write("Input number of workshops to add: ")
        delta = console.read_int(-INT_MAX, INT_MAX)
        for object_id in sorted(ids):
            stations[object_id].update_running_workshops(delta, console)


def print_commands(console: Console) -> None:
    """Show the main menu."""
    console.write(_COMMANDS)


def add_object(
    objects: MutableMapping[int, T],
    factory: Callable[[Console], T],
    console: Console,
) -> None:
    """Create an object with ``factory`` and store it under its id."""
    new_object = factory(console)
    if new_object.id in objects:
        console.write(
            "Failed to add object. An object with the same ID already exists.\n"
        )
        return
    objects[new_object.id] = new_object
    console.write("Object successfully added.\n")


def delete_object(objects: MutableMapping[int, T], console: Console) -> None:
    """Show the objects and delete the one whose id the user enters."""
    if not show_all(objects, console):
        return
    console.write("Select the object ID to delete: ")
    object_id = console.read_int(0, INT_MAX)
    if delete_by_id(objects, object_id):
        console.write("Object was successfully deleted.\n")
    else:
        console.write("No object found with the specified ID.\n")


def edit_object(objects: MutableMapping[int, T], console: Console) -> None:
    """Show the objects and edit the one whose id the user enters."""
    if not show_all(objects, console):
        return
    console.write("Enter the object ID to edit: ")
    object_id = console.read_int(0, INT_MAX)
    target = objects.get(object_id)
    if target is None:
        console.write("No object found with the specified ID.\n")
        return
    target.edit(console)
    console.write("Object was successfully edited.\n")


def _run(console: Console) -> int:
    pipes: dict[int, Pipe] = {}
    stations: dict[int, CompressorStation] = {}
    while True:
        print_commands(console)
        choice = console.read_int(0, 12)
        if choice == 1:
            add_object(pipes, Pipe.from_console, console)
        elif choice == 2:
            add_object(stations, CompressorStation.from_console, console)
        elif choice == 3:
            console.write("Pipes:\n")
            show_all(pipes, console)
            console.write("Compresor stations:\n")
            show_all(stations, console)
        elif choice == 4:
            delete_object(pipes, console)
        elif choice == 5:
            delete_object(stations, console)
        elif choice == 6:
            edit_object(pipes, console)
        elif choice == 7:
            edit_object(stations, console)
        elif choice == 8:
            filter_pipes(pipes, console)
        elif choice == 9:
            console.write("in develop\n" if stations else "There are no CS\n")
        elif choice == 10:
            console.write("Input name of file for saving: ")
            name = console.read_line()
            try:
                save_data(name, pipes, stations)
            except OSError:
                console.write("Data was not saved\n")
            else:
                console.write("Data was saved\n")
        elif choice == 11:
            console.write("Input name of file for loading: ")
            name = console.read_line()
            try:
                pipes, stations = load_data(name)
            except OSError:
                console.write("There is no file with that name\n")
            except ValueError:
                console.write("Data was not loaded: the file is malformed\n")
            else:
                console.write("Data was loaded\n")
        elif choice == 0:
            console.write("Goodbye\n")
            return 0
        else:
            console.write("Invalid choice\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu, logging accepted input to a timestamped file."""
    parser = argparse.ArgumentParser(
        prog="pipenet",
        description="Manage pipes and compressor stations of a gas network.",
    )
    parser.parse_args(argv)
    stamp = datetime.now().strftime("%d-%m-%Y_%H:%M:%S")
    with ExitStack() as stack:
        try:
            log = stack.enter_context(
                open(f"log_{stamp}.txt", "w", encoding="utf-8")
            )
        except OSError:
            log = None
        console = Console(log=log)
        try:
            return _run(console)
        except EOFError:
            console.write("\nGoodbye\n")
            return 0