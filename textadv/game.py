"""The command loop and main menu of the adventure."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, NamedTuple, Optional, TextIO, Union

from .gameobject import GameObject
from .room import Direction, World
from .savefile import SaveFileError, load_game, save_game
from .state import State
from .wordwrap import WordWrapper
from .world import (
    BAD_COMMAND,
    DROPPED,
    GOT,
    IN_INVENTORY,
    IN_ROOM,
    NO_OBJECT,
    NOT_FOUND,
    NOT_IN_INVENTORY,
    NOT_IN_ROOM,
    build_world,
)

AUTOSAVE_PATH = "autosave.csv"
PROMPT = "> "

_MOVES = {
    "n": Direction.NORTH,
    "south": Direction.SOUTH,
    "s": Direction.SOUTH,
    "east": Direction.EAST,
    "e": Direction.EAST,
    "west": Direction.WEST,
    "w": Direction.WEST,
}


class _Lookup(NamedTuple):
    obj: Optional[GameObject]
    in_room: bool
    in_inventory: bool
    unknown: bool


_NO_LOOKUP = _Lookup(None, False, False, True)


class Game:
    """Reads commands, acts on them and reports the result."""

    def __init__(
        self,
        world: World,
        state: State | None = None,
        wrapper: WordWrapper | None = None,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.world = world
        self.state = state if state is not None else State(world.rooms[0])
        self.wrapper = wrapper if wrapper is not None else WordWrapper()
        self.input_func = input_func if input_func is not None else input
        self._output = output
        self.autosave_path: Union[str, Path] = AUTOSAVE_PATH

    def _write(self, text: str) -> None:
        out = self._output if self._output is not None else self.wrapper.stream
        out.write(text)

    def _say(self, text: str) -> None:
        self.wrapper.wrap_out(text)
        self.wrapper.end_para()

    def _read(self) -> str:
        return self.input_func(PROMPT)

    def find_object(self, key: str) -> _Lookup:
        """Look ``key`` up in the inventory and then the current room.

        An object in the room takes precedence over one carried. ``unknown``
        is true only when nothing was found and no object has that keyword.
        """
        found: GameObject | None = None
        in_inventory = False
        in_room = False
        for obj in self.state.inventory:
            if obj.keyword == key:
                found, in_inventory = obj, True
        for obj in self.state.current_room.objects:
            if obj.keyword == key:
                found, in_room = obj, True
        unknown = not (in_room or in_inventory) and not self.world.is_valid(key)
        return _Lookup(found, in_room, in_inventory, unknown)

    def handle(self, command: str) -> bool:
        """Carry out one command; return False once the player quits."""
        verb, sep, key = command.partition(" ")
        lookup = self.find_object(key) if sep else _NO_LOOKUP

        direction = Direction.NORTH if command == "north" else _MOVES.get(verb)
        if direction is not None:
            self.state.go_to(self.state.current_room.exit(direction), self.wrapper)
            return True

        if verb == "quit":
            return False

        actions = {
            "get": lambda: self._get(lookup),
            "drop": lambda: self._drop(lookup),
            "examine": lambda: self._examine(lookup),
            "inventory": lambda: self.state.display_inventory(self.wrapper),
            "save": self._save_prompt,
            "load": self._load_prompt,
        }
        action = actions.get(verb)
        if action is None:
            self._say(BAD_COMMAND)
        else:
            action()
        return True

    def _get(self, lookup: _Lookup) -> None:
        if not lookup.unknown and not lookup.in_inventory and not lookup.in_room:
            self._say(NOT_FOUND)
        elif lookup.unknown:
            self._say(NO_OBJECT)
        elif not lookup.in_room:
            self._say(NOT_IN_ROOM)
        elif lookup.in_inventory:
            self._say(IN_INVENTORY)
        else:
            self.state.add_item(lookup.obj)
            self.state.current_room.remove_object(lookup.obj)
            self._say(GOT)

    def _drop(self, lookup: _Lookup) -> None:
        if lookup.unknown:
            self._say(NO_OBJECT)
        elif lookup.in_room:
            self._say(IN_ROOM)
        elif not lookup.in_inventory:
            self._say(NOT_IN_INVENTORY)
        else:
            self.state.remove_item(lookup.obj)
            self.world.place_object(self.state.current_room, lookup.obj)
            self._say(DROPPED)

    def _examine(self, lookup: _Lookup) -> None:
        self.wrapper.end_para()
        if lookup.unknown:
            self._say(NO_OBJECT)
        elif lookup.obj is None:
            self._say(NOT_FOUND)
        else:
            self._say(lookup.obj.name)
            lookup.obj.describe(self.wrapper)

    def _save(self, path: Union[str, Path]) -> bool:
        try:
            save_game(self.state, self.world, path)
        except SaveFileError:
            self._write("Error saving game\n")
            return False
        self._write("Game saved successfully\n")
        return True

    def _load(self, path: Union[str, Path]) -> bool:
        try:
            self.state = load_game(self.world, path)
        except SaveFileError as exc:
            self._write(f"{exc}\n\n")
            return False
        return True

    def _save_prompt(self) -> None:
        self._write("\n***SAVE***\n")
        self._write("Please enter a file name: ")
        self._save(self._read())

    def _load_prompt(self) -> None:
        self._write("\n***LOAD***\n")
        self._write("Please enter a file name: ")
        if self._load(self._read()):
            self._write("\nLoad successful\n")
            self.state.announce_location(self.wrapper)
        else:
            self._write("\nError loading save file\n")

    def menu(self) -> None:
        """Ask whether to start a new game or load a saved one."""
        while True:
            self._write("MAIN MENU:\n\n(S)tart new game   |   (L)oad game\n\n")
            try:
                answer = self._read()
            except EOFError:
                return
            choice = answer[:1].lower()
            if choice == "s":
                self._write("\nStarting new game\n\n")
                return
            if choice == "l":
                self._write("\n***LOAD***\n")
                self._write("Enter the file name of your save file: ")
                try:
                    path = self._read()
                except EOFError:
                    return
                if not self._load(path):
                    self._write("\nStarting new game\n")
                return
            self._write("\nPlease enter:\nS to start a new game\nL to load a save file\n")

    def run(self) -> None:
        """Describe the start, play until the player quits, then autosave."""
        self.state.announce_location(self.wrapper)
        try:
            while self.handle(self._read()):
                pass
        except EOFError:
            pass
        self._save(self.autosave_path)


def main(argv: list[str] | None = None) -> int:
    """Play the adventure on the console."""
    parser = argparse.ArgumentParser(prog="textadv", description="Play a small text adventure.")
    parser.parse_args(argv)
    game = Game(build_world(), wrapper=WordWrapper())
    game.menu()
    game.run()
    return 0