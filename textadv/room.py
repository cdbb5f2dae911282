"""Rooms, their exits and contents, and the world that holds them."""

from __future__ import annotations

from enum import Enum

from .gameobject import GameObject
from .wordwrap import WordWrapper

OBJECTS_HEADER = "Objects you can see:"
NO_OBJECTS = "You see no objects."


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Room:
    """A location in the game with up to four exits and a list of objects."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.objects: list[GameObject] = []
        self._exits: dict[Direction, Room] = {}

    def __repr__(self) -> str:
        return f"Room({self.name!r})"

    def exit(self, direction: Direction) -> Room | None:
        """Return the room in ``direction``, or None if there is no exit."""
        return self._exits.get(direction)

    def set_exit(self, direction: Direction, room: Room | None) -> None:
        """Connect ``room`` in ``direction``; None removes the exit."""
        if room is None:
            self._exits.pop(direction, None)
        else:
            self._exits[direction] = room

    def describe(self, wrapper: WordWrapper) -> None:
        """Write the room's name, description and visible objects."""
        wrapper.wrap_out(self.name)
        wrapper.end_para()
        wrapper.wrap_out(self.description)
        wrapper.end_para()
        self.display_objects(wrapper)
        wrapper.end_para()

    def display_objects(self, wrapper: WordWrapper) -> None:
        """Write the names of the objects in the room."""
        if not self.objects:
            wrapper.wrap_out(NO_OBJECTS)
            wrapper.end_para()
            return
        wrapper.wrap_out(OBJECTS_HEADER)
        wrapper.end_para()
        for obj in self.objects:
            wrapper.wrap_out(obj.name)
            wrapper.end_para()

    def add_object(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def remove_object(self, obj: GameObject) -> None:
        """Remove every occurrence of this very object from the room."""
        self.objects = [o for o in self.objects if o is not obj]

    def clear_objects(self) -> None:
        self.objects.clear()


class World:
    """All rooms, plus one registered object for each known keyword."""

    def __init__(self) -> None:
        self.rooms: list[Room] = []
        self.valid_objects: list[GameObject] = []

    def add_room(self, room: Room) -> Room:
        self.rooms.append(room)
        return room

    def add_valid_object(self, obj: GameObject) -> None:
        """Register ``obj`` unless an object with its keyword is known."""
        if not self.is_valid(obj.keyword):
            self.valid_objects.append(obj)

    def place_object(self, room: Room, obj: GameObject) -> None:
        """Register ``obj`` and put it in ``room``."""
        self.add_valid_object(obj)
        room.add_object(obj)

    def is_valid(self, keyword: str) -> bool:
        return any(obj.keyword == keyword for obj in self.valid_objects)

    def find_room(self, name: str) -> Room:
        """Return the last room called ``name``; raise KeyError if none."""
        found = None
        for room in self.rooms:
            if room.name == name:
                found = room
        if found is None:
            raise KeyError(f"no room named {name!r}")
        return found

    def valid_object(self, keyword: str) -> GameObject | None:
        """Return the registered object for ``keyword``, or None."""
        return next((obj for obj in self.valid_objects if obj.keyword == keyword), None)