"""Saving and loading the game to a small comma-separated text file."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .room import Room, World
from .state import State

PathLike = Union[str, Path]


class SaveFileError(Exception):
    """A save file could not be written, read or understood."""


def _swap_pairs(data: str) -> str:
    chars = list(data)
    chars[0:len(chars) - 1:2], chars[1::2] = chars[1::2], chars[0:len(chars) - 1:2]
    return "".join(chars)


def encrypt(data: str) -> str:
    """Obscure ``data`` by swapping each pair of neighbouring characters."""
    return _swap_pairs(data)


def decrypt(data: str) -> str:
    """Undo :func:`encrypt`."""
    return _swap_pairs(data)


def save_game(state: State, world: World, path: PathLike) -> None:
    """Write the player's room, inventory and every room's objects to ``path``.

    The first line names the current room, the second lists the carried
    objects' keywords, and each further line names a room followed by the
    keywords of the objects in it. Every field is encrypted.
    """
    lines = [encrypt(state.current_room.name)]
    lines.append(",".join(encrypt(obj.keyword) for obj in state.inventory))
    for room in world.rooms:
        fields = [encrypt(room.name)]
        fields.extend(encrypt(obj.keyword) for obj in room.objects)
        lines.append(",".join(fields))
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write("\n".join(lines) + "\n")
    except OSError as exc:
        raise SaveFileError(f"could not write {path}: {exc}") from exc


def _room_named(world: World, name: str) -> Room:
    try:
        return world.find_room(name)
    except KeyError:
        raise SaveFileError(f"unknown room in save file: {name!r}") from None


def load_game(world: World, path: PathLike) -> State:
    """Read a save file into ``world`` and return the restored player state.

    Room contents listed in the file replace those in the world. Keywords of
    objects the world does not know are ignored. The world is left untouched
    if the file names a room that does not exist.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SaveFileError(f"Invalid file: {path}") from exc

    lines = text.splitlines()
    if not lines:
        raise SaveFileError(f"save file is empty: {path}")

    start = _room_named(world, decrypt(lines[0]))
    carried = lines[1].split(",") if len(lines) > 1 and lines[1] else []

    placements: list[tuple[Room, list[str]]] = []
    for line in lines[2:]:
        if not line:
            continue
        name, *keywords = line.split(",")
        placements.append((_room_named(world, decrypt(name)), keywords))

    state = State(start)
    for keyword in carried:
        obj = world.valid_object(decrypt(keyword))
        if obj is not None:
            state.add_item(obj)

    for room, keywords in placements:
        room.clear_objects()
        for keyword in keywords:
            obj = world.valid_object(decrypt(keyword))
            if obj is not None:
                world.place_object(room, obj)
    return state