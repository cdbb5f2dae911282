import io

import pytest

from textadv.gameobject import GameObject
from textadv.room import Direction, Room, World
from textadv.wordwrap import WordWrapper

CUP = GameObject("Large cup", "large cup", "A rather sizable cup that draws the eye.")
BOWL = GameObject("Shiny bowl", "shiny bowl", "A very shiny bowl that seems to be glaring at you.")


def output_of(room, method):
    buf = io.StringIO()
    getattr(room, method)(WordWrapper(80, buf))
    return buf.getvalue()


def test_new_room_has_no_exits_or_objects():
    room = Room("Blue Room", "It's blue.")
    assert all(room.exit(d) is None for d in Direction)
    assert room.objects == []


def test_set_and_get_exit():
    a = Room("Crossroad", "x")
    b = Room("Blue Room", "y")
    a.set_exit(Direction.NORTH, b)
    assert a.exit(Direction.NORTH) is b
    assert a.exit(Direction.SOUTH) is None
    a.set_exit(Direction.NORTH, None)
    assert a.exit(Direction.NORTH) is None


def test_display_objects_empty():
    room = Room("Red Room", "It's red.")
    assert "You see no objects." in output_of(room, "display_objects")


def test_display_objects_lists_names_in_order():
    room = Room("Red Room", "It's red.")
    room.add_object(CUP)
    room.add_object(BOWL)
    out = output_of(room, "display_objects")
    assert "Objects you can see:" in out
    assert out.index("Large cup") < out.index("Shiny bowl")


def test_describe_contains_name_description_and_objects():
    room = Room("Green Room", "It's green. That's about all though.")
    room.add_object(CUP)
    out = output_of(room, "describe")
    assert out.index("Green Room") < out.index("It's green.") < out.index("Large cup")
    assert out.endswith("\n\n")


def test_remove_object_removes_only_that_instance():
    room = Room("Green Room", "x")
    twin = GameObject("Large cup", "large cup", "Another cup.")
    room.add_object(CUP)
    room.add_object(twin)
    room.remove_object(CUP)
    assert len(room.objects) == 1
    assert room.objects[0] is twin


def test_remove_object_removes_all_occurrences_of_instance():
    room = Room("Green Room", "x")
    room.add_object(CUP)
    room.add_object(BOWL)
    room.add_object(CUP)
    room.remove_object(CUP)
    assert room.objects == [BOWL]


def test_remove_missing_object_is_harmless():
    room = Room("Green Room", "x")
    room.add_object(BOWL)
    room.remove_object(CUP)
    assert room.objects == [BOWL]


def test_clear_objects():
    room = Room("Green Room", "x")
    room.add_object(CUP)
    room.add_object(BOWL)
    room.clear_objects()
    assert room.objects == []


def test_world_add_room_keeps_order_and_returns_room():
    world = World()
    a = world.add_room(Room("A", "a"))
    b = world.add_room(Room("B", "b"))
    assert world.rooms == [a, b]


def test_add_valid_object_deduplicates_by_keyword():
    world = World()
    twin = GameObject("Big cup", "large cup", "Another cup.")
    world.add_valid_object(CUP)
    world.add_valid_object(twin)
    assert world.valid_objects == [CUP]
    assert world.valid_objects[0] is CUP


def test_place_object_registers_and_adds():
    world = World()
    room = world.add_room(Room("A", "a"))
    world.place_object(room, BOWL)
    assert room.objects == [BOWL]
    assert world.is_valid("shiny bowl")
    assert not world.is_valid("large cup")


def test_find_room_returns_last_match():
    world = World()
    world.add_room(Room("Same", "first"))
    second = world.add_room(Room("Same", "second"))
    assert world.find_room("Same") is second


def test_find_room_missing_raises():
    world = World()
    world.add_room(Room("A", "a"))
    with pytest.raises(KeyError):
        world.find_room("Nowhere")


def test_valid_object_lookup():
    world = World()
    world.add_valid_object(CUP)
    assert world.valid_object("large cup") is CUP
    assert world.valid_object("shiny bowl") is None


def test_direction_values():
    assert Direction("north") is Direction.NORTH
    assert {d.value for d in Direction} == {"north", "south", "east", "west"}