"""The game's text and the map it is played on."""

from __future__ import annotations

from .gameobject import GameObject
from .room import Direction, Room, World

# Rooms
CROSSROAD_NAME = "Crossroad"
CROSSROAD_DESC = (
    "It's really quite boring here, but then, it's just for testing really. "
    "A strangled whisper scratches at your psyche. \n"
    "There's a passage to the North, South, East and West."
)
BLUE_ROOM_NAME = "Blue Room"
BLUE_ROOM_DESC = "It's blue. That's about all though. \nThere's a passage to the south."
RED_ROOM_NAME = "Red Room"
RED_ROOM_DESC = "It's red. That's about all though. \nThere's a passage to the north."
GREEN_ROOM_NAME = "Green Room"
GREEN_ROOM_DESC = "It's green. That's about all though. \nThere's a passage to the west."
PURPLE_ROOM_NAME = "Purple Room"
PURPLE_ROOM_DESC = (
    "It's purple. \nThat's about all though, except from some fluffy pillows. \n"
    "There's a passage to the east."
)

# Objects
LARGE_CUP = ("Large cup", "large cup",
             "A rather sizable cup that draws the eye.\n"
             "It feels as if it calls to you to pick it up.")
SHINY_BOWL = ("Shiny bowl", "shiny bowl",
              "A very shiny bowl that seems to be glaring at you.\n"
              "Light seems the warp around it; that doesn't seem very utilitarian.")
FLUFFY_PILLOW = ("Fluffy pillow", "fluffy pillow",
                 "A scrumptiously fluffy pillow.\n"
                 "You can't tell if your hunger is yours or the pillow's\n"
                 "As you look at it you feel a bone-deep weariness permeate your being.")
SILVER_SPOON = ("Silver spoon", "silver spoon",
                "A spoon made of solid silver.\n"
                "You wonder if someone rich came through here.")

# Error messages
IN_ROOM = "The object is already in the room"
NOT_IN_ROOM = "You could not find the object in the room."
IN_INVENTORY = "You cannot carry any more of those"
NOT_IN_INVENTORY = "You couldn't find the object within your inventory"
EMPTY_INVENTORY = "Your inventory is empty."
NO_OBJECT = "You don't know what you're looking for."
NOT_FOUND = "You could not find the object here."
BAD_EXIT = "You can't go that way."
BAD_COMMAND = "I don't understand that."

# Completion messages
DROPPED = "You dropped the object"
GOT = "You picked up the object"


def build_world() -> World:
    """Create the map: a crossroad with one room in each direction."""
    world = World()
    crossroad = world.add_room(Room(CROSSROAD_NAME, CROSSROAD_DESC))
    blue = world.add_room(Room(BLUE_ROOM_NAME, BLUE_ROOM_DESC))
    red = world.add_room(Room(RED_ROOM_NAME, RED_ROOM_DESC))
    green = world.add_room(Room(GREEN_ROOM_NAME, GREEN_ROOM_DESC))
    purple = world.add_room(Room(PURPLE_ROOM_NAME, PURPLE_ROOM_DESC))

    crossroad.set_exit(Direction.NORTH, blue)
    crossroad.set_exit(Direction.SOUTH, red)
    crossroad.set_exit(Direction.EAST, green)
    crossroad.set_exit(Direction.WEST, purple)
    blue.set_exit(Direction.SOUTH, crossroad)
    red.set_exit(Direction.NORTH, crossroad)
    green.set_exit(Direction.WEST, crossroad)
    purple.set_exit(Direction.EAST, crossroad)

    world.place_object(crossroad, GameObject(*LARGE_CUP))
    world.place_object(crossroad, GameObject(*SILVER_SPOON))
    world.place_object(green, GameObject(*LARGE_CUP))
    world.place_object(purple, GameObject(*SHINY_BOWL))
    world.place_object(purple, GameObject(*FLUFFY_PILLOW))
    return world