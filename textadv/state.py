"""The player's position and inventory."""

from __future__ import annotations

from .gameobject import GameObject
from .room import Room
from .wordwrap import WordWrapper
from .world import BAD_EXIT, EMPTY_INVENTORY


class State:
    """Where the player is and what the player carries."""

    def __init__(self, current_room: Room) -> None:
        self.current_room = current_room
        self.inventory: list[GameObject] = []

    def announce_location(self, wrapper: WordWrapper) -> None:
        """Describe the room the player is in."""
        self.current_room.describe(wrapper)

    def go_to(self, target: Room | None, wrapper: WordWrapper) -> bool:
        """Move to ``target`` and describe it; report a bad exit if None.

        Returns whether the player moved.
        """
        if target is None:
            wrapper.wrap_out(BAD_EXIT)
            wrapper.end_para()
            return False
        self.current_room = target
        self.announce_location(wrapper)
        return True

    def display_inventory(self, wrapper: WordWrapper) -> None:
        """Write the names of the carried objects, or say there are none."""
        if not self.inventory:
            wrapper.wrap_out(EMPTY_INVENTORY)
            wrapper.end_para()
            return
        for obj in self.inventory:
            wrapper.wrap_out(obj.name)
            wrapper.end_para()

    def add_item(self, obj: GameObject) -> None:
        self.inventory.append(obj)

    def remove_item(self, obj: GameObject) -> None:
        """Remove every occurrence of this very object from the inventory."""
        self.inventory = [o for o in self.inventory if o is not obj]