"""Objects that can lie in rooms or be carried by the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from .wordwrap import WordWrapper


@dataclass(frozen=True, order=True)
class GameObject:
    """An item in the game, identified and compared by its keyword."""

    name: str = field(compare=False)
    keyword: str
    description: str = field(compare=False)

    def describe(self, wrapper: WordWrapper) -> None:
        """Write the object's description as one paragraph."""
        wrapper.wrap_out(self.description)
        wrapper.end_para()