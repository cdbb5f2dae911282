"""A small console text adventure with rooms, objects, an inventory and save files."""

__version__ = "0.1.0"