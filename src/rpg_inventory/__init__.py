"""
rpg_inventory package root.

Slot-limited item containers with a pluggable admission state machine and
display-time organization strategies. Domain logic lives in ``items`` and
``inventory``; ``cli`` is the only module that prints.
"""

__version__ = "0.1.0"

__all__ = [
    "items",
    "inventory",
]
