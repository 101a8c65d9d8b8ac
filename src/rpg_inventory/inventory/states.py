from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional

if TYPE_CHECKING:
    from ..items.models import Item
    from .inventory import Inventory

logger = logging.getLogger(__name__)

# Slot ceiling for the normal state; unrelated to the inventory's max weight.
SLOT_LIMIT = 20

DEFAULT_LOCK_REASON = "Inventory locked"


class StateKind(str, Enum):
    NORMAL = "normal"
    OVERFLOW = "overflow"
    WAREHOUSE = "warehouse"
    LOCKED = "locked"


@dataclass(frozen=True)
class Admission:
    """
    Result of asking a state whether an add/remove may proceed.

    ``next_state`` is the state the inventory must switch to, or None to keep
    the current one. A transition can accompany a denial (a full inventory
    rejects the add and moves to overflow). Truthy iff ``allowed``.
    """

    allowed: bool
    next_state: Optional["InventoryState"] = None

    def __bool__(self) -> bool:
        return self.allowed


class InventoryState(ABC):
    """
    Admission gate for inventory mutations.

    States never mutate the inventory. They read its item count and return an
    :class:`Admission`; the inventory applies any transition. The variant set
    is closed: normal, overflow, warehouse and locked.
    """

    kind: ClassVar[StateKind]

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def try_add(self, item: "Item", inventory: "Inventory") -> Admission:
        raise NotImplementedError

    @abstractmethod
    def try_remove(self, item: "Item", inventory: "Inventory") -> Admission:
        raise NotImplementedError


@dataclass(frozen=True)
class NormalState(InventoryState):
    """Accepts items while below the slot ceiling."""

    kind: ClassVar[StateKind] = StateKind.NORMAL

    @property
    def description(self) -> str:
        return f"Normal (up to {SLOT_LIMIT} slots)"

    def try_add(self, item: "Item", inventory: "Inventory") -> Admission:
        count = inventory.get_item_count()
        if count >= SLOT_LIMIT:
            logger.warning("Inventory full (%d/%d): cannot add %s", count, SLOT_LIMIT, item)
            return Admission(False, OverflowState())
        logger.debug("Adding %s (%d/%d)", item, count + 1, SLOT_LIMIT)
        return Admission(True)

    def try_remove(self, item: "Item", inventory: "Inventory") -> Admission:
        remaining = inventory.get_item_count() - 1
        logger.debug("Removing %s (%d left)", item, remaining)
        if remaining < SLOT_LIMIT:
            return Admission(True, NormalState())
        return Admission(True)


@dataclass(frozen=True)
class OverflowState(InventoryState):
    """Full inventory: removals only. Any single removal returns to normal."""

    kind: ClassVar[StateKind] = StateKind.OVERFLOW

    @property
    def description(self) -> str:
        return "Overflow (removal only)"

    def try_add(self, item: "Item", inventory: "Inventory") -> Admission:
        logger.warning("Inventory overflowing: cannot add %s, remove something first", item)
        return Admission(False)

    def try_remove(self, item: "Item", inventory: "Inventory") -> Admission:
        # Back to normal even if the count is still at or above the ceiling.
        logger.debug("Removing %s from overflowing inventory", item)
        return Admission(True, NormalState())


@dataclass(frozen=True)
class WarehouseState(InventoryState):
    """No slot ceiling."""

    kind: ClassVar[StateKind] = StateKind.WAREHOUSE

    @property
    def description(self) -> str:
        return "Warehouse (unlimited slots)"

    def try_add(self, item: "Item", inventory: "Inventory") -> Admission:
        logger.debug("[warehouse] Adding %s", item)
        return Admission(True)

    def try_remove(self, item: "Item", inventory: "Inventory") -> Admission:
        logger.debug("[warehouse] Removing %s", item)
        return Admission(True)


@dataclass(frozen=True)
class LockedState(InventoryState):
    """Rejects every mutation until unlocked."""

    kind: ClassVar[StateKind] = StateKind.LOCKED

    reason: str = DEFAULT_LOCK_REASON

    @property
    def description(self) -> str:
        return f"Locked ({self.reason})"

    def try_add(self, item: "Item", inventory: "Inventory") -> Admission:
        logger.warning("Inventory locked (%s): cannot add %s", self.reason, item)
        return Admission(False)

    def try_remove(self, item: "Item", inventory: "Inventory") -> Admission:
        logger.warning("Inventory locked (%s): cannot remove %s", self.reason, item)
        return Admission(False)


__all__ = [
    "SLOT_LIMIT",
    "DEFAULT_LOCK_REASON",
    "StateKind",
    "Admission",
    "InventoryState",
    "NormalState",
    "OverflowState",
    "WarehouseState",
    "LockedState",
]
