from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..items.models import Item, ItemKind, ItemRarity, kind_of
from .states import (
    DEFAULT_LOCK_REASON,
    Admission,
    InventoryState,
    LockedState,
    NormalState,
    WarehouseState,
)
from .strategies import NoSortingStrategy, OrganizationStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryStatistics:
    total_value: int
    average_weight: float
    by_kind: Dict[ItemKind, int]
    # Only rarities that are present, in rarity order
    by_rarity: Dict[ItemRarity, int]
    # Items that are none of the four kinds
    unclassified: int = 0


class Inventory:
    """
    Slot-limited item container driven by an admission state machine.

    - Admission: every add/remove is first put to the current state, which
      allows or denies it and may request a transition (see ``states``).
    - Organization: listing applies the current strategy to a snapshot of
      the items; storage order is never changed by it.

    Runtime operations report failure through their boolean result and never
    raise. ``max_weight`` is informational; only the slot ceiling is enforced.
    """

    def __init__(
        self,
        owner_name: str,
        max_weight: float,
        strategy: Optional[OrganizationStrategy] = None,
        use_warehouse_mode: bool = False,
    ) -> None:
        self._owner_name = owner_name
        self._max_weight = max_weight
        self._items: List[Item] = []
        self._strategy: OrganizationStrategy = strategy if strategy is not None else NoSortingStrategy()
        self._state: InventoryState = WarehouseState() if use_warehouse_mode else NormalState()

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def max_weight(self) -> float:
        return self._max_weight

    @property
    def state(self) -> InventoryState:
        return self._state

    @property
    def strategy(self) -> OrganizationStrategy:
        return self._strategy

    @property
    def items(self) -> List[Item]:
        """Copy of the items in storage (insertion) order."""
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    # Item management

    def add_item(self, item: Optional[Item]) -> bool:
        if item is None:
            logger.warning('Cannot add a missing item to %s', self._owner_name)
            return False
        admission = self._state.try_add(item, self)
        self._apply(admission)
        if not admission:
            return False
        self._items.append(item)
        return True

    def remove_item(self, item: Optional[Item]) -> bool:
        if item is None or item not in self:
            logger.warning('Item not found in inventory of %s: %s', self._owner_name, item)
            return False
        admission = self._state.try_remove(item, self)
        self._apply(admission)
        if not admission:
            return False
        for index, existing in enumerate(self._items):
            if existing is item:
                del self._items[index]
                break
        return True

    def get_item_count(self) -> int:
        return len(self._items)

    def get_total_weight(self) -> float:
        return float(sum(item.weight for item in self._items))

    # Organization and listing

    def set_organization_strategy(self, strategy: Optional[OrganizationStrategy]) -> None:
        if strategy is None:
            logger.warning('Organization strategy cannot be None; keeping %s', self._strategy.name)
            return
        self._strategy = strategy
        logger.info('Organization strategy changed to: %s', strategy.name)

    def organized_items(self) -> List[Item]:
        return self._strategy.organize(list(self._items))

    def statistics(self) -> InventoryStatistics:
        count = len(self._items)
        kinds = Counter(kind_of(item) for item in self._items)
        rarities = Counter(item.rarity for item in self._items)
        return InventoryStatistics(
            total_value=sum(item.value for item in self._items),
            average_weight=self.get_total_weight() / count if count else 0.0,
            by_kind={kind: kinds.get(kind, 0) for kind in ItemKind},
            by_rarity={rarity: rarities[rarity] for rarity in ItemRarity if rarities[rarity]},
            unclassified=kinds.get(None, 0),
        )

    # State management

    def set_state(self, state: InventoryState) -> None:
        previous = self._state
        self._state = state
        if state != previous:
            logger.info('Inventory of %s: %s -> %s', self._owner_name, previous.kind.value, state.kind.value)

    def state_description(self) -> str:
        return self._state.description

    def lock_inventory(self, reason: str = DEFAULT_LOCK_REASON) -> None:
        self.set_state(LockedState(reason))

    def unlock_inventory(self) -> None:
        self.set_state(NormalState())

    def activate_warehouse_mode(self) -> None:
        self.set_state(WarehouseState())

    def _apply(self, admission: Admission) -> None:
        if admission.next_state is not None:
            self.set_state(admission.next_state)

    def __repr__(self) -> str:
        return (
            f'Inventory(owner_name={self._owner_name!r}, items={len(self._items)}, '
            f'state={self._state.kind.value}, strategy={self._strategy.key})'
        )
