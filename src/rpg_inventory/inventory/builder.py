from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..items.models import Item
from .inventory import Inventory
from .strategies import NoSortingStrategy, OrganizationStrategy, get_strategy

if TYPE_CHECKING:
    from ..config import InventoryConfig

logger = logging.getLogger(__name__)

DEFAULT_OWNER_NAME = "Unknown"
DEFAULT_MAX_WEIGHT = 50.0


class InventoryBuilder:
    """
    Fluent construction of an :class:`Inventory`.

    Arguments are validated as they are supplied (``ValueError`` on bad
    input). ``build`` adds the initial items through ``Inventory.add_item``,
    so they are subject to the same slot ceiling as any later addition.
    """

    def __init__(self) -> None:
        self._owner_name = DEFAULT_OWNER_NAME
        self._max_weight = DEFAULT_MAX_WEIGHT
        self._strategy: OrganizationStrategy = NoSortingStrategy()
        self._initial_items: List[Item] = []
        self._warehouse_mode = False

    @classmethod
    def from_config(cls, config: "InventoryConfig") -> "InventoryBuilder":
        """Seed a builder from a validated configuration, building its item records."""
        builder = (
            cls()
            .with_owner_name(config.owner_name)
            .with_max_weight(config.max_weight)
            .with_organization_strategy(get_strategy(config.strategy))
            .use_warehouse_mode(config.warehouse_mode)
        )
        return builder.add_initial_items(*(Item.from_dict(record) for record in config.items))

    def with_owner_name(self, name: str) -> "InventoryBuilder":
        if not name or not name.strip():
            raise ValueError("Owner name must not be empty")
        self._owner_name = name
        return self

    def with_max_weight(self, max_weight: float) -> "InventoryBuilder":
        if max_weight <= 0:
            raise ValueError(f"Max weight must be positive, got {max_weight}")
        self._max_weight = float(max_weight)
        return self

    def with_organization_strategy(self, strategy: Optional[OrganizationStrategy]) -> "InventoryBuilder":
        if strategy is None:
            raise ValueError("Organization strategy must not be None")
        self._strategy = strategy
        return self

    def add_initial_item(self, item: Optional[Item]) -> "InventoryBuilder":
        if item is None:
            raise ValueError("Initial item must not be None")
        self._initial_items.append(item)
        return self

    def add_initial_items(self, *items: Optional[Item]) -> "InventoryBuilder":
        self._initial_items.extend(item for item in items if item is not None)
        return self

    def use_warehouse_mode(self, enable: bool = True) -> "InventoryBuilder":
        self._warehouse_mode = enable
        return self

    def build(self) -> Inventory:
        total_weight = sum(item.weight for item in self._initial_items)
        if total_weight > self._max_weight:
            logger.warning(
                "Initial items for %s weigh %.1f, above the max weight of %.1f",
                self._owner_name,
                total_weight,
                self._max_weight,
            )

        inventory = Inventory(
            self._owner_name,
            self._max_weight,
            self._strategy,
            use_warehouse_mode=self._warehouse_mode,
        )
        rejected = sum(1 for item in self._initial_items if not inventory.add_item(item))
        if rejected:
            logger.warning("%d initial item(s) rejected for %s", rejected, self._owner_name)
        logger.debug("Built %r", inventory)
        return inventory


__all__ = [
    "DEFAULT_OWNER_NAME",
    "DEFAULT_MAX_WEIGHT",
    "InventoryBuilder",
]
