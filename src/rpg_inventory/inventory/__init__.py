"""
Inventory package: the container, its admission states, organization
strategies, the builder and text reports.
"""
from .builder import InventoryBuilder
from .inventory import Inventory, InventoryStatistics
from .report import render_inventory, render_statistics
from .states import (
    SLOT_LIMIT,
    Admission,
    InventoryState,
    LockedState,
    NormalState,
    OverflowState,
    StateKind,
    WarehouseState,
)
from .strategies import (
    STRATEGIES,
    GroupByTypeStrategy,
    NoSortingStrategy,
    OrganizationStrategy,
    SortByRarityStrategy,
    SortByValueStrategy,
    SortByWeightStrategy,
    get_strategy,
)

__all__ = [
    "Inventory",
    "InventoryStatistics",
    "InventoryBuilder",
    "render_inventory",
    "render_statistics",
    "SLOT_LIMIT",
    "Admission",
    "InventoryState",
    "StateKind",
    "NormalState",
    "OverflowState",
    "WarehouseState",
    "LockedState",
    "OrganizationStrategy",
    "SortByRarityStrategy",
    "SortByWeightStrategy",
    "SortByValueStrategy",
    "GroupByTypeStrategy",
    "NoSortingStrategy",
    "STRATEGIES",
    "get_strategy",
]
