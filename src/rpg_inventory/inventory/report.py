"""Plain-text renderings of an inventory for console output."""
from __future__ import annotations

from typing import List

from ..items.models import ItemKind
from .inventory import Inventory

_WIDTH = 80

_KIND_LABELS = {
    ItemKind.WEAPON: "Weapons",
    ItemKind.ARMOR: "Armor",
    ItemKind.CONSUMABLE: "Consumables",
    ItemKind.QUEST: "Quest items",
}


def render_inventory(inventory: Inventory) -> str:
    rule = "=" * _WIDTH
    lines: List[str] = [
        rule,
        f"INVENTORY [{inventory.owner_name}] | State: {inventory.state_description()}",
        f"   Items: {inventory.get_item_count()} | "
        f"Weight: {inventory.get_total_weight():.1f} / {inventory.max_weight} kg",
        rule,
    ]
    organized = inventory.organized_items()
    if inventory.get_item_count() == 0:
        lines.append("Inventory is empty")
    else:
        lines.append(f"Organized: {inventory.strategy.name}")
        lines.append("")
        lines.extend(f"  {i}. {item.describe()}" for i, item in enumerate(organized, start=1))
    lines.append(rule)
    return "\n".join(lines)


def render_statistics(inventory: Inventory) -> str:
    stats = inventory.statistics()
    lines: List[str] = [
        f"INVENTORY STATISTICS [{inventory.owner_name}]",
        f"Total value: {stats.total_value}",
        f"Average weight: {stats.average_weight:.2f} kg",
    ]
    lines.extend(f"{_KIND_LABELS[kind]}: {count}" for kind, count in stats.by_kind.items())
    if stats.unclassified:
        lines.append(f"Other: {stats.unclassified}")
    lines.append("")
    lines.append("  By rarity:")
    lines.extend(f"    - {rarity.label}: {count}" for rarity, count in stats.by_rarity.items())
    lines.append("-" * 60)
    return "\n".join(lines)


__all__ = [
    "render_inventory",
    "render_statistics",
]
