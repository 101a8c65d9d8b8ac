from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Sequence, Type

from ..items.models import Item, ItemKind, kind_of


class OrganizationStrategy(ABC):
    """
    Display-time ordering policy for inventory contents.

    Implementations are pure: ``organize`` returns a new list and never
    touches the input sequence. Python's sort is stable, so items that tie
    on the sort key keep their input order.
    """

    key: ClassVar[str]
    name: ClassVar[str]

    @abstractmethod
    def organize(self, items: Sequence[Item]) -> List[Item]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SortByRarityStrategy(OrganizationStrategy):
    key = "rarity"
    name = "By rarity (rarest first)"

    def organize(self, items: Sequence[Item]) -> List[Item]:
        return sorted(items, key=lambda item: item.rarity, reverse=True)


class SortByWeightStrategy(OrganizationStrategy):
    key = "weight"
    name = "By weight (lightest first)"

    def organize(self, items: Sequence[Item]) -> List[Item]:
        return sorted(items, key=lambda item: item.weight)


class SortByValueStrategy(OrganizationStrategy):
    key = "value"
    name = "By value (most valuable first)"

    def organize(self, items: Sequence[Item]) -> List[Item]:
        return sorted(items, key=lambda item: item.value, reverse=True)


class GroupByTypeStrategy(OrganizationStrategy):
    """
    Weapons (by damage), then armor (by defense), then consumables, then quest items.

    Items that are none of these four kinds are left out of the result.
    """

    key = "type"
    name = "Grouped by type (weapons, armor, consumables, quest items)"

    def organize(self, items: Sequence[Item]) -> List[Item]:
        buckets: Dict[ItemKind, List[Item]] = {kind: [] for kind in ItemKind}
        for item in items:
            kind = kind_of(item)
            if kind is not None:
                buckets[kind].append(item)
        buckets[ItemKind.WEAPON].sort(key=lambda w: w.damage, reverse=True)
        buckets[ItemKind.ARMOR].sort(key=lambda a: a.defense, reverse=True)
        organized: List[Item] = []
        for kind in (ItemKind.WEAPON, ItemKind.ARMOR, ItemKind.CONSUMABLE, ItemKind.QUEST):
            organized.extend(buckets[kind])
        return organized


class NoSortingStrategy(OrganizationStrategy):
    key = "none"
    name = "Unsorted (insertion order)"

    def organize(self, items: Sequence[Item]) -> List[Item]:
        return list(items)


STRATEGIES: Dict[str, Type[OrganizationStrategy]] = {
    cls.key: cls
    for cls in (
        SortByRarityStrategy,
        SortByWeightStrategy,
        SortByValueStrategy,
        GroupByTypeStrategy,
        NoSortingStrategy,
    )
}


def get_strategy(key: str) -> OrganizationStrategy:
    """Instantiate a strategy by its short key (``rarity``, ``weight``, ``value``, ``type``, ``none``)."""
    try:
        return STRATEGIES[key.strip().lower()]()
    except KeyError as exc:
        raise KeyError(f"Unknown organization strategy: {key!r} (expected one of {sorted(STRATEGIES)})") from exc


__all__ = [
    "OrganizationStrategy",
    "SortByRarityStrategy",
    "SortByWeightStrategy",
    "SortByValueStrategy",
    "GroupByTypeStrategy",
    "NoSortingStrategy",
    "STRATEGIES",
    "get_strategy",
]
