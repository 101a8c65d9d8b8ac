from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

import yaml

from ..exceptions import ItemDataError
from .schema import validate_item_dict

logger = logging.getLogger(__name__)


class ItemRarity(IntEnum):
    """Ordered rarity tiers; the integer value is the rank."""

    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4

    @property
    def label(self) -> str:
        return self.name.title()


class ItemKind(str, Enum):
    WEAPON = 'weapon'
    ARMOR = 'armor'
    CONSUMABLE = 'consumable'
    QUEST = 'quest'


@dataclass(eq=False)
class Item:
    """Base model for anything that can be carried.

    Items compare by identity: two swords with identical stats are still two
    separate entries in an inventory. Construct concrete subclasses directly
    or from raw records via :meth:`Item.from_dict`.
    """

    # Set by the concrete kinds below; None for anything else
    kind: ClassVar[Optional[ItemKind]] = None

    name: str
    weight: float
    rarity: ItemRarity
    value: int

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f'Item weight must be non-negative: {self.name} ({self.weight})')
        if self.value < 0:
            raise ValueError(f'Item value must be non-negative: {self.name} ({self.value})')

    def __str__(self) -> str:
        return f'[{self.rarity.label}] {self.name} | Weight: {self.weight}kg | Value: {self.value}'

    def describe(self) -> str:
        return str(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """Create the matching Item subclass from a dict, validating with the JSON schema."""
        validate_item_dict(data)
        kind = ItemKind(data['type'])
        item_cls = _KIND_TO_CLASS[kind]
        common = dict(
            name=data['name'],
            weight=float(data['weight']),
            rarity=ItemRarity[data['rarity'].upper()],
            value=int(data['value']),
        )
        if kind == ItemKind.WEAPON:
            return item_cls(**common, damage=int(data['damage']), damage_type=data['damage_type'])
        if kind == ItemKind.ARMOR:
            return item_cls(**common, defense=int(data['defense']), armor_type=data['armor_type'])
        if kind == ItemKind.CONSUMABLE:
            return item_cls(**common, effect=data['effect'], quantity=int(data.get('quantity', 1)))
        return item_cls(
            **common,
            quest_name=data['quest_name'],
            is_optional=bool(data.get('is_optional', False)),
        )


@dataclass(eq=False)
class Weapon(Item):
    kind: ClassVar[ItemKind] = ItemKind.WEAPON

    damage: int
    damage_type: str

    def describe(self) -> str:
        return f'{self} | Damage: {self.damage} ({self.damage_type})'


@dataclass(eq=False)
class Armor(Item):
    kind: ClassVar[ItemKind] = ItemKind.ARMOR

    defense: int
    armor_type: str

    def describe(self) -> str:
        return f'{self} | Defense: +{self.defense} ({self.armor_type})'


@dataclass(eq=False)
class Consumable(Item):
    kind: ClassVar[ItemKind] = ItemKind.CONSUMABLE

    effect: str
    # Number of uses in this stack
    quantity: int = 1

    def describe(self) -> str:
        return f'{self} x{self.quantity} | Effect: {self.effect}'


@dataclass(eq=False)
class QuestItem(Item):
    kind: ClassVar[ItemKind] = ItemKind.QUEST

    quest_name: str
    is_optional: bool = False

    def describe(self) -> str:
        requirement = 'optional' if self.is_optional else 'required'
        return f'{self} | Quest: {self.quest_name} ({requirement})'


_KIND_TO_CLASS: Dict[ItemKind, Type[Item]] = {
    ItemKind.WEAPON: Weapon,
    ItemKind.ARMOR: Armor,
    ItemKind.CONSUMABLE: Consumable,
    ItemKind.QUEST: QuestItem,
}


def kind_of(item: Item) -> Optional[ItemKind]:
    """Classify by concrete type; items that are none of the four kinds give None."""
    for kind, item_cls in _KIND_TO_CLASS.items():
        if isinstance(item, item_cls):
            return kind
    return None


def items_from_records(records: List[Dict[str, Any]]) -> List[Item]:
    return [Item.from_dict(record) for record in records]


def load_items(path: Union[str, Path]) -> List[Item]:
    """
    Load items from a YAML (or JSON) document with a top-level ``items`` list.

    Raises ItemDataError when the document is malformed or a record is invalid.
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ItemDataError(f'Unreadable item file {path}: {e}') from e
    records = raw.get('items') if isinstance(raw, dict) else None
    if not isinstance(records, list):
        raise ItemDataError(f'Item file {path} must contain a top-level "items" list')
    items = items_from_records(records)
    logger.info('Loaded %d items from %s', len(items), path)
    return items


__all__ = [
    'Item',
    'ItemKind',
    'ItemRarity',
    'Weapon',
    'Armor',
    'Consumable',
    'QuestItem',
    'kind_of',
    'items_from_records',
    'load_items',
]
