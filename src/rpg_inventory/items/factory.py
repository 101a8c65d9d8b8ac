from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

from .models import Armor, Consumable, ItemRarity, Weapon


class ItemFactory(ABC):
    """Creates a matching weapon/armor/consumable set of one quality tier.

    Every call returns a fresh instance so items from the same factory are
    distinct inventory entries.
    """

    @abstractmethod
    def create_weapon(self) -> Weapon:
        raise NotImplementedError

    @abstractmethod
    def create_armor(self) -> Armor:
        raise NotImplementedError

    @abstractmethod
    def create_consumable(self) -> Consumable:
        raise NotImplementedError


class CommonItemFactory(ItemFactory):
    """Starter gear."""

    def create_weapon(self) -> Weapon:
        return Weapon(
            name="Wooden Sword",
            weight=2.5,
            rarity=ItemRarity.COMMON,
            value=50,
            damage=5,
            damage_type="Slashing",
        )

    def create_armor(self) -> Armor:
        return Armor(
            name="Leather Armor",
            weight=5.0,
            rarity=ItemRarity.COMMON,
            value=75,
            defense=3,
            armor_type="Leather",
        )

    def create_consumable(self) -> Consumable:
        return Consumable(
            name="Minor Healing Potion",
            weight=0.3,
            rarity=ItemRarity.COMMON,
            value=25,
            effect="Restores 30 HP",
            quantity=3,
        )


class RareItemFactory(ItemFactory):
    def create_weapon(self) -> Weapon:
        return Weapon(
            name="Flame Steel Sword",
            weight=3.0,
            rarity=ItemRarity.RARE,
            value=500,
            damage=15,
            damage_type="Magical",
        )

    def create_armor(self) -> Armor:
        return Armor(
            name="Enchanted Armor",
            weight=8.0,
            rarity=ItemRarity.RARE,
            value=800,
            defense=8,
            armor_type="Magical",
        )

    def create_consumable(self) -> Consumable:
        return Consumable(
            name="Mana Elixir",
            weight=0.5,
            rarity=ItemRarity.RARE,
            value=200,
            effect="Restores 100 MP",
        )


class LegendaryItemFactory(ItemFactory):
    """Epic and legendary gear."""

    def create_weapon(self) -> Weapon:
        return Weapon(
            name="Excalibur",
            weight=4.0,
            rarity=ItemRarity.LEGENDARY,
            value=5000,
            damage=50,
            damage_type="Divine",
        )

    def create_armor(self) -> Armor:
        return Armor(
            name="Dragonhide Armor",
            weight=12.0,
            rarity=ItemRarity.LEGENDARY,
            value=8000,
            defense=20,
            armor_type="Legendary",
        )

    def create_consumable(self) -> Consumable:
        return Consumable(
            name="Potion of Resurrection",
            weight=1.0,
            rarity=ItemRarity.LEGENDARY,
            value=3000,
            effect="Revives with full HP",
        )


_FACTORY_BY_RARITY: Dict[ItemRarity, Type[ItemFactory]] = {
    ItemRarity.COMMON: CommonItemFactory,
    ItemRarity.UNCOMMON: CommonItemFactory,
    ItemRarity.RARE: RareItemFactory,
    ItemRarity.EPIC: LegendaryItemFactory,
    ItemRarity.LEGENDARY: LegendaryItemFactory,
}


def factory_for_rarity(rarity: ItemRarity) -> ItemFactory:
    """Return the factory whose tier best matches ``rarity``."""
    return _FACTORY_BY_RARITY.get(rarity, CommonItemFactory)()


__all__ = [
    "ItemFactory",
    "CommonItemFactory",
    "RareItemFactory",
    "LegendaryItemFactory",
    "factory_for_rarity",
]
