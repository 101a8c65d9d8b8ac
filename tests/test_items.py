from pathlib import Path

import pytest

from rpg_inventory.exceptions import ItemDataError
from rpg_inventory.items.models import (
    Armor,
    Consumable,
    Item,
    ItemKind,
    ItemRarity,
    QuestItem,
    Weapon,
    kind_of,
    load_items,
)


def test_rarity_is_ordered():
    assert ItemRarity.COMMON < ItemRarity.UNCOMMON < ItemRarity.RARE < ItemRarity.EPIC < ItemRarity.LEGENDARY
    assert ItemRarity.LEGENDARY.label == "Legendary"


def test_descriptions():
    sword = Weapon("Sword", 2.0, ItemRarity.RARE, 500, 15, "Magical")
    assert str(sword) == "[Rare] Sword | Weight: 2.0kg | Value: 500"
    assert sword.describe().endswith("| Damage: 15 (Magical)")
    assert Armor("Mail", 6.0, ItemRarity.COMMON, 90, 4, "Chain").describe().endswith("| Defense: +4 (Chain)")
    assert "x3 | Effect: Heal" in Consumable("Potion", 0.3, ItemRarity.COMMON, 25, "Heal", 3).describe()
    assert QuestItem("Key", 0.1, ItemRarity.EPIC, 0, "Vault").describe().endswith("Quest: Vault (required)")
    assert QuestItem("Map", 0.1, ItemRarity.EPIC, 0, "Vault", True).describe().endswith("(optional)")


def test_kinds():
    assert Weapon.kind is ItemKind.WEAPON
    assert Armor.kind is ItemKind.ARMOR
    assert Consumable.kind is ItemKind.CONSUMABLE
    assert QuestItem.kind is ItemKind.QUEST


def test_items_compare_by_identity():
    a = Weapon("Twin", 1.0, ItemRarity.COMMON, 1, 1, "Blunt")
    b = Weapon("Twin", 1.0, ItemRarity.COMMON, 1, 1, "Blunt")
    assert a != b
    assert a == a


@pytest.mark.parametrize("weight,value", [(-1.0, 10), (1.0, -5)])
def test_negative_weight_or_value_rejected(weight, value):
    with pytest.raises(ValueError):
        Weapon("Bad", weight, ItemRarity.COMMON, value, 1, "Blunt")


def test_from_dict_builds_each_kind():
    weapon = Item.from_dict({
        'type': 'weapon', 'name': 'Axe', 'weight': 4, 'rarity': 'rare', 'value': 300,
        'damage': 12, 'damage_type': 'Slashing',
    })
    potion = Item.from_dict({
        'type': 'consumable', 'name': 'Potion', 'weight': 0.3, 'rarity': 'common', 'value': 25,
        'effect': 'Heal',
    })
    quest = Item.from_dict({
        'type': 'quest', 'name': 'Crystal', 'weight': 0.5, 'rarity': 'epic', 'value': 1000,
        'quest_name': 'Artifact', 'is_optional': True,
    })

    assert isinstance(weapon, Weapon) and weapon.damage == 12 and weapon.weight == 4.0
    assert isinstance(potion, Consumable) and potion.quantity == 1
    assert isinstance(quest, QuestItem) and quest.is_optional and quest.rarity is ItemRarity.EPIC


@pytest.mark.parametrize(
    "record",
    [
        {'type': 'weapon', 'name': 'Axe', 'weight': 4, 'rarity': 'rare', 'value': 300},
        {'type': 'armor', 'name': 'Mail', 'weight': -1, 'rarity': 'common', 'value': 1,
         'defense': 1, 'armor_type': 'Chain'},
        {'type': 'relic', 'name': 'Orb', 'weight': 1, 'rarity': 'common', 'value': 1},
        {'type': 'quest', 'name': 'Key', 'weight': 1, 'rarity': 'mythic', 'value': 1, 'quest_name': 'Q'},
        {'type': 'quest', 'name': 'Key', 'weight': 1, 'rarity': 'rare', 'value': 1, 'quest_name': 'Q',
         'colour': 'blue'},
    ],
)
def test_from_dict_rejects_invalid_records(record):
    with pytest.raises(ItemDataError) as exc:
        Item.from_dict(record)
    assert exc.value.errors
    assert "Invalid item record" in exc.value.to_human()


def test_load_items_from_yaml(tmp_path: Path):
    p = tmp_path / "items.yaml"
    p.write_text(
        "items:\n"
        "  - {type: armor, name: Mail, weight: 6.0, rarity: uncommon, value: 90, defense: 4, armor_type: Chain}\n"
        "  - {type: consumable, name: Potion, weight: 0.3, rarity: common, value: 25, effect: Heal, quantity: 2}\n",
        encoding="utf-8",
    )

    items = load_items(p)

    assert [type(i) for i in items] == [Armor, Consumable]
    assert items[1].quantity == 2


def test_load_items_requires_items_list(tmp_path: Path):
    p = tmp_path / "items.yaml"
    p.write_text("weapons: []\n", encoding="utf-8")
    with pytest.raises(ItemDataError):
        load_items(p)


def test_kind_of_follows_concrete_type():
    sword = Weapon("Sword", 2.0, ItemRarity.RARE, 500, damage=20, damage_type="physical")
    rock = Item("Rock", 1.0, ItemRarity.COMMON, 0)

    class Trinket(Item):
        kind = ItemKind.QUEST

    assert kind_of(sword) is ItemKind.WEAPON
    assert kind_of(rock) is None
    assert kind_of(Trinket("Trinket", 0.1, ItemRarity.COMMON, 1)) is None
