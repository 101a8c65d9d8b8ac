import pytest

from rpg_inventory.inventory.strategies import (
    STRATEGIES,
    GroupByTypeStrategy,
    NoSortingStrategy,
    SortByRarityStrategy,
    SortByValueStrategy,
    SortByWeightStrategy,
    get_strategy,
)
from rpg_inventory.items.models import Armor, Consumable, Item, ItemKind, ItemRarity, QuestItem, Weapon


ALL_STRATEGIES = [cls() for cls in STRATEGIES.values()]


@pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key)
def test_empty_input_gives_empty_list(strategy):
    assert strategy.organize([]) == []


@pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key)
def test_organize_keeps_identities_and_leaves_input_alone(strategy, mixed_items):
    original = list(mixed_items)

    result = strategy.organize(mixed_items)

    assert result is not mixed_items
    assert [id(i) for i in mixed_items] == [id(i) for i in original]
    assert sorted(id(i) for i in result) == sorted(id(i) for i in original)


def test_rarity_sorts_rarest_first():
    items = [
        Weapon("Common Sword", 2.0, ItemRarity.COMMON, 50, 5, "Slashing"),
        Weapon("Legendary Sword", 3.0, ItemRarity.LEGENDARY, 5000, 50, "Divine"),
        Weapon("Rare Sword", 2.5, ItemRarity.RARE, 500, 15, "Magical"),
    ]

    result = SortByRarityStrategy().organize(items)

    assert [i.rarity for i in result] == [ItemRarity.LEGENDARY, ItemRarity.RARE, ItemRarity.COMMON]


def test_rarity_is_stable_for_ties(make_weapon):
    first = make_weapon("First", rarity=ItemRarity.RARE)
    second = make_weapon("Second", rarity=ItemRarity.RARE)
    top = make_weapon("Top", rarity=ItemRarity.EPIC)

    result = SortByRarityStrategy().organize([first, second, top])

    assert result == [top, first, second]


def test_rarity_ordering_property(mixed_items):
    result = SortByRarityStrategy().organize(mixed_items)
    for a, b in zip(result, result[1:]):
        assert a.rarity >= b.rarity


def test_weight_sorts_lightest_first(mixed_items):
    result = SortByWeightStrategy().organize(mixed_items)
    assert [i.name for i in result] == ["Key", "Potion", "Dagger", "Sword", "Plate"]
    for a, b in zip(result, result[1:]):
        assert a.weight <= b.weight


def test_weight_is_stable_for_ties(make_weapon):
    a = make_weapon("A", weight=1.0)
    b = make_weapon("B", weight=1.0)
    assert SortByWeightStrategy().organize([a, b]) == [a, b]


def test_value_sorts_most_valuable_first(mixed_items):
    result = SortByValueStrategy().organize(mixed_items)
    assert [i.name for i in result] == ["Plate", "Sword", "Dagger", "Potion", "Key"]
    for a, b in zip(result, result[1:]):
        assert a.value >= b.value


def test_group_by_type_bucket_order():
    items = [
        Consumable("Potion", 0.3, ItemRarity.COMMON, 25, "Healing"),
        Weapon("Sword", 2.0, ItemRarity.COMMON, 50, 5, "Slashing"),
        Armor("Armor", 5.0, ItemRarity.COMMON, 75, 3, "Leather"),
        QuestItem("Key", 0.2, ItemRarity.RARE, 0, "Quest"),
    ]

    result = GroupByTypeStrategy().organize(items)

    assert [type(i) for i in result] == [Weapon, Armor, Consumable, QuestItem]


def test_group_by_type_sub_sorts_weapons_and_armor():
    weak = Weapon("Weak", 1.0, ItemRarity.COMMON, 10, 3, "Blunt")
    strong = Weapon("Strong", 1.0, ItemRarity.COMMON, 10, 30, "Slashing")
    light = Armor("Light", 1.0, ItemRarity.COMMON, 10, 2, "Cloth")
    heavy = Armor("Heavy", 1.0, ItemRarity.COMMON, 10, 12, "Metal")
    potion_a = Consumable("A", 0.1, ItemRarity.COMMON, 1, "x")
    potion_b = Consumable("B", 0.1, ItemRarity.COMMON, 1, "y")

    result = GroupByTypeStrategy().organize([potion_b, weak, light, potion_a, heavy, strong])

    assert result == [strong, weak, heavy, light, potion_b, potion_a]


def test_group_by_type_drops_unknown_kinds(mixed_items):
    class Trinket(Item):
        kind = ItemKind.QUEST  # not a QuestItem, so kind_of gives None

    trinket = Trinket("Trinket", 0.1, ItemRarity.COMMON, 1)

    result = GroupByTypeStrategy().organize(mixed_items + [trinket])

    assert trinket not in result
    assert len(result) == len(mixed_items)


def test_no_sorting_returns_copy_in_order(mixed_items):
    result = NoSortingStrategy().organize(mixed_items)
    assert result == mixed_items
    assert result is not mixed_items


def test_get_strategy_by_key():
    assert isinstance(get_strategy("rarity"), SortByRarityStrategy)
    assert isinstance(get_strategy(" Weight "), SortByWeightStrategy)
    assert isinstance(get_strategy("none"), NoSortingStrategy)
    assert set(STRATEGIES) == {"rarity", "weight", "value", "type", "none"}


def test_get_strategy_unknown_key():
    with pytest.raises(KeyError) as exc:
        get_strategy("alphabetical")
    assert "alphabetical" in str(exc.value)
