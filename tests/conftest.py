import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from rpg_inventory.items.models import Armor, Consumable, ItemRarity, QuestItem, Weapon  # noqa: E402


@pytest.fixture
def make_weapon():
    def _make(name="Sword", weight=2.0, rarity=ItemRarity.COMMON, value=50, damage=5):
        return Weapon(name, weight, rarity, value, damage, "Slashing")

    return _make


@pytest.fixture
def mixed_items():
    return [
        Consumable("Potion", 0.3, ItemRarity.COMMON, 25, "Healing"),
        Weapon("Sword", 2.0, ItemRarity.RARE, 500, 15, "Magical"),
        Armor("Plate", 8.0, ItemRarity.EPIC, 1200, 10, "Metal"),
        QuestItem("Key", 0.2, ItemRarity.LEGENDARY, 0, "The Vault"),
        Weapon("Dagger", 1.0, ItemRarity.UNCOMMON, 80, 7, "Piercing"),
    ]
