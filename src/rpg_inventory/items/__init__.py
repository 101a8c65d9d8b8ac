'''
Items package: item models, schema validation, and tiered factories.
'''
from .factory import (
    CommonItemFactory,
    ItemFactory,
    LegendaryItemFactory,
    RareItemFactory,
    factory_for_rarity,
)
from .models import (
    Armor,
    Consumable,
    Item,
    ItemKind,
    ItemRarity,
    QuestItem,
    Weapon,
    items_from_records,
    kind_of,
    load_items,
)
from .schema import validate_item_dict

__all__ = [
    'Item',
    'ItemKind',
    'ItemRarity',
    'Weapon',
    'Armor',
    'Consumable',
    'QuestItem',
    'ItemFactory',
    'CommonItemFactory',
    'RareItemFactory',
    'LegendaryItemFactory',
    'factory_for_rarity',
    'items_from_records',
    'kind_of',
    'load_items',
    'validate_item_dict',
]
