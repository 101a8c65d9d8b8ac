from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import load_inventory_config
from .exceptions import ConfigError, ItemDataError
from .inventory import (
    GroupByTypeStrategy,
    InventoryBuilder,
    NoSortingStrategy,
    SortByRarityStrategy,
    SortByValueStrategy,
    SortByWeightStrategy,
    STRATEGIES,
    get_strategy,
    render_inventory,
    render_statistics,
)
from .items import (
    CommonItemFactory,
    Consumable,
    ItemRarity,
    LegendaryItemFactory,
    QuestItem,
    RareItemFactory,
)

logger = logging.getLogger(__name__)


def _section(title: str) -> None:
    print(f"\n\n{title}\n")


def _cmd_demo(args: argparse.Namespace) -> int:
    print("RPG INVENTORY SYSTEM - DEMO")

    _section("STEP 1: item factories")
    common = CommonItemFactory()
    common_sword = common.create_weapon()
    common_armor = common.create_armor()
    common_potion = common.create_consumable()
    print("Common items:")
    for item in (common_sword, common_armor, common_potion):
        print(f"   - {item.describe()}")

    rare = RareItemFactory()
    rare_sword = rare.create_weapon()
    rare_armor = rare.create_armor()
    print("\nRare items:")
    for item in (rare_sword, rare_armor):
        print(f"   - {item.describe()}")

    _section("STEP 2: builder")
    player = (
        InventoryBuilder()
        .with_owner_name("Test Hero")
        .with_max_weight(80.0)
        .with_organization_strategy(NoSortingStrategy())
        .add_initial_item(common_sword)
        .add_initial_item(common_armor)
        .add_initial_items(common_potion)
        .build()
    )
    print(render_inventory(player))

    _section("STEP 3: admission states")
    print("Adding up to 25 potions...")
    for _ in range(25):
        if not player.add_item(common.create_consumable()):
            break
    print(render_inventory(player))

    print("\nOne more item while overflowing:")
    print(f"added={player.add_item(rare_sword)}")

    print("\nRemoving the starter potion (repeated attempts fail once it is gone)...")
    for _ in range(10):
        player.remove_item(common_potion)
    print(render_inventory(player))

    print("\nWarehouse mode: adding 50 legendary potions")
    player.activate_warehouse_mode()
    legendary = LegendaryItemFactory()
    for _ in range(50):
        player.add_item(legendary.create_consumable())
    print(f"Total items: {player.get_item_count()}")

    _section("STEP 4: organization strategies")
    hero = (
        InventoryBuilder()
        .with_owner_name("Knight")
        .with_max_weight(100.0)
        .add_initial_items(
            common_sword,
            rare_sword,
            common_armor,
            rare_armor,
            common_potion,
            legendary.create_weapon(),
            Consumable("Mana Potion", 0.3, ItemRarity.COMMON, 50, "Restores mana", 5),
            Consumable("Elixir of Strength", 0.5, ItemRarity.RARE, 200, "Damage +50%", 2),
        )
        .build()
    )
    print(render_inventory(hero))
    for strategy in (SortByRarityStrategy(), SortByWeightStrategy(), SortByValueStrategy(), GroupByTypeStrategy()):
        hero.set_organization_strategy(strategy)
        print(render_inventory(hero))

    _section("BONUS: merchant")
    merchant = (
        InventoryBuilder()
        .with_owner_name("Gordan the Merchant")
        .with_max_weight(150.0)
        .with_organization_strategy(SortByValueStrategy())
        .add_initial_items(
            CommonItemFactory().create_weapon(),
            CommonItemFactory().create_armor(),
            RareItemFactory().create_weapon(),
            RareItemFactory().create_armor(),
            LegendaryItemFactory().create_weapon(),
            QuestItem("Magic Crystal", 0.5, ItemRarity.RARE, 1000, "Ancient Artifact"),
        )
        .build()
    )
    print(render_inventory(merchant))
    print(render_statistics(merchant))
    return 0


def _build_from_config(args: argparse.Namespace):
    config = load_inventory_config(args.config)
    inventory = InventoryBuilder.from_config(config).build()
    if getattr(args, "strategy", None):
        inventory.set_organization_strategy(get_strategy(args.strategy))
    return inventory


def _cmd_show(args: argparse.Namespace) -> int:
    print(render_inventory(_build_from_config(args)))
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    print(render_statistics(_build_from_config(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rpg-inventory", description="RPG inventory tools")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics (written to stderr)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("demo", help="Walk through factories, builder, states and strategies")
    d.set_defaults(func=_cmd_demo)

    s = sub.add_parser("show", help="Build an inventory from a YAML config and list it")
    s.add_argument("config", nargs="?", default=None, help="Path to an inventory YAML (default: bundled config)")
    s.add_argument("--strategy", choices=sorted(STRATEGIES), help="Override the configured strategy")
    s.set_defaults(func=_cmd_show)

    t = sub.add_parser("stats", help="Print statistics for an inventory YAML")
    t.add_argument("config", nargs="?", default=None, help="Path to an inventory YAML (default: bundled config)")
    t.set_defaults(func=_cmd_stats)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    logger.debug("Running command: %s", args.cmd)
    try:
        return args.func(args)
    except ItemDataError as e:
        print(f"INVALID ITEM DATA\n{e.to_human()}")
        return 1
    except ConfigError as e:
        print(f"INVALID CONFIG\n{e}")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
