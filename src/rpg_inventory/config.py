from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .inventory.builder import DEFAULT_MAX_WEIGHT, DEFAULT_OWNER_NAME
from .inventory.strategies import STRATEGIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RESOURCE = "default_inventory.yaml"


class InventoryConfig(BaseModel):
    """Construction parameters for an inventory, as read from YAML."""

    owner_name: str = Field(DEFAULT_OWNER_NAME, description="Name of the inventory owner")
    max_weight: float = Field(DEFAULT_MAX_WEIGHT, gt=0, description="Declared weight capacity (informational)")
    strategy: str = Field("none", description="Organization strategy key")
    warehouse_mode: bool = Field(False, description="Start in unlimited warehouse mode")
    items: List[Dict[str, Any]] = Field(default_factory=list, description="Raw item records")

    @field_validator("owner_name")
    @classmethod
    def owner_name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("owner_name must not be empty")
        return v

    @field_validator("strategy")
    @classmethod
    def known_strategy(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in STRATEGIES:
            raise ValueError(f"unknown strategy {v!r}; expected one of {sorted(STRATEGIES)}")
        return key


def load_inventory_config(path: Optional[Union[str, Path]] = None) -> InventoryConfig:
    """Load inventory configuration from YAML.

    If path is None, loads the embedded default resource at
    rpg_inventory/data/default_inventory.yaml.
    """
    if path is None:
        data = resource_files("rpg_inventory.data").joinpath(DEFAULT_CONFIG_RESOURCE).read_text(encoding="utf-8")
        source = DEFAULT_CONFIG_RESOURCE
        logger.debug("Loaded embedded inventory config resource")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read inventory config {path}: {e}") from e
        source = str(path)
        logger.debug("Loaded inventory config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Inventory config {source} must be a mapping")

    try:
        config = InventoryConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid inventory config {source}:\n{e}") from e
    logger.info(
        "Inventory config: owner=%s | max_weight=%s | strategy=%s | warehouse=%s | items=%d",
        config.owner_name,
        config.max_weight,
        config.strategy,
        config.warehouse_mode,
        len(config.items),
    )
    return config


__all__ = [
    "InventoryConfig",
    "load_inventory_config",
]
