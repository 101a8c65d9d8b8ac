import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

from jsonschema import Draft202012Validator

from ..exceptions import ItemDataError

logger = logging.getLogger(__name__)

_SCHEMA_PKG = 'rpg_inventory.data'
_SCHEMA_FILE = 'item.schema.json'


@lru_cache(maxsize=1)
def _load_item_schema() -> Dict[str, Any]:
    """
    Load the bundled item JSON schema.

    The function is cached since the schema is static.
    """
    text = resources.files(_SCHEMA_PKG).joinpath(_SCHEMA_FILE).read_text(encoding='utf-8')
    logger.debug('Loaded item schema resource %s/%s', _SCHEMA_PKG, _SCHEMA_FILE)
    return json.loads(text)


def validate_item_dict(data: Dict[str, Any]) -> None:
    """
    Validate a single item dictionary against the item JSON schema.

    Raises:
        ItemDataError listing every validation error found.
    """
    validator = Draft202012Validator(_load_item_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error('Item schema validation error at %s: %s', list(err.path), err.message)
        name = data.get('name', '<unnamed>') if isinstance(data, dict) else '<not a mapping>'
        raise ItemDataError(f'Invalid item record {name!r}', errors)


__all__ = [
    'validate_item_dict',
]
