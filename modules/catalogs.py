"""
Catalog sources for the store.

Built-in catalogs reproduce the dealership's stock list. A JSON catalog
file can replace them:

    {
        "Cruisers": [
            {"name": "Harley Low Rider", "engine_size": 1746,
             "base_price": 18000, "prep_rate": 0.01}
        ],
        "Sport Bikes": [...]
    }

Keys may be category labels ("Touring Bikes") or member names ("touring").
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Dict, Any, List, Mapping, Sequence, Tuple, Union

from core.exceptions import CatalogConfigError
from models.catalog import Category, CatalogEntry
from services.inventory_service import CategoryInventory
from logging_config import get_logger

logger = get_logger(__name__)


DEFAULT_CATALOGS: Dict[Category, Tuple[CatalogEntry, ...]] = {
    Category.CRUISER: (
        CatalogEntry(name="Harley Low Rider", engine_size=1746, base_price=18000, prep_rate=0.01),
        CatalogEntry(name="Indian Scout", engine_size=1133, base_price=15000, prep_rate=0.01),
    ),
    Category.SPORT: (
        CatalogEntry(name="Yamaha R1", engine_size=998, base_price=16500, prep_rate=0.008),
        CatalogEntry(name="Kawasaki Ninja ZX-10R", engine_size=998, base_price=16200, prep_rate=0.008),
    ),
    Category.TOURING: (
        CatalogEntry(name="Honda Gold Wing", engine_size=1833, base_price=23000, prep_rate=0.012),
        CatalogEntry(name="BMW K1600", engine_size=1649, base_price=25500, prep_rate=0.012),
    ),
}


def _parse_entry(record: Any, category: Category, path: str) -> CatalogEntry:
    if not isinstance(record, dict):
        raise CatalogConfigError(f"{category.label}: entry must be an object, got {record!r}", path)

    try:
        entry = CatalogEntry.from_dict(record)
    except KeyError as e:
        raise CatalogConfigError(f"{category.label}: entry missing field {e}", path) from e
    except (TypeError, ValueError) as e:
        raise CatalogConfigError(f"{category.label}: bad entry {record!r}: {e}", path) from e

    if not all(math.isfinite(v) and v > 0 for v in (entry.engine_size, entry.base_price, entry.prep_rate)):
        raise CatalogConfigError(
            f"{category.label}: {entry.name} needs finite, positive engine_size, base_price and prep_rate",
            path,
        )
    return entry


def parse_catalogs(data: Any, path: str = "<memory>") -> Dict[Category, Tuple[CatalogEntry, ...]]:
    """
    Validate decoded catalog JSON.

    Args:
        data: Decoded JSON document
        path: Source name for error messages

    Returns:
        Mapping of category to entries, in category enum order

    Raises:
        CatalogConfigError: If the document is not a valid catalog
    """
    if not isinstance(data, dict) or not data:
        raise CatalogConfigError("Catalog must be a non-empty JSON object", path)

    parsed: Dict[Category, Tuple[CatalogEntry, ...]] = {}
    for key, records in data.items():
        category = Category.from_label(str(key))
        if category is None:
            raise CatalogConfigError(f"Unknown category: {key!r}", path)
        if category in parsed:
            raise CatalogConfigError(f"Duplicate category: {key!r}", path)
        if not isinstance(records, list) or not records:
            raise CatalogConfigError(f"{category.label}: needs a non-empty list of entries", path)

        parsed[category] = tuple(_parse_entry(r, category, path) for r in records)

    return {category: parsed[category] for category in Category if category in parsed}


def load_catalogs(path: Union[str, Path]) -> Dict[Category, Tuple[CatalogEntry, ...]]:
    """
    Load catalogs from a JSON file.

    Args:
        path: Path to the catalog file

    Returns:
        Mapping of category to entries

    Raises:
        CatalogConfigError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogConfigError(f"Catalog file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogConfigError(f"Catalog file is not valid JSON: {e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise CatalogConfigError(f"Catalog file is not valid UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise CatalogConfigError(f"Catalog file could not be read: {e}", str(path)) from e

    catalogs = parse_catalogs(data, str(path))
    logger.info(
        f"Loaded catalog {path}: "
        + ", ".join(f"{c.label}={len(entries)}" for c, entries in catalogs.items())
    )
    return catalogs


def dump_catalogs(catalogs: Mapping[Category, Sequence[CatalogEntry]]) -> Dict[str, List[Dict[str, Any]]]:
    """Convert catalogs to the JSON file layout (keys are category labels)."""
    return {
        category.label: [entry.to_dict() for entry in entries]
        for category, entries in catalogs.items()
    }


def build_inventories(
    catalogs: Mapping[Category, Sequence[CatalogEntry]] = DEFAULT_CATALOGS,
) -> List[CategoryInventory]:
    """
    Create one handler per category, in category enum order.

    Args:
        catalogs: Mapping of category to entries (default: built-in catalogs)

    Returns:
        List of CategoryInventory handlers
    """
    return [
        CategoryInventory(category, catalogs[category])
        for category in Category
        if category in catalogs
    ]
