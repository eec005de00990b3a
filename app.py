"""
Motorcycle store - application entry point.

This is a slim factory that:
1. Configures logging from Config
2. Loads catalogs (built-in, or CATALOG_PATH from .env)
3. Creates one CategoryInventory per category
4. Returns a Store over those handlers

Running this module replays the dealership demo: list inventory, buy
one bike per category, then a batch purchase from the touring handler.

FAIL-FAST: a bad catalog file stops the program before anything is sold.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional

from config import get_config
from core.exceptions import CatalogConfigError
from logging_config import setup_logging, get_logger
from models.catalog import Category
from modules.catalogs import DEFAULT_CATALOGS, build_inventories, load_catalogs
from services.store_service import Store, make_coin_flip


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def create_store(
    config: Optional[type] = None,
    emit: Callable[[str], None] = print,
    coin_flip: Optional[Callable[[], bool]] = None,
) -> Store:
    """
    Store factory - configures logging and builds handlers.

    Args:
        config: Config class (default: picked from STORE_ENV)
        emit: Line sink for customer-facing output
        coin_flip: Stock-out coin (default: from config probability and seed)

    Returns:
        Store over one handler per catalog category

    Raises:
        CatalogConfigError: If CATALOG_PATH names an invalid catalog
    """
    config = config or get_config()

    setup_logging(
        log_level=config.LOG_LEVEL,
        log_dir=Path(config.LOG_DIR),
        enable_file_logging=config.LOG_TO_FILE,
    )
    logger.info(f"Starting motorcycle store in {config.ENVIRONMENT} mode")

    if config.CATALOG_PATH:
        catalogs = load_catalogs(config.CATALOG_PATH)
    else:
        logger.debug("Using built-in catalogs")
        catalogs = DEFAULT_CATALOGS

    if coin_flip is None:
        coin_flip = make_coin_flip(config.STOCKOUT_PROBABILITY, config.RANDOM_SEED)

    return Store(build_inventories(catalogs), emit=emit, coin_flip=coin_flip)


def run_demo(store: Store) -> None:
    """
    Replay the dealership demo against a store.

    Categories missing from the store are skipped.
    """
    store.show_inventory()

    cruisers = store.get_handler(Category.CRUISER)
    sport_bikes = store.get_handler(Category.SPORT)
    touring_bikes = store.get_handler(Category.TOURING)

    if cruisers and cruisers.list_entries():
        store.buy(cruisers.list_entries()[0], cruisers, discount=0.05)

    if sport_bikes and sport_bikes.list_entries():
        store.buy(sport_bikes.list_entries()[0], sport_bikes)

    if touring_bikes and touring_bikes.list_entries():
        store.buy(touring_bikes.list_entries()[0], touring_bikes, discount=0.1)

    # A cruiser offered to the touring handler is never sold
    if (
        cruisers and touring_bikes
        and len(cruisers.list_entries()) > 1
        and len(touring_bikes.list_entries()) > 1
    ):
        store.buy_multiple(
            [cruisers.list_entries()[1], touring_bikes.list_entries()[1]],
            touring_bikes,
        )


def main() -> int:
    try:
        store = create_store()
    except CatalogConfigError as e:
        logger.error(f"Cannot start store: {e}")
        return 1

    run_demo(store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
