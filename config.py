"""
Configuration for the motorcycle store.

Values come from the environment, with a .env file loaded first.
Built-in catalogs are used unless CATALOG_PATH names a JSON catalog file.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
# This must happen before the Config class is defined
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Default configuration for the store."""

    ENVIRONMENT = os.environ.get("STORE_ENV", "development")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "0") == "1"
    LOG_DIR = os.environ.get("LOG_DIR", str(BASE_DIR / "logs"))

    # Optional JSON catalog; empty means the built-in catalogs
    CATALOG_PATH = os.environ.get("CATALOG_PATH", "")

    # ==========================================================================
    # Batch purchase stock-out simulation
    # ==========================================================================
    # buy_multiple() flips a coin per bike; on True (and the bike being in the
    # handler's catalog) the bike is reported out of inventory.
    #
    # STOCKOUT_PROBABILITY: chance the coin comes up True (default 0.5)
    # RANDOM_SEED: integer seed for reproducible runs (default: unseeded)
    # ==========================================================================
    STOCKOUT_PROBABILITY = float(os.environ.get("STOCKOUT_PROBABILITY", "0.5"))
    RANDOM_SEED = _optional_int(os.environ.get("RANDOM_SEED"))


class ProductionConfig(Config):
    """Production configuration."""
    ENVIRONMENT = "production"
    LOG_LEVEL = "INFO"
    LOG_TO_FILE = True


class DevelopmentConfig(Config):
    """Development configuration."""
    ENVIRONMENT = "development"
    LOG_LEVEL = "DEBUG"


class TestingConfig(Config):
    """Testing configuration."""
    ENVIRONMENT = "testing"
    LOG_LEVEL = "WARNING"
    LOG_TO_FILE = False
    CATALOG_PATH = ""
    RANDOM_SEED = 1234


CONFIGS = {
    "production": ProductionConfig,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}


def get_config(name: Optional[str] = None) -> type:
    """
    Pick a configuration class by environment name.

    Args:
        name: 'production', 'development' or 'testing'
              (default: STORE_ENV, then "development");
              unknown names get the base Config

    Returns:
        Config class (not an instance)
    """
    name = name or os.environ.get("STORE_ENV") or "development"
    return CONFIGS.get(name, Config)
