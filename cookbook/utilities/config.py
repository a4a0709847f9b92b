"""Configuration management for the cookbook application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from cookbook.utilities import constants

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Start the web session with the demo storage and cookbook
SEED_DEMO_DATA: Final[bool] = os.getenv('SEED_DEMO_DATA', 'True').lower() == 'true'

CURRENCY: Final[str] = os.getenv('CURRENCY', constants.CURRENCY)

# Pantry Alerts Configuration
DAYS_BEFORE_EXPIRY: Final[int] = int(os.getenv('DAYS_BEFORE_EXPIRY', str(constants.DAYS_BEFORE_EXPIRY)))
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {
    unit: float(os.getenv(f'LOW_STOCK_THRESHOLD_{unit.upper()}', str(default)))
    for unit, default in constants.LOW_STOCK_THRESHOLD.items()
}
