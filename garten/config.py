"""
Configuration management with environment variable support.

Runtime settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from garten/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# HTTP API configuration
API_PREFIX: str = os.getenv("API_PREFIX", "/garten")
API_DOCS_ENABLED: bool = os.getenv("API_DOCS_ENABLED", "true").lower() == "true"

# Host page integration
HOST_GLOBAL_NAME: str = os.getenv("HOST_GLOBAL_NAME", "OshineyeConfig")

# Garten widget constants (fixed, not overridable)
GARTEN_SEED: int = 123
GARTEN_MAX_HEIGHT: float = 1.0
GARTEN_PALETTE: str = "monotone"
