from __future__ import annotations

"""Centralized path utilities for the project.

These provide absolute `Path` objects to key directories, avoiding
hard-coded relative paths throughout the codebase and improving
portability across environments.
"""

from pathlib import Path


# The `user_directory` package is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Canonical directories used throughout the project
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = PROJECT_ROOT / "logs"

DEFAULT_CONFIG_FILE = CONFIG_DIR / "app_config.yaml"
DEFAULT_STORAGE_FILE = DATA_DIR / "local_storage.json"
