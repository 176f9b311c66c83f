# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "timekeep-merge"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_SCAN_BATCH_SIZE = 25


class Configuration(TypedDict):
    vault_path: Optional[str]
    scan_batch_size: int
    show_header: bool
    log_level: str
    pdf_title: str
    pdf_rows_per_page: int
    pdf_date_format: str


def get_default_configuration() -> Configuration:
    return {
        "vault_path": None,
        "scan_batch_size": DEFAULT_SCAN_BATCH_SIZE,
        "show_header": True,
        "log_level": "WARNING",
        "pdf_title": "Merged timekeep",
        "pdf_rows_per_page": 30,
        "pdf_date_format": "YYYY-MM-DD HH:mm",
    }


def resolve_vault_path(config: Configuration) -> Path:
    """
    Resolve the vault directory from the configuration.

    A vault_path of None means the current working directory.
    """
    vault_path = config.get("vault_path")
    if vault_path is None:
        return Path.cwd()
    return Path(vault_path).expanduser()
