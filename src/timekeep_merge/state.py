# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from pathlib import Path
from typing import Optional

_vault_override: ContextVar[Optional[Path]] = ContextVar("vault_override", default=None)


def set_vault_override(value: Optional[Path]) -> None:
    _vault_override.set(value)


def get_vault_override() -> Optional[Path]:
    return _vault_override.get()
