"""Vault API module: the document store parse requests read lines from."""

from ._AbstractLineSource import _AbstractLineSource
from .Vault import Vault
from .VaultConfig import VaultConfig

__all__ = [
    "Vault",
    "VaultConfig",
    "_AbstractLineSource",
]
