"""Namespace discovery and language-variant detection."""

from __future__ import annotations

from pathlib import Path

from .config import ScaffoldConfig
from .errors import MissingModulesRoot, NoNamespacesFound
from .models import LanguageVariant


def discover_namespaces(modules_dir: str | Path) -> list[str]:
    """List the namespace folders directly under *modules_dir*.

    Only immediate subdirectories count; order is whatever the filesystem
    enumerates.

    Raises:
        MissingModulesRoot: *modules_dir* does not exist.
        NoNamespacesFound: *modules_dir* has no subdirectories.
    """
    modules_dir = Path(modules_dir)
    if not modules_dir.is_dir():
        raise MissingModulesRoot(modules_dir)

    namespaces = [entry.name for entry in modules_dir.iterdir() if entry.is_dir()]
    if not namespaces:
        raise NoNamespacesFound(modules_dir)
    return namespaces


def detect_language_variant(config: ScaffoldConfig) -> LanguageVariant:
    """Typed when the type-configuration marker exists at the project root."""
    if config.type_marker_path.exists():
        return LanguageVariant.TYPED
    return LanguageVariant.SCRIPT
