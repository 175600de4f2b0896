"""Error taxonomy for the component scaffolder.

Every failure the workflow can detect before touching the filesystem is a
``ScaffoldError`` subclass.  The core only raises; the CLI boundary prints the
message and terminates the process.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for fatal scaffolding errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Configuration errors (discovery stage)
# ---------------------------------------------------------------------------


class MissingModulesRoot(ScaffoldError):
    """Raised when ``<root>/src/modules`` does not exist."""

    def __init__(self, modules_dir: Path) -> None:
        self.modules_dir = modules_dir
        super().__init__(
            "Two assumptions... you are in the root of your project and "
            f"{modules_dir} exists!"
        )


class NoNamespacesFound(ScaffoldError):
    """Raised when the modules root holds no namespace directories."""

    def __init__(self, modules_dir: Path) -> None:
        self.modules_dir = modules_dir
        super().__init__(f'Add a namespace folder to "{modules_dir}"')


# ---------------------------------------------------------------------------
# Validation errors (answer checks)
# ---------------------------------------------------------------------------


class UnknownNamespace(ScaffoldError):
    """Raised when the chosen namespace is not one of the discovered ones."""

    def __init__(self, namespace: str, namespaces: list[str]) -> None:
        self.namespace = namespace
        self.namespaces = namespaces
        super().__init__(
            f'Unknown namespace "{namespace}" (expected one of: {", ".join(namespaces)})'
        )


class EmptyComponentName(ScaffoldError):
    """Raised when the component name answer is empty."""

    def __init__(self) -> None:
        super().__init__("A component has to have a name!")


class InvalidNameCase(ScaffoldError):
    """Raised when the component name does not start with a lowercase letter."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Component name must start with a lowercase letter! (got "{name}")')


class InvalidComponentName(ScaffoldError):
    """Raised when the component name has characters other than letters, digits and hyphens."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Component name may only contain letters, digits and hyphens! (got "{name}")'
        )


class NameCollision(ScaffoldError):
    """Raised when the target component directory already exists."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Component already exists! ({target})")


__all__ = [
    "EmptyComponentName",
    "InvalidComponentName",
    "InvalidNameCase",
    "MissingModulesRoot",
    "NameCollision",
    "NoNamespacesFound",
    "ScaffoldError",
    "UnknownNamespace",
]
