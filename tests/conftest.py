"""Shared pytest fixtures for the lwc-scaffold test suite.

Provides:
- A factory that builds a project tree (``src/modules/<namespace>``) under
  ``tmp_path``, optionally with a ``tsconfig.json`` marker
- A ready-made single-namespace project and its config
- Sample ``ComponentSpec`` instances
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from lwc_scaffold.config import ScaffoldConfig
from lwc_scaffold.models import ComponentSpec, LanguageVariant


# ---------------------------------------------------------------------------
# Project trees
# ---------------------------------------------------------------------------

@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory: ``make_project(namespaces=("base",), typed=False) -> root``."""

    def _make(namespaces: Sequence[str] = ("base",), typed: bool = False) -> Path:
        root = tmp_path / "project"
        modules = root / "src" / "modules"
        modules.mkdir(parents=True, exist_ok=True)
        for namespace in namespaces:
            (modules / namespace).mkdir(exist_ok=True)
        if typed:
            (root / "tsconfig.json").write_text("{}\n", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def project_root(make_project: Callable[..., Path]) -> Path:
    """A JavaScript project with the single namespace ``base``."""
    return make_project()


@pytest.fixture
def config(project_root: Path) -> ScaffoldConfig:
    return ScaffoldConfig(root=project_root)


@pytest.fixture
def snapshot_tree() -> Callable[[Path], set[str]]:
    """Return a helper listing every path under a root, relative and POSIX-style."""

    def _snapshot(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*")}

    return _snapshot


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_spec() -> ComponentSpec:
    """``base/myButton`` with no optional files."""
    return ComponentSpec(
        namespace="base",
        raw_name="myButton",
        normalized_name="myButton",
        include_css=False,
        include_unit_test=False,
        include_wdio_test=False,
        language_variant=LanguageVariant.SCRIPT,
    )


@pytest.fixture
def full_spec() -> ComponentSpec:
    """``base/myButton`` with css, unit and wdio enabled, typed variant."""
    return ComponentSpec(
        namespace="base",
        raw_name="my-button",
        normalized_name="myButton",
        include_css=True,
        include_unit_test=True,
        include_wdio_test=True,
        language_variant=LanguageVariant.TYPED,
    )
