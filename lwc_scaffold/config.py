"""Scaffolder configuration.

Typed configuration for one workflow run.  The project root is an explicit
value rather than the process working directory, so the workflow can be run
repeatedly (e.g. from tests) against different trees.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Project layout conventions and framework names used by the generator."""

    root: Path = Field(default=Path("."), description="Project root directory")
    modules_subdir: str = Field(
        default="src/modules",
        min_length=1,
        description="Directory holding namespace folders, relative to root",
    )
    type_marker: str = Field(
        default="tsconfig.json",
        min_length=1,
        description="File whose presence at root selects the typed variant",
    )
    framework_module: str = Field(default="lwc", min_length=1)
    base_class: str = Field(default="LightningElement", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def modules_dir(self) -> Path:
        """Root of the namespace folders (``<root>/src/modules``)."""
        return self.root / self.modules_subdir

    @property
    def type_marker_path(self) -> Path:
        """Path to the type-configuration marker file."""
        return self.root / self.type_marker

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, root: str | Path | None = None) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            LWC_SCAFFOLD_ROOT, LWC_SCAFFOLD_MODULES_DIR,
            LWC_SCAFFOLD_TYPE_MARKER, LWC_SCAFFOLD_FRAMEWORK_MODULE,
            LWC_SCAFFOLD_BASE_CLASS.

        An explicit *root* takes precedence over ``LWC_SCAFFOLD_ROOT``.
        """
        kwargs: dict[str, Any] = {}
        if root is not None:
            kwargs["root"] = Path(root)
        elif os.environ.get("LWC_SCAFFOLD_ROOT"):
            kwargs["root"] = Path(os.environ["LWC_SCAFFOLD_ROOT"])
        if os.environ.get("LWC_SCAFFOLD_MODULES_DIR"):
            kwargs["modules_subdir"] = os.environ["LWC_SCAFFOLD_MODULES_DIR"]
        if os.environ.get("LWC_SCAFFOLD_TYPE_MARKER"):
            kwargs["type_marker"] = os.environ["LWC_SCAFFOLD_TYPE_MARKER"]
        if os.environ.get("LWC_SCAFFOLD_FRAMEWORK_MODULE"):
            kwargs["framework_module"] = os.environ["LWC_SCAFFOLD_FRAMEWORK_MODULE"]
        if os.environ.get("LWC_SCAFFOLD_BASE_CLASS"):
            kwargs["base_class"] = os.environ["LWC_SCAFFOLD_BASE_CLASS"]
        return cls(**kwargs)
