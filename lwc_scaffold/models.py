"""Pydantic v2 models shared by the scaffolding workflow.

Defines the validated component description (``ComponentSpec``), the items a
generation plan is made of (``FileTarget``), and the outcome of one workflow
run (``WorkflowResult``).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .naming import capitalize_first, derive_tag


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class LanguageVariant(str, Enum):
    """Source language of the target project. The value is the file extension."""
    TYPED = "ts"
    SCRIPT = "js"

    @property
    def extension(self) -> str:
        return self.value


class WorkflowStatus(str, Enum):
    """How a workflow run ended without error."""
    CREATED = "created"
    DECLINED = "declined"


# ---------------------------------------------------------------------------
# Component specification
# ---------------------------------------------------------------------------

class ComponentSpec(BaseModel):
    """Validated, normalized description of the component to generate.

    Built by :func:`lwc_scaffold.spec_builder.build_spec`; never mutated.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1)
    raw_name: str = Field(..., description="Component name exactly as answered")
    normalized_name: str = Field(..., min_length=1, description="Camel-cased folder/file name")
    include_css: bool = True
    include_unit_test: bool = False
    include_wdio_test: bool = False
    language_variant: LanguageVariant = LanguageVariant.SCRIPT

    @property
    def tag(self) -> str:
        """Kebab-case element tag, e.g. ``base-my-button``."""
        return derive_tag(self.namespace, self.normalized_name)

    @property
    def class_name(self) -> str:
        """Default-exported class name in the component source."""
        return capitalize_first(self.normalized_name)

    @property
    def import_name(self) -> str:
        """Name the unit test imports the component under."""
        return capitalize_first(self.namespace) + self.class_name

    @property
    def extension(self) -> str:
        return self.language_variant.extension

    @property
    def was_normalized(self) -> bool:
        return self.raw_name != self.normalized_name

    def component_dir(self, modules_dir: Path) -> Path:
        """Return ``<modules_dir>/<namespace>/<normalized_name>``."""
        return Path(modules_dir) / self.namespace / self.normalized_name


# ---------------------------------------------------------------------------
# Generation plan & results
# ---------------------------------------------------------------------------

class FileTarget(BaseModel):
    """One directory or file the generator will create.

    ``relative_path`` is relative to the namespace directory, so the first
    target of every plan is the component directory itself.
    """

    relative_path: str
    content: str = ""
    is_directory: bool = False


class WorkflowResult(BaseModel):
    """Outcome of a workflow run that did not fail."""

    status: WorkflowStatus
    spec: ComponentSpec
    written: list[Path] = Field(default_factory=list)

    @property
    def created(self) -> bool:
        return self.status is WorkflowStatus.CREATED
