"""Component file generator.

Takes a confirmed ``ComponentSpec`` and creates the component directory with
its source, markup, and optional stylesheet and unit test files.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

from ..config import ScaffoldConfig
from ..models import ComponentSpec, FileTarget
from .templates import TemplateRenderer


TESTS_DIR = "__tests__"


class ComponentGenerator:
    """Plans and writes the files for one component.

    The plan is an ordered list of :class:`FileTarget` items relative to the
    namespace directory; directories always precede the files inside them.
    Writing is not transactional: if a write fails, earlier items stay on
    disk.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def plan(self, spec: ComponentSpec) -> list[FileTarget]:
        """Return the ordered list of directories and files to create."""
        ctx = self._build_context(spec)
        name = spec.normalized_name
        ext = spec.extension
        base = PurePosixPath(name)

        targets = [
            FileTarget(relative_path=str(base), is_directory=True),
            FileTarget(
                relative_path=str(base / f"{name}.{ext}"),
                content=self.renderer.render("component/source.j2", ctx),
            ),
            FileTarget(
                relative_path=str(base / f"{name}.html"),
                content=self.renderer.render("component/markup.html.j2", ctx),
            ),
        ]

        if spec.include_css:
            targets.append(FileTarget(relative_path=str(base / f"{name}.css")))

        if spec.include_unit_test:
            tests_dir = base / TESTS_DIR
            targets.append(FileTarget(relative_path=str(tests_dir), is_directory=True))
            targets.append(
                FileTarget(
                    relative_path=str(tests_dir / f"{name}.test.{ext}"),
                    content=self.renderer.render("component/unit_test.j2", ctx),
                )
            )

        # include_wdio_test: no WDIO scaffolding exists yet, nothing to plan.
        return targets

    def generate(self, spec: ComponentSpec) -> list[Path]:
        """Create every planned item under the namespace directory.

        Directories are created with ``exist_ok=False``; a component
        directory that appeared after validation raises ``FileExistsError``.

        Returns:
            The created paths, in creation order.
        """
        namespace_dir = self.config.modules_dir / spec.namespace
        created: list[Path] = []
        for target in self.plan(spec):
            path = namespace_dir / target.relative_path
            if target.is_directory:
                path.mkdir()
            else:
                path.write_text(target.content, encoding="utf-8")
            created.append(path)
        return created

    # -- Context building --------------------------------------------------

    def _build_context(self, spec: ComponentSpec) -> dict[str, Any]:
        """Build the Jinja2 template context from the spec and config."""
        return {
            "namespace": spec.namespace,
            "component": spec.normalized_name,
            "class_name": spec.class_name,
            "import_name": spec.import_name,
            "tag": spec.tag,
            "framework_module": self.config.framework_module,
            "base_class": self.config.base_class,
        }
