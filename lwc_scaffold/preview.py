"""Render the file tree a :class:`ComponentSpec` will produce."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .models import ComponentSpec
from .utils import console as default_console


def _blue(text: str) -> str:
    return f"[blue]{escape(text)}[/blue]"


def render_preview(spec: ComponentSpec) -> list[str]:
    """Return the preview as rich-markup lines, heading first.

    Optional entries appear only when enabled: ``__tests__`` (unit test),
    ``__wdio__`` (placeholder), then the stylesheet.  Markup and source
    files are always listed last.
    """
    name = spec.normalized_name
    ext = spec.extension
    lines = [
        "[green]Do you want to create:[/green]",
        f"  {_blue(spec.namespace)}/",
        f"  ├── {_blue(name)}/",
    ]
    if spec.include_unit_test:
        lines.append(f"  │   ├── {_blue('__tests__')}/")
        lines.append(f"  │   │   └── {_blue(f'{name}.test.{ext}')}")
    if spec.include_wdio_test:
        lines.append(f"  │   ├── {_blue('__wdio__')}/")
        lines.append("  │   │   └── [red]Coming Soon[/red]")
    if spec.include_css:
        lines.append(f"  │   ├── {_blue(f'{name}.css')}")
    lines.append(f"  │   ├── {_blue(f'{name}.html')}")
    lines.append(f"  │   └── {_blue(f'{name}.{ext}')}")
    return lines


def print_preview(spec: ComponentSpec, console: Console | None = None) -> None:
    """Print :func:`render_preview` output.  Read-only."""
    out = default_console if console is None else console
    for line in render_preview(spec):
        out.print(line, highlight=False)
