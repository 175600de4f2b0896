"""CLI entry point for ``lwc-component`` / ``python -m lwc_scaffold``.

Usage::

    lwc-component
    lwc-component --root ./my-project --component my-button --unit
    lwc-component --no-interactive --namespace base --component myButton
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from .config import ScaffoldConfig
from .errors import ScaffoldError
from .prompts import ConsolePrompter, ScriptedPrompter
from .utils import console, print_error, print_success, print_warning
from .workflow import ComponentWorkflow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lwc-component",
        description="Interactively scaffold a component under src/modules/<namespace>/.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  lwc-component\n"
            "  lwc-component --component my-button --unit\n"
            "  lwc-component --no-interactive --namespace base --component myButton\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root containing src/modules (default: current directory)",
    )
    parser.add_argument("--namespace", default=None, help="Default component namespace")
    parser.add_argument("--component", default=None, help="Default component name")
    parser.add_argument(
        "--css",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Default answer for the CSS file question",
    )
    parser.add_argument(
        "--unit",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Default answer for the unit test question",
    )
    parser.add_argument(
        "--wdio",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Default answer for the WDIO test question",
    )
    parser.add_argument(
        "--interactive",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Ask every question on the terminal (default). "
        "--no-interactive answers from the options above and the defaults.",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Create the component without the final confirmation",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print discovery details and every created path",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the workflow and exit with 0 on success or decline, 1 on failure."""
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.from_env(args.root)
    defaults = {
        "namespace": args.namespace,
        "component": args.component,
        "css": args.css,
        "unit": args.unit,
        "wdio": args.wdio,
    }
    if args.interactive:
        prompter = ConsolePrompter(console)
    else:
        prompter = ScriptedPrompter()

    workflow = ComponentWorkflow(config, prompter, defaults=defaults, verbose=args.verbose)
    try:
        result = workflow.run(assume_yes=args.yes)
    except ScaffoldError as exc:
        print_error(f"Error: {escape(exc.message)}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: generation failed: {escape(str(exc))}")
        print_warning("Files created before the failure were left in place.")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_warning("Aborted.")
        sys.exit(1)

    if result.created:
        files = [p for p in result.written if p.is_file()]
        component_dir = result.spec.component_dir(config.modules_dir)
        print_success(f"Created {len(files)} files in {component_dir}")
    else:
        console.print("[dim]Nothing created.[/dim]")


if __name__ == "__main__":
    main(sys.argv[1:])
