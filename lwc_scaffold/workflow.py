"""Component scaffolding workflow.

Runs the five stages in order, each completing before the next begins:

1. DISCOVER  -- list namespaces, detect the language variant.
2. ASK       -- put the component questions to the prompter.
3. VALIDATE  -- build a ``ComponentSpec`` from the answers.
4. PREVIEW   -- print the file tree and ask for confirmation.
5. GENERATE  -- write the files.

Validation failures raise :class:`~lwc_scaffold.errors.ScaffoldError` before
anything is written.  Printing the error and choosing an exit status is left
to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console

from .config import ScaffoldConfig
from .discovery import detect_language_variant, discover_namespaces
from .errors import UnknownNamespace
from .models import WorkflowResult, WorkflowStatus
from .preview import print_preview
from .prompts import Prompter, build_questions, confirmation_question
from .scaffolder import ComponentGenerator
from .spec_builder import build_spec
from .utils import console as default_console, print_detail, print_warning


class ComponentWorkflow:
    """Drives one interactive component generation.

    Attributes:
        config: Project layout and framework names.
        prompter: Source of answers (terminal or scripted).
        defaults: Per-question default overrides, keyed by question name.
        verbose: Print dim detail lines for each stage.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        prompter: Prompter,
        *,
        defaults: Mapping[str, Any] | None = None,
        verbose: bool = False,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.prompter = prompter
        self.defaults = dict(defaults or {})
        self.verbose = verbose
        self.console = default_console if console is None else console
        self.generator = ComponentGenerator(config)

    def run(self, *, assume_yes: bool = False) -> WorkflowResult:
        """Execute the workflow.

        Args:
            assume_yes: Skip the final confirmation question.

        Returns:
            ``CREATED`` with the written paths, or ``DECLINED`` when the
            operator answered no to the confirmation.
        """
        modules_dir = self.config.modules_dir

        namespaces = discover_namespaces(modules_dir)
        variant = detect_language_variant(self.config)
        self._detail(f"Namespaces in {modules_dir}: {', '.join(namespaces)}")
        self._detail(f"Language variant: {variant.name.lower()} (.{variant.extension})")

        preset = self.defaults.get("namespace")
        if preset is not None and preset not in namespaces:
            raise UnknownNamespace(preset, namespaces)

        answers = self.prompter.ask(build_questions(namespaces, self.defaults))

        spec = build_spec(answers, namespaces, variant, modules_dir)
        if spec.was_normalized:
            print_warning(
                f'Assuming "{spec.normalized_name}" (was "{spec.raw_name}")',
                console=self.console,
            )

        print_preview(spec, self.console)
        if not assume_yes:
            confirm = confirmation_question()
            if not self.prompter.ask([confirm])[confirm.name]:
                return WorkflowResult(status=WorkflowStatus.DECLINED, spec=spec)

        written = self.generator.generate(spec)
        for path in written:
            self._detail(f"created {path.relative_to(self.config.root)}")
        return WorkflowResult(status=WorkflowStatus.CREATED, spec=spec, written=written)

    def _detail(self, message: str) -> None:
        print_detail(message, verbose=self.verbose, console=self.console)
