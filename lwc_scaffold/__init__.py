"""lwc-scaffold -- interactive component scaffolding for ``src/modules`` projects.

Quick usage::

    from lwc_scaffold import ComponentWorkflow, ScaffoldConfig, ScriptedPrompter

    config = ScaffoldConfig(root="/path/to/project")
    prompter = ScriptedPrompter({"component": "myButton", "unit": True})
    result = ComponentWorkflow(config, prompter).run()
"""

from lwc_scaffold.config import ScaffoldConfig
from lwc_scaffold.errors import ScaffoldError
from lwc_scaffold.models import ComponentSpec, FileTarget, LanguageVariant, WorkflowResult, WorkflowStatus
from lwc_scaffold.prompts import ConsolePrompter, Prompter, Question, QuestionKind, ScriptedPrompter
from lwc_scaffold.workflow import ComponentWorkflow

__all__ = [
    "ComponentSpec",
    "ComponentWorkflow",
    "ConsolePrompter",
    "FileTarget",
    "LanguageVariant",
    "Prompter",
    "Question",
    "QuestionKind",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScriptedPrompter",
    "WorkflowResult",
    "WorkflowStatus",
]
