"""Component scaffolder -- renders and writes component file trees.

Quick usage::

    from lwc_scaffold.scaffolder import ComponentGenerator

    generator = ComponentGenerator(config)
    for target in generator.plan(spec):
        print(target.relative_path)
    generator.generate(spec)
"""

from lwc_scaffold.scaffolder.generator import ComponentGenerator
from lwc_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ComponentGenerator",
    "TemplateRenderer",
]
