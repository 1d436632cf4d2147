"""Scaffolder -- writes the files of a new typings repository.

Quick usage::

    from typings_generator.scaffolder import ProjectGenerator

    generator = ProjectGenerator(session)
    written = await generator.generate("./typed-react")
"""

from typings_generator.scaffolder.generator import (
    MAIN_FILE,
    STATIC_FILES,
    ProjectGenerator,
    build_test_stub,
)
from typings_generator.scaffolder.templates import TemplateRenderer

__all__ = [
    "MAIN_FILE",
    "STATIC_FILES",
    "ProjectGenerator",
    "TemplateRenderer",
    "build_test_stub",
]
