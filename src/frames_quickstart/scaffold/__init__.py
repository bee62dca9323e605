"""Project scaffolding - template clone, file customization, bootstrap."""

from frames_quickstart.scaffold.commands import CommandRunner
from frames_quickstart.scaffold.generator import GenerationResult, ProjectGenerator

__all__ = ["CommandRunner", "GenerationResult", "ProjectGenerator"]
