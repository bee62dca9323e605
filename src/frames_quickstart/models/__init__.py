"""Frames quickstart models - user inputs and generator configuration."""

from frames_quickstart.models.config import (
    GeneratorConfig,
    ManifestSettings,
    load_generator_config,
)
from frames_quickstart.models.inputs import UserInputs

__all__ = [
    "GeneratorConfig",
    "ManifestSettings",
    "UserInputs",
    "load_generator_config",
]
