"""Generator configuration model.

Captures frames-quickstart.yaml fields with defaults that reproduce the
stock quickstart: the upstream template, npm, and a localhost manifest.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

TEMPLATE_URL = "https://github.com/lucas-neynar/frames-v2-quickstart.git"
CONFIG_FILENAME = "frames-quickstart.yaml"
CONFIG_ENV_VAR = "FRAMES_QUICKSTART_CONFIG"


class ManifestSettings(BaseModel):
    """Template-fixed fields baked into the signed frame manifest.

    The domain is what the account association signs; the frame block
    points at the dev server the template starts.
    """

    model_config = {"extra": "forbid"}

    domain: str = "localhost:3000"
    home_url: str = "http://localhost:3000"
    frame_name: str = "Frames v2 Demo"
    frame_version: str = "0.0.0"
    button_title: str = "Launch Frame"
    splash_background_color: str = "#f7f7f7"


class GeneratorConfig(BaseModel):
    """Settings for a generation run, loaded from frames-quickstart.yaml."""

    model_config = {"extra": "forbid"}

    template_url: str = TEMPLATE_URL
    template_ref: str | None = None
    package_manager: str = "npm"
    commit_message: str = "initial commit from frames-v2-quickstart"
    signer: str = "farcaster"
    manifest: ManifestSettings = Field(default_factory=ManifestSettings)

    @property
    def install_command(self) -> list[str]:
        return [self.package_manager, "install"]

    @property
    def dev_command(self) -> str:
        return f"{self.package_manager} run dev"


def find_config_file(cwd: Path | None = None) -> Path | None:
    """Locate the config file: $FRAMES_QUICKSTART_CONFIG, then cwd.

    Returns None when neither exists. An env var pointing at a missing
    file is returned as-is so loading reports it.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def load_generator_config(path: Path | None = None) -> GeneratorConfig:
    """Load GeneratorConfig from YAML. Returns defaults if no file is found.

    Args:
        path: Explicit config file. If None, uses find_config_file().

    Returns:
        Validated GeneratorConfig instance.

    Raises:
        FileNotFoundError: If an explicitly configured file is missing.
        pydantic.ValidationError: If the file has unknown or invalid keys.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        return GeneratorConfig()
    import yaml

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return GeneratorConfig()
    return GeneratorConfig.model_validate(raw)
