"""In-place edits of the cloned template's files."""

from __future__ import annotations

import shutil
from pathlib import Path

ENV_EXAMPLE = ".env.example"
ENV_FILE = ".env"
README = "README.md"

BANNER_TEMPLATE = "<!-- generated by frames-v2-quickstart version {version} -->\n\n"


def remove_tree(path: Path) -> bool:
    """Delete a directory tree. Returns False if it was not there."""
    if not path.exists():
        return False
    shutil.rmtree(path)
    return True


def env_line(key: str, value: str) -> str:
    """Render a double-quoted env assignment.

    The value is inserted verbatim; quotes or newlines in it are not escaped.
    """
    return f'{key}="{value}"'


def needs_escaping(value: str) -> bool:
    return '"' in value or "\n" in value or "\r" in value


def materialize_env_file(project: Path, name: str, description: str) -> bool:
    """Turn .env.example into .env and append the frame name and description.

    Returns False, touching nothing, when the template has no .env.example.
    """
    example = project / ENV_EXAMPLE
    if not example.exists():
        return False

    env_path = project / ENV_FILE
    shutil.copyfile(example, env_path)
    example.unlink()
    with env_path.open("a", encoding="utf-8", newline="") as fh:
        fh.write("\n" + env_line("NEXT_PUBLIC_FRAME_NAME", name))
        fh.write("\n" + env_line("NEXT_PUBLIC_FRAME_DESCRIPTION", description))
    return True


def readme_banner(version: str) -> str:
    return BANNER_TEMPLATE.format(version=version)


def prepend_readme_banner(project: Path, version: str) -> bool:
    """Put the generation banner at the top of README.md.

    Creates the README with only the banner when there is none. Returns
    whether a README already existed.
    """
    readme = project / README
    banner = readme_banner(version)
    if readme.exists():
        original = readme.read_bytes()
        readme.write_bytes(banner.encode("utf-8") + original)
        return True
    readme.write_bytes(banner.encode("utf-8"))
    return False
