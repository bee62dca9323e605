"""package.json rewrite as a partial update over an open JSON object.

Only the keys named by the patch are touched; anything else the template
ships is carried through in its original order.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from frames_quickstart.errors import DescriptorError

INITIAL_VERSION = "0.1.0"

# Keys describing the template itself rather than the generated app.
TEMPLATE_OWNED_KEYS: tuple[str, ...] = (
    "author",
    "keywords",
    "repository",
    "license",
    "bin",
    "files",
)


@dataclass(frozen=True)
class DescriptorPatch:
    """Fields to set and keys to drop on a package descriptor."""

    name: str
    version: str = INITIAL_VERSION
    remove_keys: tuple[str, ...] = field(default=TEMPLATE_OWNED_KEYS)

    def apply(self, descriptor: dict[str, Any]) -> dict[str, Any]:
        """Return a patched copy; absent keys in remove_keys are ignored."""
        patched = dict(descriptor)
        patched["name"] = self.name
        patched["version"] = self.version
        for key in self.remove_keys:
            patched.pop(key, None)
        return patched


def load_descriptor(path: Path) -> dict[str, Any]:
    """Read package.json as a generic JSON object.

    Raises:
        DescriptorError: If the file is missing, unparsable or not an object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise DescriptorError(f"Package descriptor not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise DescriptorError(f"Expected a JSON object in {path}")
    return data


def write_descriptor(path: Path, descriptor: dict[str, Any]) -> None:
    """Write package.json with 2-space indentation."""
    path.write_text(json.dumps(descriptor, indent=2, ensure_ascii=False), encoding="utf-8")


def rewrite_descriptor(path: Path, patch: DescriptorPatch) -> dict[str, Any]:
    """Load, patch and write back package.json. Returns the written object."""
    patched = patch.apply(load_descriptor(path))
    write_descriptor(path, patched)
    return patched
