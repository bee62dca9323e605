"""Shared fakes for generator and CLI tests.

FakeRunner stands in for git and the package manager: `git clone` copies a
template directory, `git init` creates an empty .git, everything else is
only recorded.
"""

from __future__ import annotations

import io
import json
import shlex
import shutil
from pathlib import Path

import pytest
from pydantic import SecretStr
from rich.console import Console

from frames_quickstart.errors import CommandError
from frames_quickstart.manifest.base import BaseSigner
from frames_quickstart.models.inputs import UserInputs
from frames_quickstart.scaffold.commands import CommandRunner

TEMPLATE_PACKAGE_JSON = {
    "name": "create-farcaster-frames",
    "version": "0.0.12",
    "type": "module",
    "author": "lucas-neynar",
    "keywords": ["farcaster", "frames"],
    "repository": {"type": "git", "url": "https://example.com/template.git"},
    "license": "MIT",
    "bin": {"create-farcaster-frames": "./bin/index.js"},
    "files": ["bin/index.js"],
    "scripts": {"dev": "next dev", "build": "next build"},
    "dependencies": {"next": "15.0.3", "react": "^18"},
}

ENV_EXAMPLE_CONTENT = "KV_REST_API_URL=\nKV_REST_API_TOKEN="
README_CONTENT = "# Frames v2 Demo\n\nA Farcaster Frames v2 demo app.\n"


class FakeRunner(CommandRunner):
    """Records commands and simulates clone/init against a local template."""

    def __init__(self, template: Path, fail_on: str | None = None) -> None:
        self.template = template
        self.fail_on = fail_on
        self.calls: list[tuple[list[str], Path | None, bool]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [args for args, _, _ in self.calls]

    def run(self, args, cwd=None, *, stream=False) -> None:
        args = list(args)
        self.calls.append((args, cwd, stream))
        cmd_str = shlex.join(args)
        if self.fail_on and self.fail_on in cmd_str:
            raise CommandError(cmd_str, 1, "simulated failure")
        if args[:2] == ["git", "clone"]:
            shutil.copytree(self.template, Path(args[-1]))
        elif args[:2] == ["git", "init"]:
            (Path(cwd) / ".git").mkdir()


class StaticSigner(BaseSigner):
    """Deterministic signer that never touches real key material."""

    def sign(self, account_id, secret_phrase):
        return {
            "accountAssociation": {
                "header": f"header-{account_id}",
                "payload": "payload",
                "signature": "signature",
            },
            "frame": {"name": "Frames v2 Demo", "buttonTitle": "Launch ✨"},
        }


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template checkout with every optional file present."""
    root = tmp_path / "template"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    (root / "bin").mkdir()
    (root / "bin" / "index.js").write_text("#!/usr/bin/env node\n", encoding="utf-8")
    (root / "public").mkdir()
    (root / "public" / "manifest.json").write_text("{}", encoding="utf-8")
    (root / "package.json").write_text(
        json.dumps(TEMPLATE_PACKAGE_JSON, indent=2), encoding="utf-8"
    )
    (root / ".env.example").write_text(ENV_EXAMPLE_CONTENT, encoding="utf-8")
    (root / "README.md").write_text(README_CONTENT, encoding="utf-8")
    return root


@pytest.fixture
def fake_runner(template_dir: Path) -> FakeRunner:
    return FakeRunner(template_dir)


@pytest.fixture
def signer() -> StaticSigner:
    return StaticSigner()


@pytest.fixture
def user_inputs() -> UserInputs:
    return UserInputs(
        project_name="my-frame",
        description="A test frame",
        account_id="1234",
        secret_phrase=SecretStr("valid twelve word phrase goes here for testing only ok"),
    )


@pytest.fixture
def capture_console() -> Console:
    """Console writing to an in-memory buffer; read via .file.getvalue()."""
    return Console(file=io.StringIO(), soft_wrap=True, width=120)
