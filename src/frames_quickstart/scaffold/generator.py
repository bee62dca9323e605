"""Project generation pipeline for frames-v2-quickstart.

Clones the template into a new directory and customizes it in place:
signed manifest, package.json, .env, README banner, then installs
dependencies and starts a fresh git history. Steps run strictly in order
and the first failure aborts the rest. A partially generated directory is
left on disk for the user to inspect.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from frames_quickstart import __version__
from frames_quickstart.errors import (
    CommandError,
    DestinationExistsError,
    TemplateFetchError,
)
from frames_quickstart.manifest.base import BaseSigner, serialize_manifest
from frames_quickstart.models.config import GeneratorConfig
from frames_quickstart.models.inputs import UserInputs
from frames_quickstart.scaffold.commands import CommandRunner
from frames_quickstart.scaffold.descriptor import DescriptorPatch, rewrite_descriptor
from frames_quickstart.scaffold.files import (
    ENV_EXAMPLE,
    materialize_env_file,
    needs_escaping,
    prepend_readme_banner,
    remove_tree,
)

MANIFEST_PATH = Path("public") / "manifest.json"
PACKAGE_JSON = "package.json"
# The template's own npx entry point, meaningless in a generated app.
SCAFFOLD_DIR = "bin"


@dataclass
class GenerationResult:
    """Outcome of a successful run."""

    project_path: Path
    env_created: bool
    readme_existed: bool


class ProjectGenerator:
    """Runs the generation steps for one project.

    Args:
        signer: Produces the manifest document from the account credentials.
        config: Template source, package manager and commit settings.
        runner: Executes git and package-manager commands.
        console: Where step messages go.
    """

    def __init__(
        self,
        signer: BaseSigner,
        config: GeneratorConfig | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
    ) -> None:
        self.signer = signer
        self.config = config or GeneratorConfig()
        self.runner = runner or CommandRunner()
        self.console = console or Console()

    def _step(self, message: str) -> None:
        self.console.print(f"\n[bold blue]{message}[/bold blue]")

    def run(self, inputs: UserInputs, destination: Path) -> GenerationResult:
        """Generate the project at destination.

        Raises:
            DestinationExistsError: destination is already present.
            TemplateFetchError: the template clone failed.
            ManifestError: the signer could not produce a manifest.
            DescriptorError: package.json is missing or malformed.
            CommandError: install or a git command failed.
            OSError: a filesystem operation failed.
        """
        destination = destination.resolve()
        if destination.exists():
            raise DestinationExistsError(destination)

        self.console.print(
            f"\nCreating a new Frames v2 app in [bold]{escape(str(destination))}[/bold]"
        )
        self.fetch_template(destination)

        self._step("Removing .git directory...")
        remove_tree(destination / ".git")

        self._step("Generating manifest...")
        self.write_manifest(inputs, destination)

        self._step("Updating package.json...")
        rewrite_descriptor(
            destination / PACKAGE_JSON, DescriptorPatch(name=inputs.trimmed_name)
        )

        self._step(f"Removing {SCAFFOLD_DIR} directory...")
        remove_tree(destination / SCAFFOLD_DIR)

        self._step("Setting up environment variables...")
        env_created = self.setup_env(inputs, destination)

        self._step("Updating README...")
        readme_existed = prepend_readme_banner(destination, __version__)

        self._step("Installing dependencies...")
        self.runner.run(self.config.install_command, cwd=destination, stream=True)

        self._step("Initializing git repository...")
        self.init_history(destination)

        self.report_success(inputs.trimmed_name)
        return GenerationResult(
            project_path=destination,
            env_created=env_created,
            readme_existed=readme_existed,
        )

    def fetch_template(self, destination: Path) -> None:
        args = ["git", "clone"]
        if self.config.template_ref:
            args += ["--branch", self.config.template_ref]
        args += [self.config.template_url, str(destination)]
        try:
            self.runner.run(args)
        except CommandError as exc:
            raise TemplateFetchError(
                f"Could not clone template {self.config.template_url}: {exc}"
            ) from exc

    def write_manifest(self, inputs: UserInputs, destination: Path) -> Path:
        manifest = self.signer.sign(inputs.account_id, inputs.secret_phrase)
        path = destination / MANIFEST_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize_manifest(manifest), encoding="utf-8")
        return path

    def setup_env(self, inputs: UserInputs, destination: Path) -> bool:
        created = materialize_env_file(
            destination, inputs.project_name, inputs.description
        )
        if not created:
            self.console.print(
                f"{ENV_EXAMPLE} does not exist, skipping copy and remove operations"
            )
            return False

        self.console.print(f"Created .env file from {ENV_EXAMPLE}")
        for label, value in (
            ("name", inputs.project_name),
            ("description", inputs.description),
        ):
            if needs_escaping(value):
                self.console.print(
                    f"[yellow]Warning:[/yellow] the frame {label} contains a quote "
                    "or line break and was written unescaped; check .env"
                )
        return True

    def init_history(self, destination: Path) -> None:
        self.runner.run(["git", "init"], cwd=destination)
        self.runner.run(["git", "add", "."], cwd=destination)
        self.runner.run(
            ["git", "commit", "-m", self.config.commit_message], cwd=destination
        )

    def report_success(self, name: str) -> None:
        name = escape(name)
        self.console.print(
            f"\n[green][bold]Successfully created frame {name} "
            "with git and dependencies installed![/bold][/green]"
        )
        self.console.print("\nTo run the app:")
        self.console.print(f"  cd {name}")
        self.console.print(f"  {escape(self.config.dev_command)}\n")
