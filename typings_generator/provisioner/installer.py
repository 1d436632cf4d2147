"""Provisioner: runs npm, typings and git in the freshly written project.

Every step is awaited before the next one starts and its output goes straight
to the terminal.  Failures are best-effort: a non-zero exit status (or a
missing executable) is reported as a warning and the next step still runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from typings_generator.collector.models import SessionConfig
from typings_generator.utils import console, print_warning, run_command

SUBMODULE_PATH = "source"


@dataclass(frozen=True)
class InstallStep:
    """One external command in the provisioning sequence."""

    name: str
    command: list[str]
    announce: str


@dataclass(frozen=True)
class StepResult:
    """Outcome of an executed :class:`InstallStep`."""

    name: str
    command: list[str]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def plan_steps(session: SessionConfig) -> list[InstallStep]:
    """Return the ordered commands to run for *session*."""
    steps = [
        InstallStep("npm-install", ["npm", "install"], "Running [green]npm install[/green]..."),
    ]
    if session.is_published_on_registry and session.registry_name:
        steps.append(
            InstallStep(
                "install-source",
                ["npm", "install", "-D", "--save-exact", session.registry_name],
                f"Installing [green]{session.registry_name}[/green]...",
            )
        )
    steps.extend([
        InstallStep(
            "typings-install", ["typings", "install"], "Running [green]typings install[/green]..."
        ),
        InstallStep("build", ["npm", "run", "build"], "Running [green]npm run build[/green]..."),
        InstallStep(
            "git-init", ["git", "init"], f"Downloading [green]{session.source_repo_ref}[/green]..."
        ),
        InstallStep(
            "git-submodule",
            ["git", "submodule", "add", session.source_package_url, SUBMODULE_PATH],
            f"Adding [green]{session.source_package_url}[/green] as submodule "
            f"[green]{SUBMODULE_PATH}[/green]...",
        ),
    ])
    return steps


class Provisioner:
    """Run the provisioning steps for *session* inside *project_dir*."""

    def __init__(
        self,
        session: SessionConfig,
        project_dir: str | Path,
        timeout: float | None = None,
    ) -> None:
        self.session = session
        self.project_dir = Path(project_dir)
        self.timeout = timeout

    async def run(self) -> list[StepResult]:
        results: list[StepResult] = []
        for step in plan_steps(self.session):
            results.append(await self._run_step(step))
        return results

    async def _run_step(self, step: InstallStep) -> StepResult:
        console.print(step.announce)
        returncode, _, stderr = await run_command(
            step.command, cwd=self.project_dir, timeout=self.timeout, capture=False
        )
        if returncode != 0:
            detail = f": {stderr}" if stderr else ""
            print_warning(
                f"  '{' '.join(step.command)}' exited with status {returncode}{detail}; continuing."
            )
        return StepResult(step.name, step.command, returncode)
