"""Typings generator pipeline.

Runs the three phases once, in order:

Phase 1: COLLECT      -- Prompt for the source package, npm details, license.
Phase 2: MATERIALIZE  -- Write editor config, typings.json, README, test stub,
                         package.json and LICENSE.
Phase 3: PROVISION    -- npm install, typings install, npm run build, git
                         init and submodule add.

Usage::

    typings-generator ./typed-react
    python -m typings_generator ./typed-react --answers answers.json --skip-install
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape

from typings_generator.collector import (
    Collector,
    DefaultsStore,
    PresetPrompter,
    Prompter,
    PromptError,
    RichPrompter,
    SessionConfig,
)
from typings_generator.config import GeneratorConfig
from typings_generator.provisioner import Provisioner, StepResult
from typings_generator.scaffolder import ProjectGenerator, TemplateRenderer
from typings_generator.utils import (
    PHASE_NAMES,
    console,
    load_json,
    print_banner,
    print_error,
    print_phase_header,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline phase cannot run."""

    def __init__(self, phase: int, message: str) -> None:
        self.phase = phase
        super().__init__(f"Phase {phase} ({PHASE_NAMES.get(phase, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Collect answers, write the project, then provision it.

    Attributes:
        config: Run-level settings.
        prompter: Where the collector's questions go.
        session: The collected answers, set once phase 1 finishes.
    """

    def __init__(self, config: GeneratorConfig, prompter: Prompter | None = None) -> None:
        self.config = config
        self.prompter = prompter or RichPrompter()
        self.session: SessionConfig | None = None

    async def run(self) -> dict[str, Any]:
        """Run every phase once and return what each produced."""
        self._check_destination()
        print_banner("Welcome to the sensational [red]typings[/red] generator!")

        session = self.phase1_collect()
        written = await self.phase2_materialize(session)
        steps = await self.phase3_provision(session)
        self._print_closing_hints()

        return {
            "session": session,
            "files": written,
            "steps": steps,
        }

    # ------------------------------------------------------------------
    # Phase 1: COLLECT
    # ------------------------------------------------------------------

    def phase1_collect(self) -> SessionConfig:
        print_phase_header(1, PHASE_NAMES[1])
        store = DefaultsStore.load(self.config.resolved_store_path)
        self.session = Collector(self.prompter, store).collect()
        return self.session

    # ------------------------------------------------------------------
    # Phase 2: MATERIALIZE
    # ------------------------------------------------------------------

    async def phase2_materialize(self, session: SessionConfig) -> list[Path]:
        print_phase_header(2, PHASE_NAMES[2])
        renderer = TemplateRenderer(self.config.template_dir)
        return await ProjectGenerator(session, renderer).generate(self.config.destination)

    # ------------------------------------------------------------------
    # Phase 3: PROVISION
    # ------------------------------------------------------------------

    async def phase3_provision(self, session: SessionConfig) -> list[StepResult]:
        print_phase_header(3, PHASE_NAMES[3])
        if self.config.skip_install:
            print_warning("Skipping install steps (--skip-install).")
            return []

        provisioner = Provisioner(
            session, self.config.destination, timeout=self.config.command_timeout
        )
        results = await provisioner.run()
        print_summary_table(
            {
                " ".join(r.command): "ok" if r.ok else f"exit {r.returncode}"
                for r in results
            },
            title="Phase 3 Results",
        )
        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_destination(self) -> None:
        destination = self.config.destination
        if destination.exists() and not destination.is_dir():
            raise PipelineError(2, f"Destination is not a directory: {destination}")

    def _print_closing_hints(self) -> None:
        console.print()
        print_success("I am done! Now it is your turn!")
        console.print()
        console.print("If there are DefinitelyTyped support for the source,")
        console.print(" you can run [green]tsd install <source>[/green] to download the file")
        console.print(" so you can easily access those code.")
        console.print()
        console.print(
            "Run [green]npm run watch[/green] to update the definition automatically, or"
        )
        console.print(
            "Run [green]npm run build[/green] to update the definition manually, and"
        )
        console.print("Run [green]npm test[/green] to test your definition!")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _load_answers(path: Path) -> dict[str, Any]:
    try:
        answers = load_json(path)
    except (OSError, ValueError) as exc:
        raise PipelineError(1, f"Cannot read answers file {path}: {exc}") from exc
    if "_root" in answers:
        raise PipelineError(1, f"Answers file {path} must contain a JSON object")
    return answers


def _load_config(args: Any) -> GeneratorConfig:
    try:
        return GeneratorConfig.from_env(
            destination=args.destination,
            template_dir=args.template_dir,
            store_path=args.store,
            skip_install=True if args.skip_install else None,
        )
    except ValueError as exc:
        raise PipelineError(1, f"Invalid configuration: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``typings-generator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="typings-generator",
        description="Scaffold a typings repository for a package hosted on GitHub",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  typings-generator ./typed-react\n"
            "  typings-generator ./typed-react --answers answers.json --skip-install\n"
        ),
    )
    parser.add_argument(
        "destination",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to generate into (default: current directory)",
    )
    parser.add_argument(
        "--answers",
        type=Path,
        default=None,
        help="JSON file of prompt answers keyed by prompt name; disables interactive prompts",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Write files only; do not run npm, typings or git",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=None,
        help="Use templates from this directory instead of the packaged ones",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="JSON file holding stored prompt defaults",
    )

    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
        prompter: Prompter | None = None
        if args.answers is not None:
            prompter = PresetPrompter(_load_answers(args.answers))
        asyncio.run(Pipeline(config, prompter).run())
    except (PipelineError, PromptError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1
    except KeyboardInterrupt:
        print_error("Aborted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
