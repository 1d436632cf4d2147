"""Materializer: writes the files of a new typings repository.

Takes a frozen ``SessionConfig`` and writes editor config, dotfiles,
``typings.json``, ``README.md``, ``test/test.ts``, ``package.json`` and
``LICENSE`` into the destination directory.  Each write stands on its own;
nothing is rolled back if a later step fails.
"""

from __future__ import annotations

import asyncio
from datetime import date
from pathlib import Path
from typing import Any, Callable

from typings_generator.collector.models import SessionConfig
from typings_generator.utils import camel_case, console

from .templates import TemplateRenderer, write_file

# Entry point declared in typings.json; produced by ``npm run build``.
MAIN_FILE = "index.d.ts"

# Passthrough entries under ``templates/static/``.
STATIC_FILES: tuple[str, ...] = (
    ".vscode",
    ".editorconfig",
    ".gitignore",
    ".npmignore",
    ".travis.yml",
    "tsconfig.json",
    "tslint.json",
)

TEST_IMPORTS: tuple[str, ...] = (
    "import test = require('blue-tape');",
    "import isCallable = require('is-callable');",
)


def build_test_stub(session: SessionConfig) -> str:
    """Assemble ``test/test.ts``.

    Two fixed imports, a blank line, then an import of the source package
    unless the declaration is ambient.
    """
    source_import = ""
    if not session.is_ambient_declaration:
        name = session.source_package_name
        # Must be a valid TypeScript identifier; require() keeps the literal name.
        identifier = camel_case(name) or "source"
        source_import = f"import {identifier} = require('{name}');"
    return "\n".join([*TEST_IMPORTS, "", source_import, ""])


class ProjectGenerator:
    """Write all output files for one session.

    Args:
        session: The collected answers.
        renderer: Template renderer; defaults to the packaged templates.
        today: Clock used for the license year.
    """

    def __init__(
        self,
        session: SessionConfig,
        renderer: TemplateRenderer | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.session = session
        self.renderer = renderer or TemplateRenderer()
        self.today = today

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> list[Path]:
        """Write every file into *output_dir* and return the written paths."""
        root = Path(output_dir)
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        written: list[Path] = []
        written.extend(await self.copy_static_files(root))
        written.append(await self.create_typings_json(root))
        written.append(await self.create_readme(root))
        written.append(await self.create_test_file(root))
        written.append(await self.create_package_json(root))
        written.append(await self.create_license(root))

        for path in written:
            console.print(f"   [green]create[/green] {path.relative_to(root).as_posix()}")
        return written

    async def copy_static_files(self, root: Path) -> list[Path]:
        return await self.renderer.copy_static(STATIC_FILES, root)

    async def create_typings_json(self, root: Path) -> Path:
        return await self.renderer.render_to_file(
            "typings.json.j2",
            root / "typings.json",
            {
                "name": self.session.source_package_name,
                "main": MAIN_FILE,
                "homepage": self.session.source_package_url,
            },
        )

    async def create_readme(self, root: Path) -> Path:
        return await self.renderer.render_to_file(
            "README.md.j2",
            root / "README.md",
            {
                "pretty_package_name": self.session.pretty_package_name,
                "source_package_name": self.session.source_package_name,
                "source_package_url": self.session.source_package_url,
                "license": self.session.license_id.value,
            },
        )

    async def create_test_file(self, root: Path) -> Path:
        out = root / "test" / "test.ts"
        await asyncio.to_thread(write_file, out, build_test_stub(self.session))
        return out

    async def create_package_json(self, root: Path) -> Path:
        return await self.renderer.render_to_file(
            "package.json.j2",
            root / "package.json",
            {"ambient": self.session.ambient_flag},
        )

    async def create_license(self, root: Path) -> Path:
        return await self.renderer.render_to_file(
            f"licenses/{self.session.license_id.value}.txt.j2",
            root / "LICENSE",
            self._license_context(),
        )

    # -- Context building --------------------------------------------------

    def _license_context(self) -> dict[str, Any]:
        return {
            "year": self.today().year,
            "author": self.session.license_author_name.strip(),
        }
