"""Jinja2 template rendering for the typings scaffold.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``typings_generator/scaffolder/templates/`` directory (or a custom one) and
renders them with session-specific context data.  Also copies the static
passthrough files that are not templated at all.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Files under the template root that are copied verbatim.
STATIC_DIR = "static"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the typings scaffold.

    Templates are ``.j2`` files under the template directory.  Passthrough
    files live in its ``static/`` subdirectory and are copied byte for byte.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"licenses/MIT.txt.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, content)
        return out

    # -- Static files ------------------------------------------------------

    async def copy_static(self, names: Iterable[str], output_dir: str | Path) -> list[Path]:
        """Copy the named entries of ``static/`` into *output_dir*.

        Directories are copied recursively and merged into existing ones.

        Returns:
            List of written file paths.
        """
        static_root = self.template_dir / STATIC_DIR
        out_base = Path(output_dir)
        written: list[Path] = []
        for name in names:
            written.extend(await asyncio.to_thread(_copy_entry, static_root / name, out_base / name))
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _copy_entry(source: Path, target: Path) -> list[Path]:
    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
        return sorted(target / p.relative_to(source) for p in source.rglob("*") if p.is_file())
    if not source.is_file():
        raise FileNotFoundError(source)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)
    return [target]
