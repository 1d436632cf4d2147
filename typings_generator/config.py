"""Typings generator configuration.

Run-level settings (where to write, which templates to use, where the stored
prompt defaults live) as a Pydantic v2 model.  User answers are not part of
this model; they live in :class:`typings_generator.collector.SessionConfig`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"
_DEFAULT_STORE_PATH = Path("~/.config/typings-generator/defaults.json")

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    Instances are created once by the CLI entry point (usually via
    :meth:`from_env`) and passed to the ``Pipeline``.
    """

    destination: Path = Field(default=Path("."))
    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    store_path: Path = Field(default=_DEFAULT_STORE_PATH)
    skip_install: bool = Field(
        default=False, description="Skip npm/typings/git steps after writing files"
    )
    command_timeout: float | None = Field(
        default=None, gt=0, description="Per-command timeout in seconds; None waits indefinitely"
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def resolved_store_path(self) -> Path:
        """Store path with ``~`` expanded."""
        return self.store_path.expanduser()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            TYPINGS_GENERATOR_DESTINATION, TYPINGS_GENERATOR_TEMPLATE_DIR,
            TYPINGS_GENERATOR_STORE, TYPINGS_GENERATOR_SKIP_INSTALL,
            TYPINGS_GENERATOR_COMMAND_TIMEOUT.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TYPINGS_GENERATOR_DESTINATION"):
            kwargs["destination"] = Path(os.environ["TYPINGS_GENERATOR_DESTINATION"])
        if os.environ.get("TYPINGS_GENERATOR_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["TYPINGS_GENERATOR_TEMPLATE_DIR"])
        if os.environ.get("TYPINGS_GENERATOR_STORE"):
            kwargs["store_path"] = Path(os.environ["TYPINGS_GENERATOR_STORE"])
        if os.environ.get("TYPINGS_GENERATOR_SKIP_INSTALL"):
            kwargs["skip_install"] = (
                os.environ["TYPINGS_GENERATOR_SKIP_INSTALL"].strip().lower() in _TRUTHY
            )
        if os.environ.get("TYPINGS_GENERATOR_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["TYPINGS_GENERATOR_COMMAND_TIMEOUT"])

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
