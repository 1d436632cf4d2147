"""Shared pytest fixtures for the typings generator test suite.

Provides reusable fixtures for:
- Temporary destination directories and defaults stores
- Preset prompt answers and the matching SessionConfig
- A mocked ``run_command`` for the provisioner
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from typings_generator.collector import DefaultsStore, SessionConfig
from typings_generator.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for generated projects (auto-cleanup)."""
    project_dir = tmp_path / "typed-react"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a defaults store that does not exist yet."""
    return tmp_path / "store" / "defaults.json"


@pytest.fixture
def empty_store(store_path: Path) -> DefaultsStore:
    return DefaultsStore.load(store_path)


@pytest.fixture
def generator_config(tmp_project_dir: Path, store_path: Path) -> GeneratorConfig:
    """GeneratorConfig writing into tmp_project_dir with a temp store."""
    return GeneratorConfig(destination=tmp_project_dir, store_path=store_path)


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def react_answers() -> dict[str, Any]:
    """Answers for typing facebook/react, keyed by prompt name."""
    return {
        "sourceUri": "facebook/react",
        "isNpm": True,
        "npmName": "react",
        "isAmbient": False,
        "username": "octocat",
        "license": "MIT",
        "name": "octocat",
    }


@pytest.fixture
def react_session() -> SessionConfig:
    """The SessionConfig the react answers produce."""
    return SessionConfig.from_source_ref(
        "facebook/react",
        is_published_on_registry=True,
        registry_name="react",
        is_ambient_declaration=False,
        username="octocat",
        license_id="MIT",
        license_author_name="octocat",
    )


@pytest.fixture
def ambient_session() -> SessionConfig:
    """An ambient declaration for a package that is not on npm."""
    return SessionConfig.from_source_ref(
        "atom/atom",
        is_published_on_registry=False,
        is_ambient_declaration=True,
        username="octocat",
        license_id="ISC",
        license_author_name="  The Atom Authors  ",
    )


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch ``run_command`` as seen by the provisioner.

    Every command succeeds unless the test sets ``side_effect``.

    Usage::

        def test_steps(mock_run_command):
            ...
            commands = [c.args[0] for c in mock_run_command.call_args_list]
    """
    mock = AsyncMock(return_value=(0, "", ""))
    with patch("typings_generator.provisioner.installer.run_command", mock):
        yield mock
