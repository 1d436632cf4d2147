"""Persisted prompt defaults.

Answers to prompts flagged as *stored* are written to a small JSON file keyed
by prompt name and offered as the default on the next run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from typings_generator.utils import load_json, print_warning, save_json


class DefaultsStore:
    """JSON-file backed mapping of prompt name -> last answer."""

    def __init__(self, path: str | Path, values: dict[str, Any] | None = None) -> None:
        self.path = Path(path)
        self.values: dict[str, Any] = dict(values or {})

    @classmethod
    def load(cls, path: str | Path) -> "DefaultsStore":
        """Read the store at *path*.

        A missing file gives an empty store; an unreadable one is reported
        and also treated as empty.
        """
        file_path = Path(path).expanduser()
        if not file_path.exists():
            return cls(file_path)
        try:
            data = load_json(file_path)
        except (OSError, ValueError) as exc:
            print_warning(f"Ignoring unreadable defaults store {file_path}: {exc}")
            return cls(file_path)
        data.pop("_root", None)
        return cls(file_path, data)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value

    def save(self) -> Path:
        """Write the store to disk and return its path."""
        save_json(self.values, self.path)
        return self.path
