"""Shared utility functions for the typings generator.

Provides async command execution, JSON I/O, name helpers, and Rich-based
console reporting.  Everything the pipeline prints goes through the module
level ``console`` so tests can capture it in one place.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()

# Exit status reported when an executable cannot be found, as a shell would.
COMMAND_NOT_FOUND = 127

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the process runs.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A missing executable is
        reported as ``COMMAND_NOT_FOUND`` rather than raised.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None
    cmd_str = " ".join(cmd)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return (COMMAND_NOT_FOUND, "", f"Command not found: {cmd_str}")

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {cmd_str}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def title_case(name: str) -> str:
    """Turn a package name into a display name.

    Examples::

        title_case("react") -> "React"
        title_case("react-native-maps") -> "React Native Maps"
    """
    words = re.split(r"[-_.\s]+", name.strip())
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


def camel_case(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``.

    Leading characters that cannot start an identifier are dropped.
    """
    parts = [p for p in re.split(r"[^a-zA-Z0-9]+", name) if p]
    if not parts:
        return ""
    head, *rest = parts
    ident = head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in rest)
    return ident.lstrip("0123456789")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        return {"_root": data}
    return data


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


PHASE_NAMES: dict[int, str] = {
    1: "COLLECT",
    2: "MATERIALIZE",
    3: "PROVISION",
}

PHASE_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
}


def print_banner(message: str) -> None:
    """Print the welcome banner shown before the first prompt."""
    console.print(Panel(message, border_style="bright_blue", expand=False))


def print_phase_header(phase: int, name: str) -> None:
    """Print a full-width rule with the phase number and name.

    Args:
        phase: Phase number (1-3).
        name: Phase display name.
    """
    color = PHASE_COLORS.get(phase, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Phase {phase}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
