"""Interactive prompts that build the :class:`SessionConfig`.

The ``Collector`` asks seven questions in a fixed order.  How a question is
put to the user is delegated to a *prompter*:

- ``RichPrompter`` asks on the terminal using ``rich.prompt``.
- ``PresetPrompter`` answers from a mapping keyed by prompt name, for
  ``--answers`` files and tests.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Mapping, Protocol, Sequence

from rich.prompt import Confirm, Prompt
from rich.table import Table

from typings_generator.collector.models import (
    LICENSES,
    LicenseId,
    SessionConfig,
    is_source_ref,
    source_package_name,
)
from typings_generator.collector.store import DefaultsStore
from typings_generator.utils import console, print_warning

SOURCE_EXAMPLES: list[str] = [
    "facebook/react",
    "atom/atom",
    "microsoft/vscode",
    "angular/angular",
]

Validator = Callable[[str], bool]
Choices = Sequence[tuple[str, Any]]

SOURCE_REF_ERROR = "Please enter the source as author/repo, e.g. facebook/react."


class PromptError(Exception):
    """Raised when a preset answer does not pass validation."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"Invalid answer for '{name}': {message}")


def _non_empty(value: str) -> bool:
    return len(value) > 0


def _choice_value(choice: Any) -> str:
    return choice.value if isinstance(choice, LicenseId) else str(choice)


class Prompter(Protocol):
    """The three prompt kinds the collector needs."""

    def ask(
        self,
        name: str,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
        error: str | None = None,
    ) -> str: ...

    def confirm(self, name: str, message: str, default: bool = True) -> bool: ...

    def select(self, name: str, message: str, choices: Choices, default: str) -> str: ...


# ---------------------------------------------------------------------------
# Prompters
# ---------------------------------------------------------------------------


class RichPrompter:
    """Ask on the terminal, re-asking until validation passes."""

    def ask(
        self,
        name: str,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
        error: str | None = None,
    ) -> str:
        kwargs: dict[str, Any] = {"console": console}
        if default is not None:
            kwargs["default"] = default
        while True:
            answer = Prompt.ask(message, **kwargs)
            if validate is None or validate(answer):
                return answer
            print_warning(error or "Please enter a value.")

    def confirm(self, name: str, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=console)

    def select(self, name: str, message: str, choices: Choices, default: str) -> str:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Name")
        table.add_column("Value", style="cyan")
        for label, value in choices:
            table.add_row(label, _choice_value(value))
        console.print(table)
        return Prompt.ask(
            message,
            choices=[_choice_value(value) for _, value in choices],
            default=default,
            show_choices=False,
            console=console,
        )


class PresetPrompter:
    """Answer prompts from a mapping keyed by prompt name.

    Prompts missing from *answers* take their declared default.  The names of
    prompts actually put are recorded in :attr:`asked`.
    """

    _YES = {"y", "yes", "true", "1"}
    _NO = {"n", "no", "false", "0"}

    def __init__(self, answers: Mapping[str, Any]) -> None:
        self.answers = dict(answers)
        self.asked: list[str] = []

    def ask(
        self,
        name: str,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
        error: str | None = None,
    ) -> str:
        self.asked.append(name)
        value = self.answers.get(name, default)
        answer = "" if value is None else str(value)
        if validate is not None and not validate(answer):
            raise PromptError(name, error or "a non-empty value is required")
        return answer

    def confirm(self, name: str, message: str, default: bool = True) -> bool:
        self.asked.append(name)
        value = self.answers.get(name, default)
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in self._YES:
            return True
        if text in self._NO:
            return False
        raise PromptError(name, f"expected yes or no, got {value!r}")

    def select(self, name: str, message: str, choices: Choices, default: str) -> str:
        self.asked.append(name)
        value = _choice_value(self.answers.get(name, default))
        allowed = [_choice_value(v) for _, v in choices]
        if value not in allowed:
            raise PromptError(name, f"expected one of {', '.join(allowed)}")
        return value


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------


class Collector:
    """Put the seven prompts in order and build a :class:`SessionConfig`.

    Args:
        prompter: Where the questions go.
        store: Stored defaults; the ``username`` answer is saved into it.
        rng: Source for the random example used as the first default.
    """

    def __init__(
        self,
        prompter: Prompter,
        store: DefaultsStore,
        rng: random.Random | None = None,
    ) -> None:
        self.prompter = prompter
        self.store = store
        self.rng = rng or random.Random()

    def collect(self) -> SessionConfig:
        source_ref = self.prompter.ask(
            "sourceUri",
            "What is the [green]author/module[/green] of the [red]source[/red] on github?",
            default=self.rng.choice(SOURCE_EXAMPLES),
            validate=is_source_ref,
            error=SOURCE_REF_ERROR,
        )
        package_name = source_package_name(source_ref)

        is_npm = self.prompter.confirm(
            "isNpm", "Is the source installable through NPM?", default=True
        )

        npm_name: str | None = None
        if is_npm:
            npm_name = self.prompter.ask(
                "npmName", "Name of the package on NPM is...", default=package_name
            )

        is_ambient = self.prompter.confirm(
            "isAmbient",
            "Is this module ambient? i.e. does it declare itself globally?",
            default=False,
        )

        username = self.prompter.ask(
            "username",
            "And your GitHub username is...",
            default=self.store.get("username"),
            validate=_non_empty,
        )
        self._remember("username", username)

        license_id = self.prompter.select(
            "license",
            "Which license do you want to use?",
            LICENSES,
            default=LicenseId.MIT.value,
        )

        author = self.prompter.ask("name", "Name to use on the license?", default=username)

        return SessionConfig.from_source_ref(
            source_ref,
            is_published_on_registry=is_npm,
            registry_name=npm_name,
            is_ambient_declaration=is_ambient,
            username=username,
            license_id=license_id,
            license_author_name=author,
        )

    def _remember(self, name: str, value: str) -> None:
        self.store.set(name, value)
        try:
            self.store.save()
        except OSError as exc:
            print_warning(f"Could not save default for '{name}' to {self.store.path}: {exc}")
