"""Pydantic models for the answers gathered by the collector."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from typings_generator.utils import title_case


class LicenseId(str, Enum):
    """License identifiers offered by the license prompt."""

    APACHE_2 = "Apache-2.0"
    MIT = "MIT"
    UNLICENSE = "Unlicense"
    FREEBSD = "BSD-2-Clause-FreeBSD"
    NEWBSD = "BSD-3-Clause"
    ISC = "ISC"
    NOLICENSE = "nolicense"


# Display name -> id, in the order the prompt lists them.
LICENSES: list[tuple[str, LicenseId]] = [
    ("Apache 2.0", LicenseId.APACHE_2),
    ("MIT", LicenseId.MIT),
    ("Unlicense", LicenseId.UNLICENSE),
    ("FreeBSD", LicenseId.FREEBSD),
    ("NewBSD", LicenseId.NEWBSD),
    ("Internet Systems Consortium (ISC)", LicenseId.ISC),
    ("No License (Copyrighted)", LicenseId.NOLICENSE),
]

GITHUB_URL = "https://github.com"


def source_package_url(source_repo_ref: str) -> str:
    """``facebook/react`` -> ``https://github.com/facebook/react``."""
    return f"{GITHUB_URL}/{source_repo_ref.strip('/')}"


def source_package_name(source_repo_ref: str) -> str:
    """Last segment of an ``author/repo`` reference."""
    return source_repo_ref.strip("/").split("/")[-1]


def is_source_ref(value: str) -> bool:
    """True for ``author/repo``: exactly two non-empty segments."""
    parts = value.strip().strip("/").split("/")
    return len(parts) == 2 and all(part.strip() for part in parts)


class SessionConfig(BaseModel):
    """Answers for one generator run.

    Built once by the ``Collector`` after the last prompt and frozen from
    then on; the materializer and provisioner only read it.
    """

    model_config = ConfigDict(frozen=True)

    source_repo_ref: str = Field(..., min_length=1, description="author/repo on GitHub")
    source_package_url: str
    source_package_name: str = Field(..., min_length=1)
    pretty_package_name: str
    is_published_on_registry: bool = True
    registry_name: str | None = None
    is_ambient_declaration: bool = False
    username: str = Field(..., min_length=1)
    license_id: LicenseId = LicenseId.MIT
    license_author_name: str = ""

    @field_validator("source_repo_ref")
    @classmethod
    def _author_and_repo(cls, value: str) -> str:
        if not is_source_ref(value):
            raise ValueError("expected an author/repo reference")
        return value

    @model_validator(mode="after")
    def _registry_name_only_when_published(self) -> "SessionConfig":
        if not self.is_published_on_registry and self.registry_name is not None:
            raise ValueError("registry_name is only valid for packages published on npm")
        return self

    @classmethod
    def from_source_ref(cls, source_repo_ref: str, **answers: object) -> "SessionConfig":
        """Build a config, deriving the URL and names from *source_repo_ref*."""
        name = source_package_name(source_repo_ref)
        return cls(
            source_repo_ref=source_repo_ref,
            source_package_url=source_package_url(source_repo_ref),
            source_package_name=name,
            pretty_package_name=title_case(name),
            **answers,
        )

    @property
    def ambient_flag(self) -> str:
        """Flag fragment appended to the bundle command in ``package.json``."""
        return " --ambient" if self.is_ambient_declaration else ""
