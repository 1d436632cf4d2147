"""Collector -- gathers the answers for one generator run.

Quick usage::

    from typings_generator.collector import Collector, DefaultsStore, RichPrompter

    store = DefaultsStore.load("~/.config/typings-generator/defaults.json")
    session = Collector(RichPrompter(), store).collect()
"""

from typings_generator.collector.models import LICENSES, LicenseId, SessionConfig
from typings_generator.collector.prompts import (
    SOURCE_EXAMPLES,
    Collector,
    PresetPrompter,
    Prompter,
    PromptError,
    RichPrompter,
)
from typings_generator.collector.store import DefaultsStore

__all__ = [
    "LICENSES",
    "SOURCE_EXAMPLES",
    "Collector",
    "DefaultsStore",
    "LicenseId",
    "PresetPrompter",
    "PromptError",
    "Prompter",
    "RichPrompter",
    "SessionConfig",
]
