"""Provisioner -- installs dependencies, builds, and initialises git."""

from typings_generator.provisioner.installer import (
    SUBMODULE_PATH,
    InstallStep,
    Provisioner,
    StepResult,
    plan_steps,
)

__all__ = [
    "SUBMODULE_PATH",
    "InstallStep",
    "Provisioner",
    "StepResult",
    "plan_steps",
]
