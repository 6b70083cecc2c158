"""Registry for CLI subcommands."""

from .clean_command import CleanCommand
from .limits_command import LimitsCommand
from .unpack_command import UnpackCommand

COMMANDS = (
    UnpackCommand,
    CleanCommand,
    LimitsCommand,
)

__all__ = ["COMMANDS", "UnpackCommand", "CleanCommand", "LimitsCommand"]
