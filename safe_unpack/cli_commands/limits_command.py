"""Limits command handling for the safe-unpack CLI."""

from safe_unpack.cli_helpers import exit_with_error
from safe_unpack.config import ExtractionLimits
from safe_unpack.constants import ExitCodes
from safe_unpack.errors import ConfigValidationError


class LimitsCommand:
    """Shows the limits an extraction would run with."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('limits', help='Show the effective extraction limits')
        parser.set_defaults(func=LimitsCommand.execute)

    @staticmethod
    def execute(_args) -> None:
        try:
            limits = ExtractionLimits.from_env()
        except ConfigValidationError as exc:
            exit_with_error(str(exc), ExitCodes.INVALID_CONFIG)
        print(f"max_entries: {limits.max_entries}")
        print(f"max_extracted_bytes: {limits.max_extracted_bytes}")
        print(f"copy_chunk_bytes: {limits.copy_chunk_bytes}")
