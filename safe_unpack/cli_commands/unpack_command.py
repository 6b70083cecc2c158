"""Unpack command handling for the safe-unpack CLI."""

import dataclasses

from safe_unpack.cli_helpers import exit_with_error, map_exception_to_exit_code
from safe_unpack.config import ExtractionLimits
from safe_unpack.constants import ExitCodes
from safe_unpack.errors import DeletionError
from safe_unpack.extractor import ArchiveExtractor


class UnpackCommand:
    """Handles guarded archive extraction."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add unpack command parser to subparsers."""
        parser = subparsers.add_parser('unpack', help='Extract a ZIP archive into a directory')
        parser.add_argument('archive', help='Path to the ZIP archive')
        parser.add_argument('target', help='Directory to extract into (created if missing)')
        parser.add_argument('--max-entries', type=int, dest='max_entries',
                            help='Abort after this many entries')
        parser.add_argument('--max-bytes', type=int, dest='max_extracted_bytes',
                            help='Abort once this many bytes have been written')
        parser.add_argument('--chunk-size', type=int, dest='copy_chunk_bytes',
                            help='Copy buffer size in bytes')
        parser.set_defaults(func=UnpackCommand.execute)

    @staticmethod
    def build_limits(args) -> ExtractionLimits:
        """Environment limits with any command line overrides applied."""
        overrides = {
            field: getattr(args, field)
            for field in ('max_entries', 'max_extracted_bytes', 'copy_chunk_bytes')
            if getattr(args, field, None) is not None
        }
        return dataclasses.replace(ExtractionLimits.from_env(), **overrides)

    @staticmethod
    def execute(args) -> None:
        """Extract an archive."""
        try:
            limits = UnpackCommand.build_limits(args)
            state = ArchiveExtractor(limits).unpack(args.archive, args.target)
            print(
                f"Extracted {state.files_processed} entries "
                f"({state.total_bytes_written} bytes) into {args.target}"
            )

        except Exception as exc:
            exit_code = map_exception_to_exit_code(exc)
            if isinstance(exc, DeletionError) and exc.original_error is not None:
                message = f"{exc} (cleanup after: {exc.original_error})"
            else:
                message = str(exc)

            if exit_code is None:
                message = f"Extraction failed: {exc}"
                exit_code = ExitCodes.EXTRACTION_FAILED

            exit_with_error(message, exit_code)
