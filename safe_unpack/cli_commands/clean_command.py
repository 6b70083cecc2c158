"""Clean command handling for the safe-unpack CLI."""

from safe_unpack.cleanup import delete_all
from safe_unpack.cli_helpers import exit_with_error
from safe_unpack.constants import ExitCodes
from safe_unpack.errors import DeletionError


class CleanCommand:
    """Removes a directory tree without recursion."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('clean', help='Delete a directory tree (symlinks are not followed)')
        parser.add_argument('directory', help='Directory to delete')
        parser.set_defaults(func=CleanCommand.execute)

    @staticmethod
    def execute(args) -> None:
        try:
            delete_all(args.directory)
        except DeletionError as exc:
            exit_with_error(str(exc), ExitCodes.DELETION_FAILED)
        print(f"Deleted {args.directory}")
