"""Scan command for mdpick CLI."""

from ...core.config import Config
from ...core.types import FailurePolicy
from ...services import LoadingService


def add_scan_arguments(parser) -> None:
    """Add arguments for the scan command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "folder",
        nargs="?",
        default=None,
        help="Folder of documents (default: config folder)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first document that fails to load",
    )


def handle_scan(args, config: Config) -> None:
    """List every document in a folder with its tags.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    policy = FailurePolicy.ABORT if args.strict else None
    result = LoadingService(config).load(args.folder, policy)

    print(f"Documents found: {len(result.documents)}")
    for doc in result.documents:
        tags = ", ".join(doc.tags) if doc.tags else "-"
        print(f"  • {doc.name} [{tags}]")
    print_failures(result.failures)


def print_failures(failures) -> None:
    """Print a summary of documents that failed to load.

    Args:
        failures: LoadFailure entries to display.
    """
    if not failures:
        return
    print(f"Skipped: {len(failures)}")
    for failure in failures:
        print(f"    {failure.path.name} ({failure.kind}): {failure.message}")
