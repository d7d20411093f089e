"""Pick command for mdpick CLI."""

import random

from ...core.config import Config
from ...core.types import FailurePolicy
from ...services import PickService
from .scan import print_failures


def add_pick_arguments(parser) -> None:
    """Add arguments for the pick command.

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
        "-n",
        "--count",
        type=int,
        default=None,
        help="Number of documents to pick (default: 7)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a repeatable pick",
    )
    parser.add_argument(
        "-t",
        "--tag",
        action="append",
        default=[],
        dest="tags",
        help="Only pick documents with this tag (repeatable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first document that fails to load",
    )


def handle_pick(args, config: Config) -> None:
    """Pick random documents and print them as a numbered list.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    seed = args.seed if args.seed is not None else config.seed
    service = PickService(config, random.Random(seed))
    policy = FailurePolicy.ABORT if args.strict else None

    result = service.pick(
        folder=args.folder,
        count=args.count,
        tags=args.tags,
        policy=policy,
    )

    print(f"Documents found: {len(result.load.documents)}")
    if args.tags:
        print(f"Matching {', '.join(args.tags)}: {result.candidates}")
    print_failures(result.load.failures)
    print()
    print("Your pick:")
    for i, doc in enumerate(result.selected, 1):
        print(f"{i}: {doc.name}")
