"""Show command for mdpick CLI."""

from ...core.config import Config
from ...metadata.extraction import detect_format
from ...sources import document_from_content, read_content


def add_show_arguments(parser) -> None:
    """Add arguments for the show command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument("file", help="Document to inspect")


def handle_show(args, config: Config) -> None:
    """Print the front matter format and tags of a single document.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    content = read_content(args.file)
    doc = document_from_content(args.file, content)
    fmt = detect_format(content)

    print(f"Name: {doc.name}")
    print(f"Format: {fmt.value if fmt else 'none'}")
    print(f"Tags: {', '.join(doc.tags) if doc.tags else '-'}")
