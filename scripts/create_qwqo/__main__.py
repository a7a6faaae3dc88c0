"""
Main entry point for the create-qwqo CLI.

Allows running the package as a module:
    python -m create_qwqo --name demo --language ts
"""

import sys

from .cli import create_parser, handle_command


def main() -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error, 130 if cancelled)
    """
    parser = create_parser()
    args = parser.parse_args()

    return handle_command(args)


if __name__ == "__main__":
    sys.exit(main())
