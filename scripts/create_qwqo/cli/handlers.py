"""
Command handlers for the create-qwqo CLI.

Maps parsed arguments onto a scaffolding run and outcomes onto exit codes.
"""

from rich.console import Console
from rich.markup import escape

from ..constants import EXIT_CANCELLED, EXIT_ERROR, EXIT_OK, TEMPLATE_DIR
from ..exceptions import OperationCancelled, ScaffoldError
from ..project import initialize_project

PRESET_KEYS = (
    "project_name",
    "language",
    "module_type",
    "package_manager",
    "registry",
    "auto_install",
)


def handle_command(args, console: Console = None, error_console: Console = None) -> int:
    """
    Handle CLI command execution.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error, 130 if cancelled)
    """
    console = console or Console()
    error_console = error_console or Console(stderr=True)
    preset = {key: getattr(args, key, None) for key in PRESET_KEYS}

    try:
        initialize_project(
            preset=preset,
            console=console,
            template_dir=args.template_dir or TEMPLATE_DIR,
            dry_run=args.dry_run,
        )
        return EXIT_OK

    except OperationCancelled:
        error_console.print("[red]✖[/red] Operation cancelled")
        return EXIT_CANCELLED

    except ScaffoldError as e:
        error_console.print(f"[red]✖ {escape(str(e))}[/red]")
        return EXIT_ERROR

    except Exception as e:
        error_console.print(f"Error: {e}", markup=False)
        return EXIT_ERROR
