"""
Command-line argument parsing for create-qwqo.

Every answer of the interactive flow can be supplied as a flag; answers
not given on the command line are prompted for.
"""

import argparse

from ..constants import Language, ModuleType, PackageManager, Registry


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .. import __version__

    parser = argparse.ArgumentParser(
        prog="create-qwqo",
        description="Scaffold a new TypeScript/JavaScript project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--name", dest="project_name", help="Project name")
    parser.add_argument(
        "--language", choices=[lang.value for lang in Language], help="Language variant"
    )
    parser.add_argument(
        "--module",
        dest="module_type",
        choices=[mod.value for mod in ModuleType],
        help="Module system",
    )
    parser.add_argument(
        "--package-manager",
        choices=[pm.value for pm in PackageManager],
        help="Package manager",
    )
    parser.add_argument(
        "--registry", choices=[reg.value for reg in Registry], help="Registry mirror"
    )

    install = parser.add_mutually_exclusive_group()
    install.add_argument(
        "--install",
        dest="auto_install",
        action="store_true",
        default=None,
        help="Install dependencies after scaffolding",
    )
    install.add_argument(
        "--no-install",
        dest="auto_install",
        action="store_false",
        default=None,
        help="Only print the install commands",
    )

    parser.add_argument("--template-dir", help="Directory with ts/ and js/ templates")
    parser.add_argument("--dry-run", action="store_true", help="Preview only")

    return parser
