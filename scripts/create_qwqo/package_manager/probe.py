"""
Package manager availability checks.

npm is assumed to ship with Node; pnpm and yarn are probed by running
their --version command, and can be installed globally through npm.
"""

import sys

from ..constants import PackageManager
from ..exceptions import CommandError
from ..utils.process import CommandRunner, run_command


def is_installed(
    package_manager: PackageManager, runner: CommandRunner = run_command
) -> bool:
    """
    Check if a package manager is available on this host.

    Args:
        package_manager: Package manager to check
        runner: Command runner (injectable for tests)

    Returns:
        True if installed (always True for npm), False otherwise
    """
    pm = PackageManager(package_manager)
    if pm is PackageManager.NPM:
        return True

    try:
        runner([pm.value, "--version"], capture_output=True)
        return True
    except CommandError:
        return False


def install_command(package_manager: PackageManager, platform: str = sys.platform) -> list:
    """Build the global install command, elevated on non-Windows hosts."""
    command = ["npm", "install", "-g", PackageManager(package_manager).value]
    if not platform.startswith("win"):
        command.insert(0, "sudo")
    return command


def install_globally(
    package_manager: PackageManager,
    runner: CommandRunner = run_command,
    platform: str = sys.platform,
) -> bool:
    """
    Install a package manager globally with npm.

    Output streams to the terminal; there is no retry on failure.

    Args:
        package_manager: Package manager to install
        runner: Command runner (injectable for tests)
        platform: Host platform string (sys.platform)

    Returns:
        True if the install command exited successfully
    """
    try:
        runner(install_command(package_manager, platform))
        return True
    except CommandError:
        return False
