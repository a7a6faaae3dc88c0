"""
External command execution.

Every package-manager invocation goes through run_command so callers can
inject a fake runner in tests.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..exceptions import CommandError

CommandRunner = Callable[..., str]


def run_command(
    command: Sequence[str],
    cwd: Optional[Union[str, Path]] = None,
    capture_output: bool = False,
) -> str:
    """
    Run an external command to completion.

    Without capture_output the child inherits stdin/stdout/stderr, so
    installer output streams straight to the user's terminal.

    Args:
        command: Executable followed by its arguments
        cwd: Working directory for the child process
        capture_output: If True, capture stdout/stderr instead of inheriting

    Returns:
        Captured stdout (empty string when output is not captured)

    Raises:
        CommandError: If the executable is missing or exits non-zero

    Example:
        >>> run_command(["npm", "config", "get", "registry"], capture_output=True)
        'https://registry.npmjs.org/\\n'
    """
    command = list(command)
    display = " ".join(command)

    # Resolves npm.cmd / pnpm.cmd shims on Windows
    executable = shutil.which(command[0])
    if executable is None:
        raise CommandError(f"Command not found: {command[0]}", command=command)

    try:
        result = subprocess.run(
            [executable] + command[1:],
            cwd=str(cwd) if cwd is not None else None,
            check=True,
            text=True,
            capture_output=capture_output,
        )
    except subprocess.CalledProcessError as e:
        raise CommandError(
            f"Command failed ({e.returncode}): {display}",
            command=command,
            returncode=e.returncode,
        ) from e
    except OSError as e:
        raise CommandError(f"Could not run {display}: {e}", command=command) from e

    return result.stdout or ""
