"""
Package manager module.

Checks whether package managers are installed and installs missing ones.
"""

from .probe import install_command, install_globally, is_installed

__all__ = ["install_command", "install_globally", "is_installed"]
