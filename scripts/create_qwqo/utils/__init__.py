"""
Utility functions for project scaffolding.

This package provides filesystem helpers (template copy, manifest patch,
name sanitizing) and the external command runner.
"""

from .file_ops import (
    copy_tree,
    load_manifest,
    sanitize_project_name,
    update_manifest,
)
from .process import CommandRunner, run_command

__all__ = [
    # file_ops
    "copy_tree",
    "load_manifest",
    "sanitize_project_name",
    "update_manifest",
    # process
    "CommandRunner",
    "run_command",
]
