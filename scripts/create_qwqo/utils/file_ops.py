"""
File operation utilities for project scaffolding.

Provides the recursive template copy, project-name sanitizing and the
manifest patch applied to a freshly copied template.
"""

import json
import os
import re
import shutil
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import FileOperationError


def sanitize_project_name(name: str) -> str:
    """
    Derive an on-disk directory name from a raw project name.

    Leading '@' characters are stripped and path separators become '-'.
    The raw name is still what ends up in the manifest.

    Example:
        >>> sanitize_project_name("@scope/sub/pkg")
        'scope-sub-pkg'
    """
    directory = name.strip().lstrip("@")
    directory = re.sub(r"[/\\]+", "-", directory)
    directory = re.sub(r"-{2,}", "-", directory)
    return directory.strip("-")


def copy_tree(source_dir: Union[str, Path], dest_dir: Union[str, Path]) -> int:
    """
    Recursively copy the contents of source_dir into an existing dest_dir.

    Entries are visited in directory-listing order. Nothing is rolled back
    on failure; a partially copied tree may remain.

    Args:
        source_dir: Template directory to copy from
        dest_dir: Existing (normally empty) destination directory

    Returns:
        Number of files copied

    Raises:
        OSError: If any entry cannot be read or written
    """
    count = 0
    with os.scandir(source_dir) as entries:
        for entry in entries:
            dest = Path(dest_dir) / entry.name
            if entry.is_dir():
                dest.mkdir()
                count += copy_tree(entry.path, dest)
            else:
                shutil.copyfile(entry.path, dest)
                count += 1
    return count


def load_manifest(manifest_path: Path) -> Dict[str, Any]:
    """
    Read a package.json manifest.

    Raises:
        FileOperationError: If the manifest is missing or is not a JSON object
    """
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except FileNotFoundError:
        raise FileOperationError(f"Manifest not found: {manifest_path}") from None
    except json.JSONDecodeError as e:
        raise FileOperationError(f"Malformed manifest {manifest_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise FileOperationError(f"Manifest {manifest_path} is not a JSON object")
    return manifest


def update_manifest(manifest_path: Path, updates: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overwrite top-level manifest fields in place.

    Existing keys keep their position; new keys are appended. The file is
    rewritten with 2-space indentation.

    Example:
        >>> update_manifest(path, {"name": "demo", "type": "module"})
    """
    manifest = load_manifest(manifest_path)
    manifest.update(updates)

    with open(manifest_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(manifest, indent=2, ensure_ascii=False))
        f.write("\n")

    return manifest
