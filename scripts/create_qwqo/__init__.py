"""
create-qwqo: interactive project scaffolding.

Asks for a project name, language, module system, package manager and
registry mirror, then copies a starter template, patches its package.json
and optionally installs dependencies.

Usage:
    From command line:
        create-qwqo
        create-qwqo --name demo --language ts --module esm --no-install

    From Python code:
        from create_qwqo import ProjectConfig, ProjectInitializer

        ProjectInitializer().run(config)
"""

__version__ = "1.0.0"

# Constants
from .constants import (
    INSTALL_COMMANDS,
    REGISTRY_LABELS,
    REGISTRY_URLS,
    UNKNOWN_REGISTRY,
    Language,
    ModuleType,
    PackageManager,
    Registry,
)

# Exceptions
from .exceptions import (
    CommandError,
    FileOperationError,
    OperationCancelled,
    PackageManagerError,
    ScaffoldError,
    ValidationError,
)

# Configuration
from .config import ProjectConfig

# Registry operations
from .registry import current_registry, label_for, url_for

# Package manager operations
from .package_manager import install_globally, is_installed

# Prompt flow
from .prompts import PROMPT_STEPS, PromptContext, collect_config

# Project operations
from .project import InitState, ProjectInitializer, initialize_project

# Utilities
from .utils import copy_tree, run_command, sanitize_project_name, update_manifest

__all__ = [
    # Constants
    "INSTALL_COMMANDS",
    "REGISTRY_LABELS",
    "REGISTRY_URLS",
    "UNKNOWN_REGISTRY",
    "Language",
    "ModuleType",
    "PackageManager",
    "Registry",
    # Exceptions
    "CommandError",
    "FileOperationError",
    "OperationCancelled",
    "PackageManagerError",
    "ScaffoldError",
    "ValidationError",
    # Configuration
    "ProjectConfig",
    # Registry operations
    "current_registry",
    "label_for",
    "url_for",
    # Package manager operations
    "install_globally",
    "is_installed",
    # Prompt flow
    "PROMPT_STEPS",
    "PromptContext",
    "collect_config",
    # Project operations
    "InitState",
    "ProjectInitializer",
    "initialize_project",
    # Utilities
    "copy_tree",
    "run_command",
    "sanitize_project_name",
    "update_manifest",
]
