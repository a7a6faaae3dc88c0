"""
Constants used throughout create-qwqo.

This module defines the choice enums, the registry and install-command
lookup tables, and other fixed values shared by the scaffolding flow.
"""

from enum import Enum
from pathlib import Path
from types import MappingProxyType


class Language(str, Enum):
    """Template language variants."""

    TS = "ts"
    JS = "js"


class ModuleType(str, Enum):
    """Module system written into the manifest."""

    CJS = "cjs"
    ESM = "esm"


class PackageManager(str, Enum):
    """Supported package managers."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


class Registry(str, Enum):
    """Known registry mirrors."""

    NPM = "npm"
    TAOBAO = "taobao"


# Registry lookup tables
REGISTRY_URLS = MappingProxyType(
    {
        Registry.NPM: "https://registry.npmjs.org",
        Registry.TAOBAO: "https://registry.npmmirror.com",
    }
)

REGISTRY_LABELS = MappingProxyType(
    {
        "https://registry.npmjs.org": "npm official",
        "https://registry.npmmirror.com": "Taobao mirror",
    }
)

UNKNOWN_REGISTRY = "unknown"

# Install commands per package manager
INSTALL_COMMANDS = MappingProxyType(
    {
        PackageManager.NPM: ("npm", "install"),
        PackageManager.PNPM: ("pnpm", "install"),
        PackageManager.YARN: ("yarn",),
    }
)

# Prompt choice titles
LANGUAGE_TITLES = MappingProxyType(
    {Language.TS: "TypeScript", Language.JS: "JavaScript"}
)
MODULE_TYPE_TITLES = MappingProxyType(
    {ModuleType.CJS: "CommonJS", ModuleType.ESM: "ES Modules"}
)

# Manifest
MANIFEST_FILENAME = "package.json"
MANIFEST_TYPE_MODULE = "module"
MANIFEST_TYPE_COMMONJS = "commonjs"

# Defaults
DEFAULT_PROJECT_NAME = "qwqo-project"
TEMPLATE_DIR = Path(__file__).resolve().parent / "template"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130
