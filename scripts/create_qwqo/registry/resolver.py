"""
Registry resolution for package managers.

Reads the registry a package manager is currently configured with and
maps the closed set of known registry URLs to display labels.
"""

from ..constants import (
    REGISTRY_LABELS,
    REGISTRY_URLS,
    UNKNOWN_REGISTRY,
    PackageManager,
    Registry,
)
from ..exceptions import CommandError
from ..utils.process import CommandRunner, run_command


def url_for(registry: Registry) -> str:
    """
    Get the URL for a registry choice.

    Example:
        >>> url_for(Registry.TAOBAO)
        'https://registry.npmmirror.com'
    """
    return REGISTRY_URLS[Registry(registry)]


def label_for(url: str) -> str:
    """
    Get the display label for a registry URL, or the URL itself if unknown.

    Trailing slashes are ignored ('https://registry.npmjs.org/' is npm's
    default answer to `config get registry`).
    """
    return REGISTRY_LABELS.get(url.rstrip("/"), url)


def current_registry(
    package_manager: PackageManager, runner: CommandRunner = run_command
) -> str:
    """
    Get the label of the registry the package manager currently uses.

    Never raises: any failure to query the manager yields UNKNOWN_REGISTRY.

    Args:
        package_manager: Package manager to query
        runner: Command runner (injectable for tests)

    Returns:
        Registry label, raw URL, or UNKNOWN_REGISTRY
    """
    pm = PackageManager(package_manager).value
    try:
        output = runner([pm, "config", "get", "registry"], capture_output=True)
    except CommandError:
        return UNKNOWN_REGISTRY

    url = (output or "").strip()
    # yarn prints "undefined" when nothing is configured
    if not url or url == "undefined" or "\n" in url:
        return UNKNOWN_REGISTRY
    return label_for(url)
