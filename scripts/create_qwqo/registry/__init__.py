"""
Registry module.

Maps registry choices to URLs and resolves the registry a package
manager is currently configured with.
"""

from .resolver import current_registry, label_for, url_for

__all__ = ["current_registry", "label_for", "url_for"]
