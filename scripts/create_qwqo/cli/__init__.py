"""
Command-line interface for create-qwqo.

Provides CLI parsing and command handling for the scaffolding flow.
"""

from .handlers import handle_command
from .parser import create_parser

__all__ = ["create_parser", "handle_command"]
