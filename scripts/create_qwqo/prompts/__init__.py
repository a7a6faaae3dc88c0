"""
Prompt module.

Collects a ProjectConfig from the user through an ordered question flow.
"""

from .flow import (
    PROMPT_STEPS,
    PromptContext,
    PromptStep,
    collect_config,
    validate_project_name,
)

__all__ = [
    "PROMPT_STEPS",
    "PromptContext",
    "PromptStep",
    "collect_config",
    "validate_project_name",
]
