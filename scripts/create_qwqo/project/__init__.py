"""
Project initialization module.

Handles creation and setup of new projects from language templates.
"""

from .creation import InitState, ProjectInitializer, initialize_project

__all__ = ["InitState", "ProjectInitializer", "initialize_project"]
