"""
Project configuration gathered from the prompt flow.
"""

from dataclasses import dataclass
from typing import Any, Dict, Type, TypeVar

from .constants import Language, ModuleType, PackageManager, Registry
from .exceptions import ValidationError

E = TypeVar("E", Language, ModuleType, PackageManager, Registry)


def _coerce(enum_type: Type[E], value: Any, field: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValidationError(
            f"Invalid {field} '{value}' (expected one of: {choices})"
        ) from None


@dataclass(frozen=True)
class ProjectConfig:
    """Answers for a single scaffolding run."""

    project_name: str
    language: Language
    module_type: ModuleType
    package_manager: PackageManager
    registry: Registry
    auto_install: bool

    @classmethod
    def from_answers(cls, answers: Dict[str, Any]) -> "ProjectConfig":
        """
        Build a config from a complete answers dict.

        Args:
            answers: Mapping of prompt names to raw answer values

        Returns:
            ProjectConfig with enum-typed fields

        Raises:
            ValidationError: If an answer is missing or not a known choice
        """
        missing = [
            key
            for key in (
                "project_name",
                "language",
                "module_type",
                "package_manager",
                "registry",
                "auto_install",
            )
            if answers.get(key) is None
        ]
        if missing:
            raise ValidationError(f"Incomplete answers, missing: {', '.join(missing)}")

        return cls(
            project_name=str(answers["project_name"]).strip(),
            language=_coerce(Language, answers["language"], "language"),
            module_type=_coerce(ModuleType, answers["module_type"], "module type"),
            package_manager=_coerce(
                PackageManager, answers["package_manager"], "package manager"
            ),
            registry=_coerce(Registry, answers["registry"], "registry"),
            auto_install=bool(answers["auto_install"]),
        )

    @property
    def is_esm(self) -> bool:
        return self.module_type is ModuleType.ESM
