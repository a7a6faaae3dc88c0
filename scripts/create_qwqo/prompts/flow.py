"""
Interactive prompt flow.

The questions run as an ordered pipeline of PromptStep entries. Each step
receives the answers collected so far, which is how the registry question
can show the registry of the package manager picked one step earlier.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from ..config import ProjectConfig
from ..constants import (
    DEFAULT_PROJECT_NAME,
    LANGUAGE_TITLES,
    MODULE_TYPE_TITLES,
    Language,
    ModuleType,
    PackageManager,
    Registry,
    REGISTRY_LABELS,
    REGISTRY_URLS,
)
from ..exceptions import OperationCancelled, ValidationError
from ..registry import current_registry
from ..utils.file_ops import sanitize_project_name
from ..utils.process import CommandRunner, run_command


@dataclass
class PromptContext:
    """Collaborators shared by every prompt step."""

    console: Console = field(default_factory=Console)
    base_dir: Path = field(default_factory=Path.cwd)
    runner: CommandRunner = run_command


class PromptStep(NamedTuple):
    name: str
    ask: Callable[[Dict[str, Any], PromptContext], Any]


def validate_project_name(name: str, base_dir: Path) -> Optional[str]:
    """
    Check a raw project name against the target location.

    Returns:
        An error message, or None if the name is usable
    """
    directory = sanitize_project_name(name or "")
    if not directory:
        return "Project name cannot be empty"
    if (Path(base_dir) / directory).exists():
        return f"Directory {directory} already exists, please choose another project name"
    return None


def _select(
    ctx: PromptContext, message: str, titles: Mapping[str, str], default: str
) -> str:
    for value, title in titles.items():
        ctx.console.print(f"  [cyan]{value:<7}[/cyan] {title}")
    return Prompt.ask(
        message, choices=list(titles), default=default, console=ctx.console
    )


def ask_project_name(answers: Dict[str, Any], ctx: PromptContext) -> str:
    while True:
        name = Prompt.ask(
            "Project name", default=DEFAULT_PROJECT_NAME, console=ctx.console
        ).strip()
        error = validate_project_name(name, ctx.base_dir)
        if error is None:
            return name
        ctx.console.print(f"[red]✖ {escape(error)}[/red]")


def ask_language(answers: Dict[str, Any], ctx: PromptContext) -> str:
    titles = {lang.value: title for lang, title in LANGUAGE_TITLES.items()}
    return _select(ctx, "Select language", titles, Language.TS.value)


def ask_module_type(answers: Dict[str, Any], ctx: PromptContext) -> str:
    titles = {mod.value: title for mod, title in MODULE_TYPE_TITLES.items()}
    return _select(ctx, "Select module type", titles, ModuleType.CJS.value)


def ask_package_manager(answers: Dict[str, Any], ctx: PromptContext) -> str:
    titles = {pm.value: pm.value for pm in PackageManager}
    return _select(ctx, "Select package manager", titles, PackageManager.NPM.value)


def ask_registry(answers: Dict[str, Any], ctx: PromptContext) -> str:
    current = current_registry(answers["package_manager"], runner=ctx.runner)
    titles = {reg.value: REGISTRY_LABELS[url] for reg, url in REGISTRY_URLS.items()}
    return _select(
        ctx,
        f"Select registry [dim](current: {current})[/dim]",
        titles,
        Registry.NPM.value,
    )


def ask_auto_install(answers: Dict[str, Any], ctx: PromptContext) -> bool:
    return Confirm.ask("Install dependencies now?", default=True, console=ctx.console)


PROMPT_STEPS = (
    PromptStep("project_name", ask_project_name),
    PromptStep("language", ask_language),
    PromptStep("module_type", ask_module_type),
    PromptStep("package_manager", ask_package_manager),
    PromptStep("registry", ask_registry),
    PromptStep("auto_install", ask_auto_install),
)


def collect_config(
    ctx: Optional[PromptContext] = None,
    preset: Optional[Dict[str, Any]] = None,
) -> ProjectConfig:
    """
    Run the prompt pipeline and return the complete configuration.

    Answers present in preset are not prompted for.

    Args:
        ctx: Prompt collaborators (console, base directory, command runner)
        preset: Answers supplied up front, e.g. from CLI flags

    Returns:
        ProjectConfig built from all answers

    Raises:
        OperationCancelled: If the user interrupts a prompt
        ValidationError: If a preset answer is invalid
    """
    ctx = ctx or PromptContext()
    answers = {key: value for key, value in (preset or {}).items() if value is not None}

    if "project_name" in answers:
        error = validate_project_name(answers["project_name"], ctx.base_dir)
        if error:
            raise ValidationError(error)

    for step in PROMPT_STEPS:
        if step.name in answers:
            continue
        try:
            answers[step.name] = step.ask(answers, ctx)
        except (KeyboardInterrupt, EOFError):
            raise OperationCancelled("Operation cancelled") from None

    return ProjectConfig.from_answers(answers)
