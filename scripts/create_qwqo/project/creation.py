"""
Project creation and initialization.

Drives a scaffolding run from collected answers to a ready project:
validate the target, copy the language template, patch package.json, then
install dependencies or print the commands to do it by hand.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from ..config import ProjectConfig
from ..constants import (
    INSTALL_COMMANDS,
    MANIFEST_FILENAME,
    MANIFEST_TYPE_COMMONJS,
    MANIFEST_TYPE_MODULE,
    TEMPLATE_DIR,
    PackageManager,
)
from ..exceptions import (
    CommandError,
    FileOperationError,
    OperationCancelled,
    PackageManagerError,
    ScaffoldError,
    ValidationError,
)
from ..package_manager import install_globally, is_installed
from ..prompts import PromptContext, collect_config
from ..registry import url_for
from ..utils.file_ops import copy_tree, sanitize_project_name, update_manifest
from ..utils.process import CommandRunner, run_command


class InitState(str, Enum):
    """States of a scaffolding run."""

    COLLECTING_INPUT = "collecting-input"
    VALIDATING_CHOICES = "validating-choices"
    CREATING_STRUCTURE = "creating-structure"
    PATCHING_MANIFEST = "patching-manifest"
    INSTALLING_DEPENDENCIES = "installing-dependencies"
    PRINTING_MANUAL_INSTRUCTIONS = "printing-manual-instructions"
    DONE = "done"
    ABORTED = "aborted"


def _ask_confirm(message: str, console: Console) -> bool:
    return Confirm.ask(message, default=True, console=console)


class ProjectInitializer:
    """
    Scaffold one project from a ProjectConfig.

    Every side effect goes through an injected collaborator: output through
    console, external commands through runner, yes/no questions through
    confirm. Tests substitute fakes for all three.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        runner: CommandRunner = run_command,
        confirm: Callable[[str, Console], bool] = _ask_confirm,
        template_dir: Union[str, Path] = TEMPLATE_DIR,
        base_dir: Optional[Union[str, Path]] = None,
        platform: Optional[str] = None,
    ):
        self.console = console or Console()
        self.runner = runner
        self.confirm = confirm
        self.template_dir = Path(template_dir)
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.platform = platform or sys.platform
        self.state = InitState.COLLECTING_INPUT

    @property
    def is_windows(self) -> bool:
        return self.platform.startswith("win")

    def target_for(self, config: ProjectConfig) -> Path:
        return self.base_dir / sanitize_project_name(config.project_name)

    def _abort(self, error: ScaffoldError) -> ScaffoldError:
        self.state = InitState.ABORTED
        return error

    def validate(self, config: ProjectConfig, dry_run: bool = False) -> Path:
        """
        Validate choices before anything is written.

        Offers to install a missing package manager when auto-install was
        requested. In dry-run mode the missing manager is only reported.

        Returns:
            Path of the directory the project will be created in

        Raises:
            ValidationError: If the name is empty or the target already exists
            PackageManagerError: If the package manager is missing and was
                not installed
            OperationCancelled: If the user interrupts the install question
        """
        self.state = InitState.VALIDATING_CHOICES

        directory = sanitize_project_name(config.project_name)
        if not directory:
            raise self._abort(ValidationError("Project name cannot be empty"))

        target = self.base_dir / directory
        if target.exists():
            raise self._abort(
                ValidationError(
                    f"Directory {directory} already exists, "
                    f"please choose another project name"
                )
            )

        pm = config.package_manager
        if (
            config.auto_install
            and pm is not PackageManager.NPM
            and not is_installed(pm, runner=self.runner)
        ):
            self.console.print(f"\n[yellow]⚠ {pm.value} was not found on this system[/yellow]")
            if dry_run:
                self.console.print(
                    f"[DRY RUN] Would offer to install {pm.value} globally with npm"
                )
                return target

            try:
                accepted = self.confirm(f"Install {pm.value} globally with npm?", self.console)
            except (KeyboardInterrupt, EOFError):
                raise self._abort(OperationCancelled("Operation cancelled")) from None
            if not accepted:
                raise self._abort(
                    PackageManagerError(f"{pm.value} is required, please install it first")
                )

            self.console.print(f"[blue]→ Installing {pm.value}...[/blue]")
            if not install_globally(pm, runner=self.runner, platform=self.platform):
                raise self._abort(
                    PackageManagerError(
                        f"Failed to install {pm.value}, please install it manually"
                    )
                )
            self.console.print(f"[green]✓ Installed {pm.value}[/green]")

        return target

    def create_structure(self, config: ProjectConfig, target: Path) -> int:
        """
        Create the target directory and copy the language template into it.

        Returns:
            Number of template files copied

        Raises:
            FileOperationError: If the template for the language is missing
            OSError: If the copy fails (the partial tree is left in place)
        """
        self.state = InitState.CREATING_STRUCTURE

        template_path = self.template_dir / config.language.value
        if not template_path.is_dir():
            raise self._abort(FileOperationError(f"Template not found: {template_path}"))

        target.mkdir()
        return copy_tree(template_path, target)

    def patch_manifest(self, config: ProjectConfig, target: Path) -> Dict[str, Any]:
        """Write the raw project name and module type into package.json."""
        self.state = InitState.PATCHING_MANIFEST

        module_type = MANIFEST_TYPE_MODULE if config.is_esm else MANIFEST_TYPE_COMMONJS
        return update_manifest(
            target / MANIFEST_FILENAME,
            {"name": config.project_name, "type": module_type},
        )

    def install_dependencies(self, config: ProjectConfig, target: Path) -> bool:
        """
        Point the package manager at the chosen registry and install.

        A failing command falls back to printing the manual commands.

        Returns:
            True if installation succeeded
        """
        self.state = InitState.INSTALLING_DEPENDENCIES

        pm = config.package_manager.value
        url = url_for(config.registry)
        self.console.print("\n[blue]→ Installing dependencies...[/blue]\n")

        try:
            self.runner([pm, "config", "set", "registry", url])
            self.console.print(f"[green]✓ Set {pm} registry to: {url}[/green]")

            self.runner(list(INSTALL_COMMANDS[config.package_manager]), cwd=target)
        except CommandError as e:
            self.console.print(f"\n[red]✖ Dependency installation failed: {escape(str(e))}[/red]")
            self.print_manual_commands(target.name, config.package_manager)
            return False
        except KeyboardInterrupt:
            self.console.print("\n[red]✖ Dependency installation interrupted[/red]")
            self.print_manual_commands(target.name, config.package_manager)
            return False

        self.console.print("\n[green]✓ Dependencies installed![/green]")
        self.console.print("\nGet started:\n")
        self.console.print(f"[blue]  cd {escape(target.name)}[/blue]")
        self.console.print(f"[blue]  {pm} run dev[/blue]")
        return True

    def print_manual_commands(self, directory: str, package_manager: PackageManager) -> None:
        """Print the commands to install and start the project by hand."""
        self.state = InitState.PRINTING_MANUAL_INSTRUCTIONS

        pm = PackageManager(package_manager).value
        self.console.print("\nRun the following commands:\n")
        if self.is_windows:
            self.console.print(f"[blue]  cd {escape(directory)}[/blue]")
            self.console.print(f"[blue]  {pm} install && {pm} run dev[/blue]")
        else:
            self.console.print(
                f"[blue]  cd {escape(directory)} && {pm} install && {pm} run dev[/blue]"
            )

    def run(self, config: ProjectConfig, dry_run: bool = False) -> Dict[str, Any]:
        """
        Scaffold a project.

        Args:
            config: Collected answers
            dry_run: If True, validate and preview without writing anything

        Returns:
            Dict with run summary ('status' is 'created' or 'dry-run')

        Raises:
            ValidationError: If the target directory already exists
            PackageManagerError: If the package manager is unavailable
            FileOperationError: If the template or its manifest is unusable

        Example:
            >>> summary = ProjectInitializer().run(config)
            >>> print(summary['status'])  # 'created'
        """
        target = self.validate(config, dry_run=dry_run)

        summary = {
            "status": "created",
            "target": str(target),
            "name": config.project_name,
            "directory": target.name,
            "files_copied": 0,
            "installed": False,
        }

        if dry_run:
            template_path = self.template_dir / config.language.value
            module_type = MANIFEST_TYPE_MODULE if config.is_esm else MANIFEST_TYPE_COMMONJS
            self.console.print(f"[DRY RUN] Would create project at: {escape(str(target))}")
            self.console.print(f"  Template: {escape(str(template_path))}")
            self.console.print(
                f'  {MANIFEST_FILENAME}: name="{escape(config.project_name)}", type="{module_type}"'
            )
            if config.auto_install:
                self.console.print(
                    f"  Would set {config.package_manager.value} registry to "
                    f"{url_for(config.registry)} and install dependencies"
                )
            self.state = InitState.DONE
            summary["status"] = "dry-run"
            return summary

        self.console.print(f"\n[blue]→ Creating project {escape(target.name)}...[/blue]")
        summary["files_copied"] = self.create_structure(config, target)
        self.patch_manifest(config, target)
        self.console.print("\n[green]✓ Project created![/green]")

        if config.auto_install:
            summary["installed"] = self.install_dependencies(config, target)
        else:
            self.print_manual_commands(target.name, config.package_manager)

        self.state = InitState.DONE
        return summary


def initialize_project(
    preset: Optional[Dict[str, Any]] = None,
    console: Optional[Console] = None,
    runner: CommandRunner = run_command,
    template_dir: Union[str, Path] = TEMPLATE_DIR,
    base_dir: Optional[Union[str, Path]] = None,
    dry_run: bool = False,
) -> Dict[str, Any]:
    """
    Prompt for any missing answers, then scaffold the project.

    Args:
        preset: Answers supplied up front (skipped in the prompt flow)
        console: Output console
        runner: Command runner for package-manager invocations
        template_dir: Directory holding one template per language
        base_dir: Directory the project is created in (defaults to cwd)
        dry_run: If True, preview without writing anything

    Returns:
        Run summary from ProjectInitializer.run

    Raises:
        OperationCancelled: If the user interrupts the prompts
    """
    initializer = ProjectInitializer(
        console=console,
        runner=runner,
        template_dir=template_dir,
        base_dir=base_dir,
    )
    ctx = PromptContext(
        console=initializer.console, base_dir=initializer.base_dir, runner=runner
    )

    try:
        config = collect_config(ctx, preset)
    except ScaffoldError:
        initializer.state = InitState.ABORTED
        raise

    return initializer.run(config, dry_run=dry_run)
