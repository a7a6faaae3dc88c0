"""Tests for the interactive prompt flow."""

from unittest.mock import patch

import pytest

from scripts.create_qwqo import (
    PROMPT_STEPS,
    Language,
    ModuleType,
    OperationCancelled,
    PackageManager,
    PromptContext,
    Registry,
    ValidationError,
    collect_config,
)
from scripts.create_qwqo.prompts import validate_project_name

PROMPT_ASK = "scripts.create_qwqo.prompts.flow.Prompt.ask"
CONFIRM_ASK = "scripts.create_qwqo.prompts.flow.Confirm.ask"


@pytest.fixture
def ctx(console, workspace, make_runner):
    runner = make_runner(
        outputs={("pnpm", "config", "get", "registry"): "https://registry.npmmirror.com/\n"}
    )
    return PromptContext(console=console, base_dir=workspace, runner=runner)


class TestValidateProjectName:
    """Tests for validate_project_name function."""

    def test_free_name(self, workspace):
        assert validate_project_name("demo", workspace) is None

    def test_empty_name(self, workspace):
        assert "empty" in validate_project_name("  ", workspace)

    def test_existing_sanitized_directory(self, workspace):
        (workspace / "scope-pkg").mkdir()

        assert "already exists" in validate_project_name("@scope/pkg", workspace)

    def test_existing_file_collides(self, workspace):
        (workspace / "demo").write_text("")

        assert "already exists" in validate_project_name("demo", workspace)


class TestCollectConfig:
    """Tests for collect_config function."""

    def test_step_order(self):
        assert [step.name for step in PROMPT_STEPS] == [
            "project_name",
            "language",
            "module_type",
            "package_manager",
            "registry",
            "auto_install",
        ]

    def test_full_flow(self, ctx):
        with patch(PROMPT_ASK, side_effect=["demo", "ts", "esm", "pnpm", "taobao"]), patch(
            CONFIRM_ASK, return_value=False
        ):
            config = collect_config(ctx)

        assert config.project_name == "demo"
        assert config.language is Language.TS
        assert config.module_type is ModuleType.ESM
        assert config.package_manager is PackageManager.PNPM
        assert config.registry is Registry.TAOBAO
        assert config.auto_install is False

    def test_registry_message_shows_current_registry(self, ctx):
        with patch(
            PROMPT_ASK, side_effect=["demo", "js", "cjs", "pnpm", "npm"]
        ) as mock_prompt, patch(CONFIRM_ASK, return_value=True):
            collect_config(ctx)

        registry_message = mock_prompt.call_args_list[4][0][0]
        assert "current: Taobao mirror" in registry_message
        assert mock_prompt.call_args_list[4][1]["choices"] == ["npm", "taobao"]
        # Queried the package manager picked in the previous step
        assert ctx.runner.commands == [("pnpm", "config", "get", "registry")]

    def test_reprompts_on_existing_directory(self, ctx, workspace, capsys):
        (workspace / "taken").mkdir()

        with patch(
            PROMPT_ASK, side_effect=["taken", "fresh", "ts", "cjs", "npm", "npm"]
        ), patch(CONFIRM_ASK, return_value=True):
            config = collect_config(ctx)

        assert config.project_name == "fresh"
        assert "Directory taken already exists" in capsys.readouterr().out

    def test_reprompt_message_keeps_brackets(self, ctx, workspace, capsys):
        (workspace / "app[bold]x").mkdir()

        with patch(
            PROMPT_ASK, side_effect=["app[bold]x", "fresh", "ts", "cjs", "npm", "npm"]
        ), patch(CONFIRM_ASK, return_value=True):
            collect_config(ctx)

        assert "Directory app[bold]x already exists" in capsys.readouterr().out

    def test_preset_answers_skip_prompts(self, ctx):
        preset = {
            "project_name": "demo",
            "language": "js",
            "module_type": "cjs",
            "package_manager": "npm",
            "registry": None,
            "auto_install": False,
        }

        with patch(PROMPT_ASK, return_value="taobao") as mock_prompt, patch(
            CONFIRM_ASK
        ) as mock_confirm:
            config = collect_config(ctx, preset)

        assert mock_prompt.call_count == 1
        mock_confirm.assert_not_called()
        assert config.registry is Registry.TAOBAO
        assert config.language is Language.JS

    def test_invalid_preset_name(self, ctx, workspace):
        (workspace / "demo").mkdir()

        with pytest.raises(ValidationError, match="already exists"):
            collect_config(ctx, {"project_name": "demo"})

    def test_invalid_preset_choice(self, ctx):
        preset = {
            "project_name": "demo",
            "language": "rust",
            "module_type": "cjs",
            "package_manager": "npm",
            "registry": "npm",
            "auto_install": True,
        }

        with pytest.raises(ValidationError, match="Invalid language 'rust'"):
            collect_config(ctx, preset)

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_cancellation(self, ctx, workspace, interrupt):
        with patch(PROMPT_ASK, side_effect=["demo", interrupt()]):
            with pytest.raises(OperationCancelled):
                collect_config(ctx)

        assert list(workspace.iterdir()) == []
