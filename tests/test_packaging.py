"""Tests for the package-data declaration shipping the templates."""

import glob
import shutil
from pathlib import Path

import pytest

from scripts.create_qwqo.constants import TEMPLATE_DIR

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def package_data_patterns():
    with open(PYPROJECT, "rb") as f:
        config = tomllib.load(f)
    return config["tool"]["setuptools"]["package-data"]["create_qwqo"]


def matched_files(package_root, patterns):
    matched = set()
    for pattern in patterns:
        for path in glob.glob(pattern, root_dir=package_root, recursive=True):
            if (package_root / path).is_file():
                matched.add(Path(path).as_posix())
    return matched


def all_files(package_root):
    return {
        path.relative_to(package_root).as_posix()
        for path in (package_root / "template").rglob("*")
        if path.is_file()
    }


class TestTemplatePackageData:
    """Every template file is declared as package data."""

    def test_shipped_templates_covered(self):
        package_root = TEMPLATE_DIR.parent

        assert all_files(package_root) <= matched_files(package_root, package_data_patterns())

    def test_nested_template_directories_covered(self, tmp_path):
        shutil.copytree(TEMPLATE_DIR, tmp_path / "template")
        nested = tmp_path / "template" / "ts" / "src" / "utils" / "deep"
        nested.mkdir(parents=True)
        (nested / "helper.ts").write_text("export const x = 1\n")

        matched = matched_files(tmp_path, package_data_patterns())

        assert "template/ts/src/utils/deep/helper.ts" in matched
        assert all_files(tmp_path) <= matched
