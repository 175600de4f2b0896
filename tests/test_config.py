"""Unit tests for ScaffoldConfig (lwc_scaffold.config)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lwc_scaffold.config import ScaffoldConfig

pytestmark = pytest.mark.unit


class TestScaffoldConfig:
    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.root == Path(".")
        assert config.modules_subdir == "src/modules"
        assert config.type_marker == "tsconfig.json"
        assert config.framework_module == "lwc"
        assert config.base_class == "LightningElement"

    def test_derived_paths(self, tmp_path):
        config = ScaffoldConfig(root=tmp_path)
        assert config.modules_dir == tmp_path / "src" / "modules"
        assert config.type_marker_path == tmp_path / "tsconfig.json"

    def test_root_accepts_string(self, tmp_path):
        config = ScaffoldConfig(root=str(tmp_path))
        assert config.root == tmp_path

    def test_empty_base_class_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(base_class="")


class TestFromEnv:
    def test_no_env_uses_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ScaffoldConfig.from_env()
        assert config == ScaffoldConfig()

    def test_reads_env(self, tmp_path):
        env = {
            "LWC_SCAFFOLD_ROOT": str(tmp_path),
            "LWC_SCAFFOLD_MODULES_DIR": "force-app/lwc",
            "LWC_SCAFFOLD_TYPE_MARKER": "jsconfig.json",
            "LWC_SCAFFOLD_FRAMEWORK_MODULE": "@lwc/engine",
            "LWC_SCAFFOLD_BASE_CLASS": "BaseElement",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.root == tmp_path
        assert config.modules_dir == tmp_path / "force-app" / "lwc"
        assert config.type_marker == "jsconfig.json"
        assert config.framework_module == "@lwc/engine"
        assert config.base_class == "BaseElement"

    def test_explicit_root_wins(self, tmp_path):
        with patch.dict("os.environ", {"LWC_SCAFFOLD_ROOT": "/elsewhere"}, clear=True):
            config = ScaffoldConfig.from_env(tmp_path)
        assert config.root == tmp_path
