from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from xdg_desktop.core.config import load_config
from xdg_desktop.core.models import ProbePolicy


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_config_files(tmp_path):
    loaded = load_config(tmp_path)
    assert loaded.parser.probe_policy == ProbePolicy.HOMOGENEOUS
    assert loaded.parser.keep_section_brackets is False
    assert loaded.ui.max_value_width == 80
    assert loaded.repo_path is None
    assert loaded.global_path is None


def test_precedence_global_repo_cli(tmp_path, _isolated_home):
    global_cfg = _write(
        _isolated_home / ".config" / "xdg-desktop" / "config.toml",
        '[parser]\nprobe_policy = "element_wise"\nkeep_section_brackets = true\n[ui]\nmax_value_width = 40\n',
    )
    repo = tmp_path / "repo"
    repo_cfg = _write(repo / ".xdg-desktop" / "config.toml", "[parser]\nkeep_section_brackets = false\n")
    nested = repo / "share" / "applications"
    nested.mkdir(parents=True)

    loaded = load_config(nested, cli_overrides={"ui": {"max_value_width": 120}})

    assert loaded.global_path == global_cfg.resolve()
    assert loaded.repo_path == repo_cfg.resolve()
    assert loaded.parser.probe_policy == ProbePolicy.ELEMENT_WISE
    assert loaded.parser.keep_section_brackets is False
    assert loaded.ui.max_value_width == 120


def test_invalid_values_are_rejected(tmp_path):
    _write(tmp_path / ".xdg-desktop" / "config.toml", '[parser]\nprobe_policy = "sometimes"\n')
    with pytest.raises(ValidationError):
        load_config(tmp_path)
