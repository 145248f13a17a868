"""Tests for the command line lookup."""

import argparse
import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from script_finder.resolve_script import main, run_lookup


def make_args(**kwargs: object) -> argparse.Namespace:
    """Create parsed arguments with defaults for the lookup."""
    defaults: dict[str, object] = {
        "resource_type": "t",
        "bundle": None,
        "method": "get",
        "extension": None,
        "selector": [],
        "delegated_resource_type": None,
        "config": None,
        "list_candidates": False,
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


def test_list_candidates(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that candidates are printed one per line."""
    assert run_lookup(make_args(list_candidates=True, selector=["a"])) == 0
    assert capsys.readouterr().out.splitlines() == ["t/a", "t/GET.a", "t/t", "t/GET"]


def test_missing_bundle_directory(tmp_path: Path) -> None:
    """Verify that a missing bundle directory aborts."""
    with pytest.raises(SystemExit):
        run_lookup(make_args(bundle=tmp_path / "missing"))


def test_lookup_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a found script is printed with its engine."""
    bundle_dir = tmp_path / "bundle"
    entry = bundle_dir / "javax.script" / "t" / "GET.html"
    entry.parent.mkdir(parents=True)
    entry.write_text("x", encoding="utf-8")
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"engines": [{"name": "htl", "extensions": ["html"]}]})
    )

    code = run_lookup(make_args(bundle=bundle_dir, config=str(config_file)))

    assert code == 0
    assert capsys.readouterr().out.strip().endswith("GET.html (htl)")


def test_lookup_not_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a missing script exits with status 1."""
    assert run_lookup(make_args(bundle=tmp_path)) == 1
    assert "No script found for t" in capsys.readouterr().out


def test_main_parses_arguments(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify argument parsing and verbose logging setup through main."""
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "resolve-script",
            "t/2",
            "--method",
            "post",
            "--extension",
            "json",
            "--list-candidates",
            "--verbose",
        ],
    )

    with patch("script_finder.resolve_script.logging.basicConfig") as basic_config:
        assert main() == 0

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert capsys.readouterr().out.splitlines() == [
        "t/2/POST.json",
        "t/2/POST",
    ]
