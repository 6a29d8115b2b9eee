from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from modkit.cli.main import app

runner = CliRunner()

MAIN_TF = """
variable "project_id" {
  description = "Project to deploy into"
  type        = string
}

variable "region" {
  type    = string
  default = "us-central1"
}

output "network_id" {
  description = "ID of the network"
  value       = var.project_id
}
"""


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    module = tmp_path / "vpc"
    module.mkdir()
    (module / "main.tf").write_text(MAIN_TF)
    return module


def test_module_info_prints_yaml(module_dir: Path) -> None:
    result = runner.invoke(app, ["module", "info", str(module_dir)])

    assert result.exit_code == 0, result.output
    payload = yaml.safe_load(result.stdout)
    assert [var["name"] for var in payload["inputs"]] == ["project_id", "region"]
    assert payload["inputs"][0]["required"] is True
    assert payload["outputs"][0]["name"] == "network_id"


def test_module_info_prints_json(module_dir: Path) -> None:
    result = runner.invoke(app, ["module", "info", str(module_dir), "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["inputs"][1] == {
        "name": "region",
        "type": "string",
        "description": None,
        "default": "us-central1",
        "required": False,
    }


def test_module_info_rejects_non_local_source() -> None:
    result = runner.invoke(app, ["module", "info", "gcs://bucket/mod"])

    assert result.exit_code == 1
    assert "is not a local path" in result.output


def test_module_info_reports_unknown_kind(module_dir: Path) -> None:
    result = runner.invoke(app, ["module", "info", str(module_dir), "--kind", "helm"])

    assert result.exit_code == 1
    assert "unknown module kind 'helm'" in result.output
    assert "packer, terraform" in result.output


def test_module_fetch_copies_module(module_dir: Path, tmp_path: Path) -> None:
    destination = tmp_path / "deployment" / "vpc"

    result = runner.invoke(app, ["module", "fetch", str(module_dir), str(destination)])

    assert result.exit_code == 0, result.output
    assert (destination / "main.tf").read_text() == MAIN_TF


def test_module_fetch_reports_missing_source(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent"
    destination = tmp_path / "deployment"

    result = runner.invoke(app, ["module", "fetch", str(missing), str(destination)])

    assert result.exit_code == 1
    assert "doesn't exist" in result.output
    assert not destination.exists()


def test_module_without_subcommand_prints_help() -> None:
    result = runner.invoke(app, ["module"])

    assert result.exit_code == 0
    assert "info" in result.output
    assert "fetch" in result.output
