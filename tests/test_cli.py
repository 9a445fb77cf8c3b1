"""Tests for the mcp-seed command line."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mcp_seed.cli import cli
from mcp_seed.errors import CatalogSourceError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


def test_build_writes_seed(runner, tmp_path, catalog_file):
    """build converts a catalog file into seed.json."""
    output = tmp_path / "seed.json"
    result = runner.invoke(cli, ["build", "--source", str(catalog_file), "--output", str(output)])

    assert result.exit_code == 0, result.output
    servers = json.loads(output.read_text(encoding="utf-8"))
    assert [s["name"] for s in servers] == ["com.docker.mcp/github", "com.docker.mcp/time"]
    assert "SUCCESS" in result.output


def test_build_include_remote_and_sort(runner, tmp_path, catalog_file):
    """Flags override the defaults for remote entries and ordering."""
    output = tmp_path / "seed.json"
    result = runner.invoke(cli, [
        "build", "-s", str(catalog_file), "-o", str(output),
        "--include-remote", "--sort", "--namespace", "io.example",
    ])

    assert result.exit_code == 0, result.output
    names = [s["name"] for s in json.loads(output.read_text(encoding="utf-8"))]
    assert names == ["io.example/github", "io.example/linear", "io.example/time"]


def test_build_source_error_exits_nonzero(runner, tmp_path):
    """Catalog failures print an error and exit with status 1."""
    with patch("mcp_seed.cli.load_catalog", side_effect=CatalogSourceError("docker not found")):
        result = runner.invoke(cli, ["build", "-o", str(tmp_path / "seed.json")])

    assert result.exit_code == 1
    assert "ERROR" in result.output
    assert not (tmp_path / "seed.json").exists()


def test_inspect_prints_descriptor(runner, catalog_file):
    """inspect shows the descriptor of one entry."""
    result = runner.invoke(cli, ["inspect", "time", "--source", str(catalog_file)])
    assert result.exit_code == 0, result.output
    assert "com.docker.mcp/time" in result.output


def test_inspect_unknown_entry(runner, catalog_file):
    """inspect fails for names not in the catalog."""
    result = runner.invoke(cli, ["inspect", "missing", "--source", str(catalog_file)])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_version(runner):
    """--version reports the package version."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
