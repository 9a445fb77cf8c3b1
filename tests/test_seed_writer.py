"""Tests for seed file rendering and writing."""

import json
from unittest.mock import patch

import pytest

from mcp_seed.core.batch import build_servers
from mcp_seed.errors import SeedWriteError
from mcp_seed.services.seed_writer import render_seed, write_seed


def test_render_is_indented_json_array(catalog):
    """The seed is a two-space indented JSON array."""
    rendered = render_seed(build_servers(catalog).servers)
    assert rendered.startswith("[\n  {\n    \"$schema\"")
    data = json.loads(rendered)
    assert isinstance(data, list)
    assert data[0]["name"] == "com.docker.mcp/github"
    assert "io.modelcontextprotocol.registry/publisher-provided" in data[0]["_meta"]


def test_render_empty_list():
    """No servers renders an empty array."""
    assert render_seed([]) == "[]"


def test_write_creates_file(tmp_path, catalog):
    """write_seed writes the rendered seed, creating parent dirs."""
    servers = build_servers(catalog).servers
    target = tmp_path / "out" / "seed.json"

    written = write_seed(servers, target)

    assert written == target
    assert json.loads(target.read_text(encoding="utf-8"))[1]["name"] == "com.docker.mcp/time"


def test_write_keeps_non_ascii(tmp_path, catalog_data):
    """Non-ASCII text is written as UTF-8, not escaped."""
    from mcp_seed.models import DockerCatalog

    catalog_data["registry"] = {"cafe": {"description": "Café tools", "image": "mcp/cafe"}}
    servers = build_servers(DockerCatalog.model_validate(catalog_data)).servers
    target = tmp_path / "seed.json"
    write_seed(servers, target)
    assert "Café tools" in target.read_text(encoding="utf-8")


def test_write_failure_raises(tmp_path):
    """OS errors surface as SeedWriteError."""
    with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
        with pytest.raises(SeedWriteError):
            write_seed([], tmp_path / "seed.json")
