"""
File: services/catalog_source.py
Obtains the Docker MCP catalog and decodes it into a DockerCatalog.

Sources:
- "docker": runs `docker mcp catalog show --format json`
- http(s) URL: fetched over HTTP (JSON, or YAML for .yaml/.yml URLs)
- anything else: a local JSON or YAML file
"""

import json
import subprocess
from pathlib import Path
from typing import Any, List, Optional

import httpx
import yaml
from pydantic import ValidationError

from mcp_seed.config import Settings, settings as default_settings
from mcp_seed.errors import CatalogSourceError, CatalogDecodeError
from mcp_seed.logger import logger
from mcp_seed.models import DockerCatalog

DOCKER_SOURCE = "docker"
YAML_SUFFIXES = (".yaml", ".yml")


def docker_catalog_command(docker_bin: str = "docker", catalog_name: Optional[str] = None) -> List[str]:
    cmd = [docker_bin, "mcp", "catalog", "show"]
    if catalog_name:
        cmd.append(catalog_name)
    cmd.extend(["--format", "json"])
    return cmd


def fetch_from_docker(docker_bin: str, catalog_name: Optional[str], timeout: float) -> str:
    cmd = docker_catalog_command(docker_bin, catalog_name)
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True
        )
    except FileNotFoundError:
        raise CatalogSourceError(f"'{docker_bin}' executable not found")
    except subprocess.TimeoutExpired:
        raise CatalogSourceError(f"Timeout after {timeout}s running docker mcp catalog show")
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip() or "Unknown error"
        raise CatalogSourceError(f"Error running docker mcp catalog show: {stderr}")

    return result.stdout


def fetch_from_url(url: str, timeout: float) -> str:
    logger.info(f"Fetching catalog from {url}")
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise CatalogSourceError(f"Error fetching catalog: HTTP {e.response.status_code} from {url}")
    except httpx.HTTPError as e:
        raise CatalogSourceError(f"Error fetching catalog from {url}: {str(e)}")
    return response.text


def read_from_file(path: Path) -> str:
    logger.info(f"Reading catalog from {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogSourceError(f"Error reading catalog file {path}: {str(e)}")


def decode_catalog(raw: str, as_yaml: bool = False) -> DockerCatalog:
    try:
        data: Any = yaml.safe_load(raw) if as_yaml else json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogDecodeError(f"Error parsing catalog: {str(e)}")

    if not isinstance(data, dict):
        raise CatalogDecodeError(f"Error parsing catalog: expected an object, got {type(data).__name__}")

    try:
        catalog = DockerCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogDecodeError(f"Error parsing catalog: {str(e)}")

    logger.info(f"Loaded catalog '{catalog.name}' with {len(catalog.registry)} servers")
    return catalog


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_catalog(source: Optional[str] = None, settings: Optional[Settings] = None) -> DockerCatalog:
    """Fetch and decode the catalog from `source` (defaults to settings.catalog_source)."""
    settings = settings or default_settings
    source = source or settings.catalog_source

    if source == DOCKER_SOURCE:
        raw = fetch_from_docker(settings.docker_bin, settings.catalog_name, settings.catalog_timeout)
        return decode_catalog(raw)

    if is_url(source):
        raw = fetch_from_url(source, settings.catalog_timeout)
        return decode_catalog(raw, as_yaml=source.lower().endswith(YAML_SUFFIXES))

    path = Path(source)
    raw = read_from_file(path)
    return decode_catalog(raw, as_yaml=path.suffix.lower() in YAML_SUFFIXES)
