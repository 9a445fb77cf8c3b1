"""
Turns one Docker MCP catalog entry into an MCP registry server descriptor.

Remote entries become a single remote transport. Everything else becomes an
OCI package run over stdio, with env vars, secrets, command tokens, volumes
and the container user mapped onto typed arguments.
"""

from typing import Dict, List, Optional, Any
from mcp_seed.models import (
    CatalogEntry,
    ServerDescriptor,
    Package,
    Transport,
    KeyValueInput,
    Argument,
    InputSchema,
    Repository,
    PUBLISHER_META_KEY,
)
from mcp_seed.core.config_index import build_config_index, ConfigIndex
from mcp_seed.core.placeholders import parse_placeholders

DEFAULT_NAMESPACE = "com.docker.mcp"
MAX_DESCRIPTION_LENGTH = 100
RUNTIME_HINT = "docker"


def truncate_description(description: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(description) > limit:
        return description[:limit - 3] + "..."
    return description


def infer_repository_source(url: str) -> str:
    if "github.com" in url:
        return "github"
    if "gitlab.com" in url:
        return "gitlab"
    return ""


def publisher_metadata(entry: CatalogEntry) -> Dict[str, Any]:
    meta = entry.metadata
    provided: Dict[str, Any] = {
        "pulls": meta.pulls,
        "githubStars": meta.github_stars,
        "category": meta.category,
        "tags": list(meta.tags),
        "license": meta.license,
        "owner": meta.owner,
        "tools": [{"name": tool.name} for tool in entry.tools],
        "source": entry.source,
        "icon": entry.icon,
        "prompts": entry.prompts,
        "title": entry.title,
        "readme": entry.readme,
        "toolsUrl": entry.tools_url,
        "dateAdded": entry.date_added,
        "upstream": entry.upstream,
        "resources": entry.resources,
    }
    if meta.stars > 0:
        provided["stars"] = meta.stars
    return provided


# ============= Remote transport =============

def remote_transport(entry: CatalogEntry) -> Transport:
    remote = entry.remote
    headers = [KeyValueInput(name=k, value=v or None) for k, v in remote.headers.items()]
    return Transport(
        type=remote.transport_type,
        url=remote.url or None,
        headers=headers or None
    )


# ============= Package inputs =============

def _templated(value: str, config_index: ConfigIndex):
    """Canonical value plus its variables, or None when nothing was extracted."""
    canonical, variables = parse_placeholders(value, config_index)
    return canonical, (variables or None)


def environment_variables(entry: CatalogEntry, config_index: ConfigIndex) -> List[KeyValueInput]:
    result = []
    for env in entry.env:
        value, variables = _templated(env.value, config_index)
        result.append(KeyValueInput(name=env.name, value=value or None, variables=variables))

    # secrets are always sensitive and always required, whatever the config says
    for secret in entry.secrets:
        result.append(KeyValueInput(
            name=secret.env,
            value=f"{{{secret.name}}}",
            variables={secret.name: InputSchema(is_secret=True, is_required=True)}
        ))
    return result


def command_argument(token: str, config_index: ConfigIndex) -> Argument:
    """
    `--flag` or `--flag=value` becomes a named argument, anything else is
    passed through untouched as a positional one.
    """
    if not token.startswith("--"):
        return Argument(type="positional", value=token or None)

    flag, sep, raw_value = token.partition("=")
    if not sep:
        return Argument(type="named", name=flag)

    value, variables = _templated(raw_value, config_index)
    return Argument(type="named", name=flag, value=value or None, variables=variables)


def runtime_arguments(entry: CatalogEntry, config_index: ConfigIndex) -> List[Argument]:
    flagged = [("-v", volume) for volume in entry.volumes]
    if entry.user:
        flagged.append(("-u", entry.user))

    result = []
    for flag, raw_value in flagged:
        value, variables = _templated(raw_value, config_index)
        result.append(Argument(type="named", name=flag, value=value or None, variables=variables))
    return result


def oci_package(entry: CatalogEntry, config_index: ConfigIndex) -> Package:
    # the image reference already carries its tag/digest, so no separate version
    env_vars = environment_variables(entry, config_index)
    package_args = [command_argument(token, config_index) for token in entry.command]
    runtime_args = runtime_arguments(entry, config_index)

    return Package(
        registry_type="oci",
        transport=Transport(type="stdio"),
        identifier=entry.image,
        environment_variables=env_vars or None,
        package_arguments=package_args or None,
        runtime_arguments=runtime_args or None,
        runtime_hint=RUNTIME_HINT if runtime_args else None
    )


def repository_for(entry: CatalogEntry) -> Optional[Repository]:
    if not entry.upstream:
        return None
    source = infer_repository_source(entry.upstream)
    return Repository(url=entry.upstream, source=source or None)


# ============= Entry =============

def transform_entry(name: str, entry: CatalogEntry, namespace: str = DEFAULT_NAMESPACE) -> ServerDescriptor:
    """Build the registry descriptor for catalog entry `name`."""
    base = dict(
        name=f"{namespace}/{name}",
        description=truncate_description(entry.description),
        meta={PUBLISHER_META_KEY: publisher_metadata(entry)},
    )

    if entry.is_remote and entry.remote is not None:
        return ServerDescriptor(**base, remotes=[remote_transport(entry)])

    config_index = build_config_index(entry.config_blocks)
    return ServerDescriptor(
        **base,
        packages=[oci_package(entry, config_index)],
        repository=repository_for(entry)
    )
