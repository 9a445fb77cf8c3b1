import pytest

from mcp_seed.models import DockerCatalog


SAMPLE_CATALOG = {
    "name": "docker-mcp",
    "displayName": "Docker MCP Catalog",
    "registry": {
        "github": {
            "description": "Tools for interacting with the GitHub API",
            "title": "GitHub",
            "type": "server",
            "dateAdded": "2025-04-01T00:00:00Z",
            "image": "mcp/github:latest@sha256:abc123",
            "readme": "http://desktop.docker.com/mcp/catalog/v2/readme/github.md",
            "toolsUrl": "http://desktop.docker.com/mcp/catalog/v2/tools/github.json",
            "source": "https://github.com/modelcontextprotocol/servers/tree/main/src/github",
            "upstream": "https://github.com/modelcontextprotocol/servers",
            "icon": "https://avatars.githubusercontent.com/u/9919?s=200&v=4",
            "tools": [{"name": "create_issue"}, {"name": "search_repositories"}],
            "prompts": 0,
            "resources": {},
            "metadata": {
                "pulls": 1200,
                "stars": 5,
                "githubStars": 30000,
                "category": "devops",
                "tags": ["github", "devops"],
                "license": "MIT License",
                "owner": "modelcontextprotocol",
            },
            "secrets": [
                {"name": "github.personal_access_token", "env": "GITHUB_PERSONAL_ACCESS_TOKEN", "example": "<token>"}
            ],
            "env": [
                {"name": "GITHUB_HOST", "value": "{{github.host}}"},
                {"name": "LOG_LEVEL", "value": "info"},
            ],
            "command": ["serve", "--port=8080", "--toolsets={{github.toolsets|volume}}", "--read-only"],
            "volumes": ["{{github.path|volume-target}}:/data"],
            "user": "{{github.uid}}:{{github.gid}}",
            "config": [
                {
                    "name": "github",
                    "description": "Configure the GitHub server",
                    "type": "object",
                    "properties": {
                        "host": {"type": "string", "description": "GitHub Enterprise host"},
                        "toolsets": {"type": "string", "description": "Enabled toolsets"},
                        "path": {"type": "string"},
                        "uid": "not-a-schema",
                    },
                }
            ],
        },
        "time": {
            "description": "Time and timezone conversion capabilities",
            "title": "Time",
            "image": "mcp/time",
            "upstream": "https://gitlab.com/acme/time",
            "metadata": {"pulls": 10, "category": "utilities", "tags": ["time"]},
        },
        "linear": {
            "description": "Linear remote MCP server",
            "title": "Linear",
            "type": "remote",
            "remote": {
                "transport_type": "sse",
                "url": "https://mcp.linear.app/sse",
                "headers": {"Authorization": "Bearer {{linear.token}}", "X-Client": "docker"},
            },
            "metadata": {"category": "productivity"},
        },
    },
}


@pytest.fixture
def catalog_data():
    import copy

    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def catalog(catalog_data):
    return DockerCatalog.model_validate(catalog_data)
