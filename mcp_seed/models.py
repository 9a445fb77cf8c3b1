from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional, Dict, Any, Literal

SCHEMA_URL = "https://static.modelcontextprotocol.io/schemas/2025-10-17/server.schema.json"
SERVER_VERSION = "v0.1.0"
PUBLISHER_META_KEY = "io.modelcontextprotocol.registry/publisher-provided"

# ============= Docker catalog (input) =============

class CatalogModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # explicit nulls fall back to the field defaults
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

class Tool(CatalogModel):
    name: str = ""

class CatalogMetadata(CatalogModel):
    pulls: int = 0
    stars: int = 0
    github_stars: int = Field(0, alias="githubStars")
    category: str = ""
    tags: List[str] = []
    license: str = ""
    owner: str = ""

class Secret(CatalogModel):
    name: str = ""
    env: str = ""
    example: str = ""

class EnvVar(CatalogModel):
    name: str = ""
    value: str = ""

class ConfigBlock(CatalogModel):
    name: str = ""
    description: str = ""
    type: str = ""
    properties: Dict[str, Any] = {}
    required: List[str] = []

class Remote(CatalogModel):
    transport_type: str = ""
    url: str = ""
    headers: Dict[str, str] = {}

    @field_validator("headers", mode="before")
    @classmethod
    def _null_headers_to_empty(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: "" if v is None else v for k, v in value.items()}
        return value

class OAuthProvider(CatalogModel):
    provider: str = ""
    secret: str = ""
    env: str = ""

class OAuth(CatalogModel):
    providers: List[OAuthProvider] = []

class CatalogEntry(CatalogModel):
    description: str = ""
    title: str = ""
    type: str = ""
    date_added: str = Field("", alias="dateAdded")
    image: str = ""
    ref: str = ""
    readme: str = ""
    tools_url: str = Field("", alias="toolsUrl")
    source: str = ""
    upstream: str = ""
    icon: str = ""
    tools: List[Tool] = []
    prompts: int = 0
    resources: Dict[str, Any] = {}
    metadata: CatalogMetadata = CatalogMetadata()
    secrets: List[Secret] = []
    env: List[EnvVar] = []
    command: List[str] = []
    volumes: List[str] = []
    config_blocks: List[ConfigBlock] = Field([], alias="config")
    remote: Optional[Remote] = None
    user: str = ""
    long_lived: bool = Field(False, alias="longLived")
    allow_hosts: List[str] = Field([], alias="allowHosts")
    oauth: Optional[OAuth] = None

    @property
    def is_remote(self) -> bool:
        return self.type == "remote"

class DockerCatalog(CatalogModel):
    name: str = ""
    display_name: str = Field("", alias="displayName")
    registry: Dict[str, CatalogEntry] = {}

# ============= MCP registry schema (output) =============
# Optional fields left as None are omitted on serialization, mirroring the
# registry's omit-empty JSON.

class RegistryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

class InputSchema(RegistryModel):
    is_secret: Optional[bool] = Field(None, alias="isSecret")
    is_required: Optional[bool] = Field(None, alias="isRequired")
    format: Optional[str] = None
    description: Optional[str] = None

class KeyValueInput(RegistryModel):
    name: str
    value: Optional[str] = None
    description: Optional[str] = None
    is_required: Optional[bool] = Field(None, alias="isRequired")
    is_secret: Optional[bool] = Field(None, alias="isSecret")
    is_repeated: Optional[bool] = Field(None, alias="isRepeated")
    variables: Optional[Dict[str, InputSchema]] = None

class Argument(RegistryModel):
    type: Literal["named", "positional"]
    name: Optional[str] = None
    value: Optional[str] = None
    is_required: Optional[bool] = Field(None, alias="isRequired")
    is_secret: Optional[bool] = Field(None, alias="isSecret")
    is_repeated: Optional[bool] = Field(None, alias="isRepeated")
    variables: Optional[Dict[str, InputSchema]] = None

class Transport(RegistryModel):
    type: str
    url: Optional[str] = None
    headers: Optional[List[KeyValueInput]] = None

class Package(RegistryModel):
    registry_type: str = Field(alias="registryType")
    transport: Transport
    identifier: str = ""
    version: Optional[str] = None
    environment_variables: Optional[List[KeyValueInput]] = Field(None, alias="environmentVariables")
    package_arguments: Optional[List[Argument]] = Field(None, alias="packageArguments")
    runtime_arguments: Optional[List[Argument]] = Field(None, alias="runtimeArguments")
    runtime_hint: Optional[str] = Field(None, alias="runtimeHint")

class Repository(RegistryModel):
    url: str
    source: Optional[str] = None
    subfolder: Optional[str] = None

class ServerDescriptor(RegistryModel):
    schema_url: str = Field(SCHEMA_URL, alias="$schema")
    name: str
    description: str
    version: str = SERVER_VERSION
    packages: Optional[List[Package]] = None
    remotes: Optional[List[Transport]] = None
    repository: Optional[Repository] = None
    website_url: Optional[str] = Field(None, alias="websiteUrl")
    meta: Optional[Dict[str, Any]] = Field(None, alias="_meta")
