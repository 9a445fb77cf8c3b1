from typing import Dict, List, Any
from mcp_seed.models import ConfigBlock

ConfigIndex = Dict[str, Dict[str, Any]]


def build_config_index(blocks: List[ConfigBlock]) -> ConfigIndex:
    """
    Map "<block name>.<property key>" to the property's schema.
    Properties whose schema is not an object are skipped; a key declared by
    more than one block keeps the last declaration.
    """
    index: ConfigIndex = {}
    for block in blocks:
        for key, prop in block.properties.items():
            if isinstance(prop, dict):
                index[f"{block.name}.{key}"] = prop
    return index
