import json
from pathlib import Path
from typing import List, Union
from mcp_seed.errors import SeedWriteError
from mcp_seed.logger import logger
from mcp_seed.models import ServerDescriptor


def render_seed(servers: List[ServerDescriptor]) -> str:
    """Serialize descriptors as a 2-space indented JSON array."""
    try:
        return json.dumps(
            [server.to_json_dict() for server in servers],
            indent=2,
            ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise SeedWriteError(f"Error marshaling output: {str(e)}")


def write_seed(servers: List[ServerDescriptor], path: Union[str, Path]) -> Path:
    output_path = Path(path)
    content = render_seed(servers)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise SeedWriteError(f"Error writing {output_path}: {str(e)}")

    logger.info(f"Wrote {len(servers)} servers to {output_path}")
    return output_path
