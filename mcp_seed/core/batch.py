from dataclasses import dataclass, field
from typing import List
from mcp_seed.logger import logger
from mcp_seed.models import DockerCatalog, ServerDescriptor
from mcp_seed.core.transform import transform_entry, DEFAULT_NAMESPACE


@dataclass
class BatchResult:
    servers: List[ServerDescriptor] = field(default_factory=list)
    skipped_remote: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def build_servers(
    catalog: DockerCatalog,
    include_remote: bool = False,
    sort_entries: bool = False,
    namespace: str = DEFAULT_NAMESPACE
) -> BatchResult:
    """
    Transform every catalog entry into a registry descriptor.

    Remote entries are left out unless `include_remote` is set. Output follows
    the catalog's order, or entry name order with `sort_entries`. An entry that
    fails to transform is logged and skipped; the rest of the batch carries on.
    """
    result = BatchResult()

    names = sorted(catalog.registry) if sort_entries else list(catalog.registry)
    for name in names:
        entry = catalog.registry[name]

        if entry.is_remote and not include_remote:
            logger.debug(f"Skipping remote server: {name}")
            result.skipped_remote.append(name)
            continue

        try:
            server = transform_entry(name, entry, namespace=namespace)
        except Exception as e:
            logger.warning(f"Failed to transform {name}: {str(e)}")
            result.failed.append(name)
            continue

        logger.debug(f"Transformed {name} -> {server.name}")
        result.servers.append(server)

    logger.info(
        f"Transformed {len(result.servers)}/{len(names)} servers "
        f"({len(result.skipped_remote)} remote skipped, {len(result.failed)} failed)"
    )
    return result
