from mcp_seed.cli import cli

cli()
