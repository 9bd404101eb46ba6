import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from satsrail_mcp.config.loader import load_config
from satsrail_mcp.config.secrets import API_KEY_ENV, load_secrets
from satsrail_mcp.core.server import build_server, serve
from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.catalog import build_registry
from satsrail_mcp.util.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SatsRail MCP server")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"), help="Path to YAML config")
    parser.add_argument("--env-file", type=Path, default=Path(".env"), help="Path to .env file")
    parser.add_argument("--list-tools", action="store_true", help="Print the tool catalog as JSON and exit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_config(config_path=args.config, env_path=args.env_file)
    setup_logging(config.logging)

    secrets = load_secrets(args.env_file)
    if not secrets.has_api_key():
        sys.exit(f"{API_KEY_ENV} environment variable is required")

    client = SatsRailClient(config.api, secrets.satsrail_api_key)
    registry = build_registry(client)

    # Exit early for catalog listing
    if args.list_tools:
        tools = [t.model_dump(exclude_none=True) for t in registry.to_mcp_tools()]
        print(json.dumps(tools, indent=2))
        return

    logger.info(f"Starting {config.server.name} MCP server against {client.base_url}")
    server = build_server(config.server, registry)
    asyncio.run(serve(server))


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run()
