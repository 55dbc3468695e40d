"""
ClickUp MCP Server Startup

Usage:
    python -m clickup_mcp --port 8080
    clickup-mcp --host 0.0.0.0 --log-level DEBUG

Reads CLICKUP_API_KEY and the other settings from the environment (or .env).
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from .config import ClickUpServerConfig
from .server import ClickUpMCPServer


def setup_logging(log_level: str) -> None:
    """Configure logging for the server."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="ClickUp MCP Server - Expose ClickUp operations as MCP tools"
    )

    parser.add_argument(
        "--host",
        default=os.getenv("MCP_HOST", "localhost"),
        help="Host to bind to (default: localhost or MCP_HOST env var)"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("MCP_PORT", "8080")),
        help="Port to bind to (default: 8080 or MCP_PORT env var)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        help="Logging level (default: INFO or LOG_LEVEL env var)"
    )

    return parser.parse_args(argv)


async def serve(args: argparse.Namespace) -> None:
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info("ClickUp MCP Server Starting")
    logger.info("=" * 60)
    logger.info("Address: %s:%s", args.host, args.port)
    logger.info("Log Level: %s", args.log_level)
    logger.info("=" * 60)

    config = ClickUpServerConfig.from_env()
    config.host = args.host
    config.port = args.port
    config.log_level = args.log_level

    server = ClickUpMCPServer(config)
    await server.run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        asyncio.run(serve(args))
    except KeyboardInterrupt:
        logger.info("Shutting down ClickUp MCP Server...")
    except Exception as e:
        logger.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
