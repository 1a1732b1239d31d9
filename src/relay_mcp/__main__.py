import argparse
import logging
import os
import sys

from relay_mcp.server.mcp import HTTP_ENDPOINT, run_http, run_stdio
from relay_mcp.settings import load_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Relay Protocol MCP server.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport to expose. Use 'stdio' for desktop clients or 'http' for a hosted server.",
    )
    parser.add_argument("--host", default=None, help="Host/IP to bind when using HTTP transport.")
    parser.add_argument(
        "--port", type=int, default=None, help="Port to bind when using HTTP transport."
    )
    parser.add_argument("--base-url", default=None, help="Relay API base URL.")
    parser.add_argument(
        "--timeout-ms", type=int, default=None, help="Relay API request timeout in milliseconds."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for server logs (written to stderr).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    # stdout is reserved for the stdio transport.
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("relay_mcp")
    settings = load_settings(
        os.environ,
        base_url=args.base_url,
        timeout_ms=args.timeout_ms,
        host=args.host,
        port=args.port,
    )
    try:
        if args.transport == "stdio":
            logger.info("Starting MCP Server (transport=stdio, api=%s).", settings.base_url)
            run_stdio(settings)
        else:
            endpoint = f"http://{settings.host}:{settings.port}{HTTP_ENDPOINT}"
            logger.info("Starting MCP Server (transport=http, endpoint=%s).", endpoint)
            run_http(settings)
    except KeyboardInterrupt:  # pragma: no cover - manual interrupt
        logger.info("Received interruption, shutting down...")
    logger.info("Stopped MCP Server.")


if __name__ == "__main__":
    main()
