#!/usr/bin/env python3
"""
SAR MCP Entrypoint

Dispatches to the appropriate mode based on command line argument.

Modes:
  bridge       - Run the stdio JSON-RPC bridge for an MCP client (default)
  proxy        - Run the HTTP proxy API for the mission console dashboard
  init-config  - Write a default config.yaml to the data directory
"""

import sys


def main():
    mode = sys.argv[1] if len(sys.argv) > 1 else "bridge"

    if mode == "bridge":
        from sar_mcp.controllers.bridge import main as bridge_main
        bridge_main()

    elif mode == "proxy":
        from sar_mcp.configs import get_http_port, get_logger, load_endpoint_config, setup_logging
        from sar_mcp.controllers.http import create_app, run_server
        from sar_mcp.exceptions import ConfigurationError, MissingConfigError
        from sar_mcp.utils.http_client import RemoteClient

        setup_logging()
        logger = get_logger("entrypoint")

        client = None
        try:
            client = RemoteClient(load_endpoint_config())
        except MissingConfigError as e:
            # Dashboard behavior: start anyway, forwarded routes fail until configured
            logger.warning(f"{e.message} API routes will fail until it is configured.")
        except ConfigurationError as e:
            logger.error(str(e))
            sys.exit(1)

        try:
            port = get_http_port()
        except ConfigurationError as e:
            logger.error(str(e))
            sys.exit(1)

        run_server(create_app(client), host="0.0.0.0", port=port)

    elif mode == "init-config":
        from sar_mcp.configs import create_default_config
        print(create_default_config())

    else:
        print(f"Unknown mode: {mode}", file=sys.stderr)
        print("Usage: entrypoint.py [bridge|proxy|init-config]", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
