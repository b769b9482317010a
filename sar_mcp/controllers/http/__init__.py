"""
SAR MCP HTTP Server

FastAPI proxy for the mission console dashboard. Routes under /api forward
to the remote SAR API through the same tool dispatcher as the bridge.
"""

from typing import Optional

from fastapi import FastAPI, Request

from sar_mcp.configs import SERVER_VERSION, get_logger
from sar_mcp.controllers.http.api import router as api_router
from sar_mcp.utils.http_client import RemoteClient

logger = get_logger("http")


def create_app(client: Optional[RemoteClient] = None) -> FastAPI:
    """
    Create the proxy app.

    Args:
        client: Remote API client. When None the app still starts and every
                forwarded route answers 500 until a base URL is configured.
    """
    app = FastAPI(
        title="SAR Mission Console Proxy",
        description="Server-side proxy from the dashboard to the SAR REST API",
        version=SERVER_VERSION,
    )
    app.state.client = client
    app.include_router(api_router, prefix="/api", tags=["api"])

    @app.get("/health")
    def health(request: Request) -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "configured": request.app.state.client is not None}

    return app


def run_server(app: FastAPI, host: str = "0.0.0.0", port: int = 8080):
    """Run the FastAPI server."""
    import uvicorn

    logger.info(f"Starting HTTP proxy on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="warning")


__all__ = ["create_app", "run_server"]
