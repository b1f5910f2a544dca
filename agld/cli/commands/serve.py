"""Run the HTTP gateway."""

import os

import uvicorn

from agld.cli.console import get_console


def serve(
    host: str = "0.0.0.0",
    port: int | None = None,
    reload: bool = False,
) -> None:
    """Start the gateway in the foreground.

    uvicorn handles SIGINT/SIGTERM and drains in-flight requests before exit.

    Args:
        host: Host to bind to.
        port: Port to listen on. Defaults to $PORT, then 3000.
        reload: Restart on code changes (development only).
    """
    port = port or int(os.environ.get("PORT", "3000"))
    get_console().print(f"[dim]Serving on[/dim] http://{host}:{port}")
    uvicorn.run(
        "agld.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Keep the handlers installed by configure_logging
    )
