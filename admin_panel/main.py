"""
Server entry point.

Runs the FastAPI application under uvicorn on the configured host/port.

Usage:
    python -m admin_panel.main

Dependencies: uvicorn, admin_panel.configs
System role: Process entry point
"""

import uvicorn

from admin_panel.configs import get_settings


def main() -> None:
    """Start uvicorn serving admin_panel.api.main:app."""
    settings = get_settings()
    uvicorn.run(
        "admin_panel.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
