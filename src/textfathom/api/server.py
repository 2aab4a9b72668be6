"""
ASGI Entry Point for the textfathom API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` first so that the settings read
at import time see them.

Usage
-----
Run via the module entry point:
    $ python -m textfathom.api.server

Or via uvicorn directly:
    $ uvicorn textfathom.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from textfathom.api.app import create_app  # noqa: E402
from textfathom.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    settings = load_settings()
    uvicorn.run(
        "textfathom.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_dev,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
