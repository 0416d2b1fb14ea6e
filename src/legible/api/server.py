"""
ASGI Entry Point for the Legible API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads `.env` first so settings loaded afterwards see those values.

Usage
-----
Run via the module entry point:
    $ python -m legible.api.server

Or via uvicorn directly:
    $ uvicorn legible.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #

# Load .env BEFORE importing the application factory.
load_dotenv(dotenv_path=Path(".env"))

from legible.api.app import create_app  # noqa: E402
from legible.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    config = load_settings()
    uvicorn.run(
        "legible.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=config.is_dev,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
