"""Run the API with uvicorn: ``python -m profile_service.server``."""
from __future__ import annotations

import uvicorn

from profile_service.infrastructure.config import Settings
from profile_service.main import create_app


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
