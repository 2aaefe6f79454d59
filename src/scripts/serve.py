"""Launch the relay under uvicorn using HOST/PORT from the environment.

Usage: python -m src.scripts.serve
"""

from __future__ import annotations

import uvicorn

from src.config.logging import LOG_LEVEL
from src.runtime.settings import load_settings


def main() -> int:
    settings = load_settings()
    uvicorn.run(
        "src.server:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
