from __future__ import annotations

import logging
import os

import uvicorn

_TRUTHY = {"1", "true", "yes", "y", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


if __name__ == "__main__":
    log_level = os.environ.get("LOG_LEVEL", "info").lower()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "backend.app:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        reload=_env_flag("RELOAD", False),
        log_level=log_level,
    )
