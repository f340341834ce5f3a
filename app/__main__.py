"""Process entry point: `python -m app` serves on 0.0.0.0:8080."""
from __future__ import annotations

import uvicorn

from app.config import DEFAULT_HOST, DEFAULT_PORT, ConfigError
from app.logging_conf import get_logger, setup_logging
from app.main import create_app

logger = get_logger("app")


def main() -> None:
    setup_logging()
    try:
        app = create_app()
    except ConfigError as e:
        # Fatal: refuse to bind a socket without the admin secret.
        logger.critical("config.error", extra={"event": "config_error", "error": str(e)})
        raise SystemExit(1) from e

    # log_config=None keeps uvicorn on the JSON handlers configured above.
    uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT, log_config=None)


if __name__ == "__main__":
    main()
