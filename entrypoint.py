"""Run the dashboard API under uvicorn on 127.0.0.1:$BACKEND_PORT (default 8001)."""
import logging
import os

import uvicorn

# The app object is imported rather than passed as "module:app" so frozen
# bundles can still find the package.
from finance_app.config.logging_config import setup_logging
from finance_app.config.settings import get_settings
from finance_app.main import app

logger = logging.getLogger("finance_app.entrypoint")


def main() -> None:
    setup_logging()
    port = int(os.environ.get("BACKEND_PORT", "8001"))
    logger.info("Starting %s on port %d", get_settings().app_name, port)
    uvicorn.run(app, host="127.0.0.1", port=port, log_level=get_settings().log_level.lower())


if __name__ == "__main__":
    main()
