"""Run the relay with uvicorn: ``python -m app``."""

import logging

import uvicorn

from app.config import get_bind
from app.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    host, port = get_bind()
    logger.info("Server running at http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
