import uvicorn
import logging
import os

from .main import app, LOG_LEVEL

logger = logging.getLogger(__name__)

HOST = os.getenv("MOVIES_HOST", "0.0.0.0")
PORT = int(os.getenv("MOVIES_PORT", "3000"))


def main():
    # uvicorn logs and exits non-zero when the port cannot be bound
    logger.info(f"Starting movie service on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
