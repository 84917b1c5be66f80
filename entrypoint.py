import uvicorn

from constants import HOST, LOG_FILE, LOG_LEVEL, PORT, RELOAD
from logging_config import setup_logging

# Setup logging before importing app
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)

from backend import require_credentials
from logging_config import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    # Fail before binding the port; the app lifespan checks again for `uvicorn app:app`
    require_credentials()
    logger.info(f"Starting room archive server on {HOST}:{PORT}")
    uvicorn.run("app:app", host=HOST, port=PORT, reload=RELOAD)
