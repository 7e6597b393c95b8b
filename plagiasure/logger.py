# logger.py
import logging

from plagiasure.config import LOG_FILE, LOG_LEVEL

handlers = [logging.StreamHandler()]
if LOG_FILE:
    handlers.append(logging.FileHandler(LOG_FILE))

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=handlers,
)

logger = logging.getLogger("plagiasure")
