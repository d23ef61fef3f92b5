# logger.py

"""
Configure and expose the application logger for Notecards.

Logging is configured once, at import, so every module shares the same
timestamped format and the level chosen in settings.
"""

import logging

from utils.config import settings

# - Timestamp, logger name, level, then the message
logging.basicConfig(
    level=settings.log_level,
    format="[%(asctime)s] [%(name)s] %(levelname)s: %(message)s"
)

logger = logging.getLogger("notecards")
