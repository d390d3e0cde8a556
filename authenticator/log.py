"""
Author: Ian Young
Purpose: Shared logger so every module logs with the same format.
"""

import logging
from os import getenv

from dotenv import load_dotenv

load_dotenv()  # Import the log level, if any

log = logging.getLogger()
LOG_LEVEL = getattr(
    logging,
    (getenv("AUTHENTICATOR_LOG_LEVEL") or "WARNING").upper(),
    logging.WARNING,
)
log.setLevel(LOG_LEVEL)
logging.basicConfig(
    level=LOG_LEVEL,
    format="(%(asctime)s.%(msecs)03d) %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# Mute non-essential logging from requests library
logging.getLogger("requests").setLevel(logging.CRITICAL)
logging.getLogger("urllib3").setLevel(logging.CRITICAL)
