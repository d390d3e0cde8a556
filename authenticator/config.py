"""
Author: Ian Young
Purpose: Hold configuration settings and constants used across the project.
"""

from dataclasses import dataclass
from os import getenv
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()  # Import environment variables

# Issuer shown in authenticator apps, may be left unset
TOTP_ISSUER = getenv("AUTHENTICATOR_ISSUER")

# Code settings
CODE_LENGTH = 6
TIME_STEP_SECONDS = 30
MAX_TIME_STEP = 2**64 - 1  # Counter is packed as an unsigned 64-bit integer
DEFAULT_DISCREPANCY = 1

# Secret settings (80 to 640 bits of alphabet characters)
DEFAULT_SECRET_LENGTH = 16
MIN_SECRET_LENGTH = 16
MAX_SECRET_LENGTH = 128

# Valid counts of trailing `=` for 8-character Base32 blocks
ALLOWED_PADDING: Tuple[int, ...] = (6, 4, 3, 1, 0)

# QR-code rendering
QR_WIDTH = 200
QR_HEIGHT = 200
QR_LEVEL = "M"
QR_LEVELS: Tuple[str, ...] = ("L", "M", "Q", "H")
QR_TIMEOUT = 5
GOOGLE_CHART_URL = "https://chart.apis.google.com/chart"
QRSERVER_URL = "https://api.qrserver.com/v1/create-qr-code/"


@dataclass
class QRParams:
    """Represents the rendering options for a QR-code image.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        level: Error correction level, one of QR_LEVELS.
        api: Name of the chart service. "qrserver" selects
            api.qrserver.com, anything else the Google chart API.
    """

    width: int = QR_WIDTH
    height: int = QR_HEIGHT
    level: str = QR_LEVEL
    api: str = ""

    @property
    def size(self) -> str:
        """The size of the image formatted as `<width>x<height>`."""
        return f"{self.width}x{self.height}"

    @property
    def ecc(self) -> str:
        """The error correction level, falling back to QR_LEVEL."""
        return self.level if self.level in QR_LEVELS else QR_LEVEL
