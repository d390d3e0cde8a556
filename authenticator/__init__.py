"""Streamline imports"""

from .base32 import ALPHABET, decode_base32, encode_base32
from .config import QRParams
from .custom_exceptions import (
    AuthenticatorError,
    DecodeError,
    InvalidLength,
    NoSecureRandom,
    QRCodeDownloadError,
)
from .log import log
from .provisioning import download_qr_code, provisioning_uri, qr_code_url
from .secret import generate_secret
from .totp import compute_code, current_time_step
from .verify import timing_safe_equals, verify_code
