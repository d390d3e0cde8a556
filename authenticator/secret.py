"""
Author: Ian Young
Purpose: Create new random secrets for TOTP enrollment.
"""

import secrets

from .base32 import DATA_ALPHABET
from .config import DEFAULT_SECRET_LENGTH, MAX_SECRET_LENGTH, MIN_SECRET_LENGTH
from .custom_exceptions import InvalidLength, NoSecureRandom
from .log import log


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Creates a new secret made of randomly chosen Base32 characters.

    Each random byte is masked down to its low five bits to pick one of
    the 32 data characters, so the secret has exactly `length` characters
    and no padding.

    Args:
        length (int): How many characters the secret should have. Must be
            between 16 and 128 (80 to 640 bits). Defaults to 16.

    Returns:
        str: The new secret.

    Raises:
        InvalidLength: If `length` is out of bounds.
        NoSecureRandom: If the operating system has no secure random
            source.
    """
    if length < MIN_SECRET_LENGTH or length > MAX_SECRET_LENGTH:
        log.error("Refusing to create a secret of length %s.", length)
        raise InvalidLength(length, MIN_SECRET_LENGTH, MAX_SECRET_LENGTH)

    try:
        random_bytes = secrets.token_bytes(length)
    except NotImplementedError as e:
        raise NoSecureRandom() from e

    log.debug("Created a secret of %i characters.", length)

    return "".join(DATA_ALPHABET[byte & 0x1F] for byte in random_bytes)
