"""
Author: Ian Young
Purpose: Generates a TOTP code.

Returns:
    str: A 6-digit TOTP that changes every 30 seconds.
"""

import hashlib
import hmac
import struct
import time
from typing import Optional

from .base32 import decode_base32
from .config import CODE_LENGTH, MAX_TIME_STEP, TIME_STEP_SECONDS
from .log import log


def current_time_step(for_time: Optional[float] = None) -> int:
    """
    Returns the number of 30-second steps since the Unix epoch.

    Args:
        for_time (float, optional): A Unix timestamp. Defaults to the
            current time.

    Returns:
        int: The time step used as the HOTP counter.
    """
    if for_time is None:
        for_time = time.time()

    return int(for_time // TIME_STEP_SECONDS)


def truncate(digest: bytes) -> int:
    """
    Dynamic truncation from RFC 4226, section 5.3.

    Args:
        digest (bytes): A 20-byte HMAC-SHA1 digest.

    Returns:
        int: A 31-bit value taken from the digest.
    """
    # Use the last nibble of the digest as the offset
    offset = digest[-1] & 0x0F
    (value,) = struct.unpack(">I", digest[offset : offset + 4])

    return value & 0x7FFFFFFF


def compute_code(secret: str, time_step: Optional[int] = None) -> str:
    """Generates a TOTP from a given base32 secret

    Args:
        secret (str): A base32 encoded secret.
        time_step (int, optional): The time step to generate the code for.
            Defaults to the current time step.

    Returns:
        str: A 6-digit TOTP

    Raises:
        DecodeError: If the secret is not valid base32.
        ValueError: If the time step is negative or does not fit in a
            64-bit counter.
    """
    if time_step is None:
        time_step = current_time_step()
    if time_step < 0:
        raise ValueError("Time step must not be negative.")
    if time_step > MAX_TIME_STEP:
        raise ValueError("Time step does not fit in a 64-bit counter.")

    key = decode_base32(secret)
    # Pack the time step as an unsigned 64-bit big-endian counter
    counter = struct.pack(">Q", time_step)
    digest = hmac.new(key, counter, hashlib.sha1).digest()

    code = truncate(digest) % 10**CODE_LENGTH
    log.debug("Computed code for time step %i.", time_step)

    return str(code).zfill(CODE_LENGTH)
