"""
Author: Ian Young
Purpose: Check user submitted TOTP codes against a window of time steps.
"""

import hmac
from typing import Optional

from .config import CODE_LENGTH, DEFAULT_DISCREPANCY, MAX_TIME_STEP
from .custom_exceptions import DecodeError
from .log import log
from .totp import compute_code
from .totp import current_time_step as time_step_now


def timing_safe_equals(safe_string: str, user_string: str) -> bool:
    """
    Compares two strings in constant time.

    Only the length check returns early; the length of a code is public.
    Otherwise every byte of both strings is compared no matter where they
    first differ.

    Args:
        safe_string (str): The internal value to be checked.
        user_string (str): The user submitted value.

    Returns:
        bool: True if the two strings are identical.
    """
    if len(safe_string) != len(user_string):
        return False

    return hmac.compare_digest(
        safe_string.encode("utf-8", "surrogatepass"),
        user_string.encode("utf-8", "surrogatepass"),
    )


def verify_code(
    secret: str,
    code: str,
    discrepancy: int = DEFAULT_DISCREPANCY,
    current_time_step: Optional[int] = None,
) -> bool:
    """
    Checks if the code is correct. Codes from `discrepancy` * 30 seconds
    ago up to `discrepancy` * 30 seconds from now are accepted.

    A secret that can not be decoded counts as a wrong code so callers
    can not tell the two apart.

    Args:
        secret (str): The base32 encoded secret.
        code (str): The code submitted by the user.
        discrepancy (int): The allowed time drift in 30 second units.
            Defaults to 1.
        current_time_step (int, optional): The time step to verify around.
            Defaults to the current time step.

    Returns:
        bool: True if the code matches a step inside the window.
    """
    if not code or len(code) != CODE_LENGTH:
        log.debug("Rejected code with the wrong length.")
        return False

    if current_time_step is None:
        current_time_step = time_step_now()

    try:
        for offset in range(-discrepancy, discrepancy + 1):
            time_step = current_time_step + offset
            if time_step < 0 or time_step > MAX_TIME_STEP:
                continue
            calculated_code = compute_code(secret, time_step)
            if timing_safe_equals(calculated_code, code):
                log.debug("Code matched at offset %i.", offset)
                return True
    except DecodeError:
        log.warning("Stored secret could not be decoded.")
        return False

    log.debug("Code did not match any step in the window.")
    return False
