"""
Author: Ian Young
Purpose: Test the messages carried by the custom exceptions.
"""

import pytest

from authenticator import (
    AuthenticatorError,
    DecodeError,
    InvalidLength,
    NoSecureRandom,
    QRCodeDownloadError,
)
from authenticator.config import (
    MAX_SECRET_LENGTH,
    MIN_SECRET_LENGTH,
    QRParams,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (InvalidLength(8), "Bad secret length 8: must be between 16 and 128."),
        (NoSecureRandom(), "No source of secure random."),
        (DecodeError(), "Invalid base32 string."),
    ],
    ids=["invalid_length", "no_secure_random", "decode_error"],
)
def test_messages(error, message):
    """Test that the plain message is kept and shown in the error text."""
    assert isinstance(error, AuthenticatorError)
    assert error.message == message
    assert message in str(error)


def test_qr_download_error_unknown_failure():
    """Test the message for a failure with no specific handling."""
    error = QRCodeDownloadError(Exception("boom"), service_name="QR code")

    assert error.message == "QR code error: boom"


def test_qr_params_defaults():
    """Test the default QR-code rendering options."""
    params = QRParams()

    assert params.size == "200x200"
    assert params.ecc == "M"
    assert params.api == ""


def test_invalid_length_default_bounds():
    """Test that the default bounds come from the configuration."""
    error = InvalidLength(200)

    assert error.message == (
        f"Bad secret length 200: must be between {MIN_SECRET_LENGTH} and "
        f"{MAX_SECRET_LENGTH}."
    )
