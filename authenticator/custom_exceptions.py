"""
Author: Ian Young
Purpose: Import into other files to use custom exceptions and save space.
"""

import requests
import colorama
from colorama import Fore, Style

from .config import MAX_SECRET_LENGTH, MIN_SECRET_LENGTH

colorama.init(autoreset=True)  # Initialize colorized output


class AuthenticatorError(Exception):
    """
    Base exception for every error raised by the authenticator package.

    :param message: A human-readable description of the exception.
    :type message: str
    """

    def __init__(self, message="Authenticator error."):
        self.message = message
        super().__init__(f"{Fore.RED}{self.message}{Style.RESET_ALL}")


class InvalidLength(AuthenticatorError, ValueError):
    """
    Exception raised when a secret is requested with a length outside of
    the allowed bounds.

    :param length: The length that was requested.
    :type length: int
    :param minimum: The smallest allowed length.
    :type minimum: int
    :param maximum: The largest allowed length.
    :type maximum: int
    """

    def __init__(
        self, length, minimum=MIN_SECRET_LENGTH, maximum=MAX_SECRET_LENGTH
    ):
        self.length = length
        super().__init__(
            f"Bad secret length {length}: must be between {minimum} and "
            f"{maximum}."
        )


class NoSecureRandom(AuthenticatorError):
    """
    Exception raised when the platform does not provide a source of
    cryptographically secure random bytes.
    """

    def __init__(self, message="No source of secure random."):
        super().__init__(message)


class DecodeError(AuthenticatorError, ValueError):
    """
    Exception raised when a Base32 string can not be decoded.

    :param message: A human-readable description of the exception.
    :type message: str
    """

    def __init__(self, message="Invalid base32 string."):
        super().__init__(message)


class QRCodeDownloadError(AuthenticatorError):
    """
    Exception handler for failures while downloading a QR-code image.

    :param exception: The requests exception to be handled.
    :type exception: requests.exceptions.RequestException
    :param response: The response object, if available.
    :type response: requests.Response
    :param service_name: The name of the QR-code service.
    :type service_name: str
    """

    def __init__(self, exception, response=None, service_name="QR service"):
        self.exception = exception
        self.response = response
        self.service_name = service_name
        super().__init__(self.describe())

    def describe(self) -> str:
        """Builds the message matching the type of request failure."""
        if isinstance(self.exception, requests.exceptions.Timeout):
            return "Connection timed out."
        if isinstance(self.exception, requests.exceptions.TooManyRedirects):
            return "Too many redirects. Aborting..."
        if isinstance(self.exception, requests.exceptions.HTTPError):
            if self.response is not None:
                return (
                    f"{self.service_name} returned with a non-200 code: "
                    f"{self.response.status_code}"
                )
            return "HTTP error occurred."
        if isinstance(self.exception, requests.exceptions.ConnectionError):
            return "Error connecting to the server."
        return f"{self.service_name} error: {self.exception}"
