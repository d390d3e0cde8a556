"""
Author: Ian Young
Purpose: Build otpauth URIs and QR-code links so a secret can be added to
an authenticator app.
"""

from typing import Optional
from urllib.parse import quote_plus

import requests

from .config import (
    GOOGLE_CHART_URL,
    QR_TIMEOUT,
    QRSERVER_URL,
    TOTP_ISSUER,
    QRParams,
)
from .custom_exceptions import QRCodeDownloadError
from .log import log


def provisioning_uri(
    secret: str,
    name: str = "name",
    issuer: Optional[str] = None,
    encode: bool = False,
) -> str:
    """
    Builds the otpauth URI understood by authenticator apps.

    Args:
        secret (str): The base32 encoded secret.
        name (str): The account name shown in the app.
        issuer (str, optional): The service name shown in the app. Defaults
            to the AUTHENTICATOR_ISSUER environment variable and is left
            out when neither is set.
        encode (bool): URL-encode the whole URI so it may be embedded in
            another URL.

    Returns:
        str: The otpauth URI.
    """
    issuer = issuer if issuer is not None else TOTP_ISSUER

    uri = f"otpauth://totp/{name}?secret={secret}"
    if issuer:
        uri += f"&issuer={issuer}"

    return quote_plus(uri) if encode else uri


def qr_code_request(
    secret: str,
    name: str = "name",
    issuer: Optional[str] = None,
    params: Optional[QRParams] = None,
) -> requests.PreparedRequest:
    """
    Prepares the GET request for a QR-code image of the otpauth URI.

    Args:
        secret (str): The base32 encoded secret.
        name (str): The account name shown in the app.
        issuer (str, optional): The service name shown in the app.
        params (QRParams, optional): Rendering options. Defaults to a
            200x200 image with error correction level M from the Google
            chart API.

    Returns:
        requests.PreparedRequest: The request for the image.
    """
    params = params or QRParams()
    uri = provisioning_uri(secret, name, issuer)

    if params.api == "qrserver":
        url = QRSERVER_URL
        query = {"data": uri, "size": params.size, "ecc": params.ecc}
    else:
        url = GOOGLE_CHART_URL
        query = {
            "chs": params.size,
            "chld": f"{params.ecc}|0",
            "cht": "qr",
            "chl": uri,
        }

    return requests.Request("GET", url, params=query).prepare()


def qr_code_url(
    secret: str,
    name: str = "name",
    issuer: Optional[str] = None,
    params: Optional[QRParams] = None,
) -> str:
    """
    Returns the URL of a QR-code image for the otpauth URI.

    See qr_code_request for the arguments.
    """
    return qr_code_request(secret, name, issuer, params).url


def download_qr_code(
    secret: str,
    name: str = "name",
    issuer: Optional[str] = None,
    params: Optional[QRParams] = None,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    Downloads the QR-code image for the otpauth URI.

    Args:
        secret (str): The base32 encoded secret.
        name (str): The account name shown in the app.
        issuer (str, optional): The service name shown in the app.
        params (QRParams, optional): Rendering options.
        session (requests.Session, optional): The session used for the
            request. A new one is opened and closed when not given.

    Returns:
        bytes: The image content.

    Raises:
        QRCodeDownloadError: If the image could not be retrieved.
    """
    request = qr_code_request(secret, name, issuer, params)
    qr_session = session or requests.Session()
    response = None

    try:
        log.debug("Requesting QR code.")
        response = qr_session.send(request, timeout=QR_TIMEOUT)
        response.raise_for_status()
        log.debug("QR code retrieved.")

        return response.content

    # Handle exceptions
    except requests.exceptions.RequestException as e:
        raise QRCodeDownloadError(e, response, "QR code") from e

    finally:
        if session is None:
            qr_session.close()
