"""
Author: Ian Young
Purpose: Encode and decode Base32 (RFC 4648) strings used for TOTP secrets.
"""

import base64
from typing import Union

from .config import ALLOWED_PADDING
from .custom_exceptions import DecodeError
from .log import log

# 32 data characters followed by the padding character
ALPHABET = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567=")
PADDING = ALPHABET[32]
DATA_ALPHABET = ALPHABET[:32]
LOOKUP = {char: value for value, char in enumerate(DATA_ALPHABET)}

CHUNK_CHARS = 8  # Characters per 40-bit block
CHUNK_BYTES = 5  # Bytes per 40-bit block
BITS_PER_CHAR = 5


def encode_base32(data: Union[bytes, str]) -> str:
    """
    Converts bytes to a padded Base32 string.

    Args:
        data (bytes | str): The bytes to encode. Strings are encoded as
            UTF-8 first.

    Returns:
        str: The Base32 representation, padded with `=` to a multiple of
            eight characters.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    return base64.b32encode(data).decode("utf-8")


def decode_base32(text: str) -> bytes:
    """
    Decodes a Base32 string into raw bytes.

    The number of `=` characters must be a valid padding length for an
    eight character block and they must all sit at the end of the string.
    Every block of eight characters produces five bytes; a short final
    block is filled with zero bits. Zero bytes are kept like any other.

    Args:
        text (str): The Base32 encoded string.

    Returns:
        bytes: The decoded bytes. An empty string decodes to b"".

    Raises:
        DecodeError: If the padding is malformed or a character is not
            part of the Base32 alphabet.
    """
    if not text:
        return b""

    padding = text.count(PADDING)
    if padding not in ALLOWED_PADDING:
        raise DecodeError(f"Invalid padding length: {padding}.")
    if padding and not text.endswith(PADDING * padding):
        raise DecodeError("Padding may only appear at the end of the string.")

    symbols = text[: len(text) - padding]
    log.debug("Decoding %i base32 characters.", len(symbols))

    decoded = bytearray()
    for start in range(0, len(symbols), CHUNK_CHARS):
        chunk = symbols[start : start + CHUNK_CHARS]
        block = 0
        for char in chunk:
            try:
                block = (block << BITS_PER_CHAR) | LOOKUP[char]
            except KeyError as e:
                raise DecodeError(f"Invalid base32 character: {char!r}.") from e

        # Fill the missing characters of a short block with zero bits
        block <<= BITS_PER_CHAR * (CHUNK_CHARS - len(chunk))
        decoded.extend(block.to_bytes(CHUNK_BYTES, "big"))

    return bytes(decoded)
