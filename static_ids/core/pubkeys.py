# static_ids/core/pubkeys.py

from typing import Union

import base58
from solders.pubkey import Pubkey

from static_ids.core.constants import PUBKEY_BYTES
from static_ids.core.exceptions import InvalidEncodingError, WrongLengthError
from static_ids.utils.logger import get_logger

logger = get_logger(__name__)


def decode_pubkey(text: str) -> Pubkey:
    """
    Decodes a base58 literal into a 32-byte public key.

    Raises:
        InvalidEncodingError: text is not a string of base58 alphabet characters.
        WrongLengthError: text decodes, but not to exactly 32 bytes.
    """
    if not isinstance(text, str):
        raise InvalidEncodingError(text, f"expected str, got {type(text).__name__}")
    # base58 silently strips trailing whitespace; a literal must not carry any
    if text != text.strip():
        raise InvalidEncodingError(text, "surrounding whitespace")

    try:
        raw: bytes = base58.b58decode(text)
    except ValueError as e:
        raise InvalidEncodingError(text, str(e)) from e

    if len(raw) != PUBKEY_BYTES:
        raise WrongLengthError(text, len(raw))

    key = Pubkey.from_bytes(raw)
    logger.debug(f"Decoded pubkey literal {text}")
    return key


def encode_pubkey(key: Union[Pubkey, bytes]) -> str:
    """ Base58 text of a key. Raw bytes must be exactly 32 long. """
    raw = bytes(key)
    if len(raw) != PUBKEY_BYTES:
        raise WrongLengthError(raw, len(raw))
    return base58.b58encode(raw).decode("ascii")


def is_pubkey_string(text: str) -> bool:
    try:
        decode_pubkey(text)
    except (InvalidEncodingError, WrongLengthError):
        return False
    return True
