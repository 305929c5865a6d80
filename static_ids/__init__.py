# static_ids/__init__.py
from .core import (
    DerivationResult,
    StaticId,
    StaticPda,
    create_program_address,
    declare_id,
    declare_pda,
    decode_pubkey,
    derive_program_address,
    encode_pubkey,
    find_program_address,
    is_pubkey_string,
    validate_program_address,
)
from .core.exceptions import (
    StaticIdsException,
    InvalidEncodingError,
    WrongLengthError,
    DerivationMismatchError,
    DerivationExhaustedError,
    MaxSeedLengthError,
    InvalidSeedsError,
)

__version__ = "0.1.0"

__all__ = [
    "DerivationResult",
    "StaticId",
    "StaticPda",
    "create_program_address",
    "declare_id",
    "declare_pda",
    "decode_pubkey",
    "derive_program_address",
    "encode_pubkey",
    "find_program_address",
    "is_pubkey_string",
    "validate_program_address",
    "StaticIdsException",
    "InvalidEncodingError",
    "WrongLengthError",
    "DerivationMismatchError",
    "DerivationExhaustedError",
    "MaxSeedLengthError",
    "InvalidSeedsError",
]
