# static_ids/core/__init__.py

# Import directly available classes/functions via relative imports
from .pubkeys import decode_pubkey, encode_pubkey, is_pubkey_string
from .pda import (
    DerivationResult,
    create_program_address,
    derive_program_address,
    find_program_address,
    validate_program_address,
)
from .declarations import StaticId, StaticPda, declare_id, declare_pda

__all__ = [
    "decode_pubkey",
    "encode_pubkey",
    "is_pubkey_string",
    "DerivationResult",
    "create_program_address",
    "derive_program_address",
    "find_program_address",
    "validate_program_address",
    "StaticId",
    "StaticPda",
    "declare_id",
    "declare_pda",
]
