# static_ids/core/declarations.py

from dataclasses import dataclass
from typing import Union

from solders.pubkey import Pubkey

from static_ids.core.pda import validate_program_address
from static_ids.core.pubkeys import decode_pubkey
from static_ids.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StaticId:
    """ A program id fixed at declaration time. """
    ID: Pubkey

    def id(self) -> Pubkey:
        """Returns the program ID"""
        return self.ID

    def check_id(self, key: Pubkey) -> bool:
        """Confirms that a given pubkey is equivalent to the program ID"""
        return key == self.ID


@dataclass(frozen=True)
class StaticPda(StaticId):
    """ A program derived address fixed at declaration time, with its bump seed. """
    BUMP: int


def declare_id(value: Union[str, Pubkey]) -> StaticId:
    """
    Declares a static program id.

    A string is treated as a base58 literal and must decode to 32 bytes; an
    existing Pubkey is taken as is.
    """
    if isinstance(value, Pubkey):
        return StaticId(ID=value)
    key = decode_pubkey(value)
    logger.debug(f"Declared static id {key}")
    return StaticId(ID=key)


def declare_pda(address: str, program_id: str, seed: str) -> StaticPda:
    """ Declares a static PDA after checking it against the derivation from program_id and seed. """
    result = validate_program_address(address, program_id, seed)
    logger.debug(f"Declared static PDA {result.address} (bump {result.bump})")
    return StaticPda(ID=result.address, BUMP=result.bump)
