# static_ids/core/pda.py

import hashlib
from dataclasses import dataclass
from typing import Sequence, Union

from solders.pubkey import Pubkey

from static_ids.core.constants import MAX_BUMP, MAX_SEED_LEN, MAX_SEEDS, MIN_BUMP, PDA_MARKER
from static_ids.core.exceptions import (
    DerivationExhaustedError,
    DerivationMismatchError,
    InvalidSeedsError,
    MaxSeedLengthError,
)
from static_ids.core.pubkeys import decode_pubkey
from static_ids.utils.logger import get_logger

logger = get_logger(__name__)

Seed = Union[bytes, str]


@dataclass(frozen=True)
class DerivationResult:
    """A derived program address and the bump seed that produced it."""
    address: Pubkey
    bump: int

    def __iter__(self):
        # Allows `address, bump = derive_program_address(...)`
        yield self.address
        yield self.bump


def _seed_bytes(seed: Seed) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def _check_seeds(seeds: Sequence[bytes], max_seeds: int = MAX_SEEDS) -> None:
    if len(seeds) > max_seeds:
        raise MaxSeedLengthError(f"too many seeds: {len(seeds)} > {max_seeds}", len(seeds))
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise MaxSeedLengthError(
                f"seed is longer than {MAX_SEED_LEN} bytes: len={len(seed)}", len(seed)
            )


def _hash_candidate(seeds: Sequence[bytes], program_id: Pubkey) -> bytes:
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(bytes(program_id))
    hasher.update(PDA_MARKER)
    return hasher.digest()


def create_program_address(seeds: Sequence[Seed], program_id: Pubkey) -> Pubkey:
    """
    Hashes the seeds (bump included, as the last seed) with the program id.

    Raises InvalidSeedsError when the digest lies on the Ed25519 curve, since such
    an address could have a private key.
    """
    raw_seeds = [_seed_bytes(s) for s in seeds]
    _check_seeds(raw_seeds)
    candidate = Pubkey.from_bytes(_hash_candidate(raw_seeds, program_id))
    if candidate.is_on_curve():
        raise InvalidSeedsError(f"seeds hash to an on-curve point for program {program_id}")
    return candidate


def find_program_address(seeds: Sequence[Seed], program_id: Pubkey) -> DerivationResult:
    """
    Searches bumps from 255 down to 0 and returns the first off-curve address.

    The highest working bump is the canonical one.
    """
    raw_seeds = [_seed_bytes(s) for s in seeds]
    # The bump takes the last seed slot
    _check_seeds(raw_seeds, MAX_SEEDS - 1)

    for bump in range(MAX_BUMP, MIN_BUMP - 1, -1):
        digest = _hash_candidate([*raw_seeds, bytes([bump])], program_id)
        candidate = Pubkey.from_bytes(digest)
        if candidate.is_on_curve():
            continue
        logger.debug(f"Derived {candidate} for program {program_id} with bump {bump}")
        return DerivationResult(address=candidate, bump=bump)

    raise DerivationExhaustedError(program_id, raw_seeds)


def derive_program_address(program_id: Pubkey, seed: Seed) -> DerivationResult:
    """ Derives the canonical PDA and bump for a single seed. """
    return find_program_address([seed], program_id)


def validate_program_address(claimed: str, program_id: str, seed: str) -> DerivationResult:
    """
    Checks that a claimed PDA literal is the address derived from program_id and seed.

    Both literals go through decode_pubkey, so their encoding and length errors
    propagate unchanged. The returned address is the claimed literal's own key
    alongside the recomputed bump.

    Raises:
        DerivationMismatchError: the claimed address is not the derived one.
    """
    claimed_key = decode_pubkey(claimed)
    program_key = decode_pubkey(program_id)

    computed = derive_program_address(program_key, seed)
    if computed.address != claimed_key:
        logger.warning(
            f"PDA mismatch for program {program_id}, seed {seed!r}: "
            f"claimed {claimed}, computed {computed.address}"
        )
        raise DerivationMismatchError(claimed, computed.address)

    return DerivationResult(address=claimed_key, bump=computed.bump)
