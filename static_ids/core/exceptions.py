# static_ids/core/exceptions.py

from typing import Optional, Sequence


class StaticIdsException(Exception):
    """Base class for custom exceptions in this library."""
    pass


class InvalidEncodingError(StaticIdsException, ValueError):
    """The literal is not valid base58 text."""

    def __init__(self, literal, reason: Optional[str] = None):
        self.literal = literal
        self.reason = reason
        message = f"failed to decode base58 string: {literal!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class WrongLengthError(StaticIdsException, ValueError):
    """The literal decoded cleanly but not to a 32-byte key."""

    def __init__(self, literal, length: int):
        self.literal = literal
        self.length = length
        super().__init__(f"pubkey array is not 32 bytes long: len={length} (literal {literal!r})")


class DerivationMismatchError(StaticIdsException):
    """The claimed PDA differs from the address the derivation produces."""

    def __init__(self, literal: str, computed):
        self.literal = literal
        self.computed = computed
        super().__init__(
            f"provided PDA does not match the computed PDA: claimed {literal}, computed {computed}"
        )


class DerivationExhaustedError(StaticIdsException):
    """No bump in 255..0 produced an off-curve address."""

    def __init__(self, program_id, seeds: Sequence[bytes]):
        self.program_id = program_id
        self.seeds = tuple(seeds)
        super().__init__(
            f"Unable to find a viable program address bump seed for program {program_id}, seeds {list(self.seeds)!r}"
        )


class MaxSeedLengthError(StaticIdsException):
    """A seed is longer than 32 bytes, or too many seeds were supplied."""

    def __init__(self, message: str, length: int):
        self.length = length
        super().__init__(message)


class InvalidSeedsError(StaticIdsException):
    """The seeds hash to a point on the curve, so they do not form a valid PDA."""
    pass
