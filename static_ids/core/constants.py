# static_ids/core/constants.py

# Size of every public key, literal or derived.
PUBKEY_BYTES = 32

# Domain-separation marker appended after the program id when hashing PDA candidates.
PDA_MARKER = b"ProgramDerivedAddress"

# Seed limits shared with every verifier of the scheme.
MAX_SEED_LEN = 32
MAX_SEEDS = 16

# Bump search runs from MAX_BUMP down to MIN_BUMP inclusive.
MAX_BUMP = 255
MIN_BUMP = 0
