"""
Secret hashing and verification - Argon2id.

Hashes are produced in the PHC string format, e.g.
``$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>``, with a fresh random
salt per call and fixed parameters.

Login Check
===========

    Start -> GuardCheck -> Reject (False)
                        -> Verify -> Match (True)
                                  -> NoMatch (False)

The guard refuses anything that does not carry the Argon2id prefix
(empty values, legacy plaintext, corrupted rows) before the PHC parser
ever sees it. Each call takes exactly one path; nothing is retried.
"""

from functools import cached_property

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

HASH_PREFIX = "$argon2id$"

# Bump the version whenever the parameters below change.
ARGON2_PARAMETERS_VERSION = 1
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST = 65536  # KiB
ARGON2_PARALLELISM = 4
ARGON2_HASH_LEN = 32
ARGON2_SALT_LEN = 16


class Argon2SecretHasher:
    """
    Implements SecretHasher protocol via argon2-cffi.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        """
        Initialize with the fixed Argon2id parameters.

        Args:
            hasher: Preconfigured argon2 PasswordHasher. Must produce
                Argon2id hashes; defaults to the versioned parameters.
        """
        self._hasher = hasher or PasswordHasher(
            time_cost=ARGON2_TIME_COST,
            memory_cost=ARGON2_MEMORY_COST,
            parallelism=ARGON2_PARALLELISM,
            hash_len=ARGON2_HASH_LEN,
            salt_len=ARGON2_SALT_LEN,
            type=Type.ID,
        )

    @cached_property
    def dummy_hash(self) -> str:
        """Hash compared against when no account exists, to keep login timing flat."""
        return self._hasher.hash("dummy_password_for_timing_safety")

    def hash(self, plaintext: str) -> str:
        """Hash a plaintext secret for storage."""
        return self._hasher.hash(plaintext)

    def is_well_formed(self, stored: object) -> bool:
        """Guard: True only for non-empty strings carrying the Argon2id prefix."""
        return isinstance(stored, str) and stored.startswith(HASH_PREFIX)

    def verify(self, stored: object, plaintext: str) -> bool:
        """
        Check a plaintext secret against a stored hash.

        Total function: malformed input, parse errors and mismatches
        all return False.
        """
        if not self.is_well_formed(stored):
            return False
        try:
            return self._hasher.verify(stored, plaintext)
        except (VerificationError, InvalidHashError, ValueError, TypeError):
            return False
