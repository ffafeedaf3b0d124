'''
This file contains common security-related utilities, such as password hashing,
that are decoupled from other services to prevent circular imports.
'''
from typing import Optional
from passlib.context import CryptContext

from .exceptions import InvalidArgumentError, OperationFailedError
from .logger import log

# --- Password Hashing ---
class PasswordHasher:
    """
    Stateless bcrypt helper for passwords, PINs and other values that must be
    checked later but never recovered.

    A bcrypt record is 60 characters and carries everything needed to verify it:
    `$2b$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW`
     ^^ ^^ ^^^^^^^^^^^^^^^^^^^^^^ salt (22) + digest (31)
     |  cost
     algorithm tag
    """
    DEFAULT_COST = 12
    MIN_COST = 4
    MAX_COST = 31

    pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    @classmethod
    def get_hash(cls, value: str, cost: int = DEFAULT_COST) -> str:
        """
        Hashes `value` with a freshly generated salt at the given cost.
        Two calls with the same input never return the same record.
        """
        if value is None or not value.strip():
            raise InvalidArgumentError("The value to hash cannot be empty.")

        if cost < cls.MIN_COST or cost > cls.MAX_COST:
            raise InvalidArgumentError(
                f"Invalid bcrypt cost {cost}: must be between {cls.MIN_COST} and {cls.MAX_COST}. "
                f"Recommended: 10-15."
            )

        try:
            return cls.pwd_context.handler("bcrypt").using(rounds=cost).hash(value)
        except Exception as e:
            log.error(f"bcrypt hashing failed with cost {cost}: {e}")
            raise OperationFailedError(
                f"Failed to generate bcrypt hash with cost {cost}: {e}"
            ) from e

    @classmethod
    def verify(cls, value: str, existing_hash: str) -> bool:
        """
        Checks `value` against a stored record.
        A malformed record is reported exactly like a mismatch.
        """
        if value is None or not value.strip():
            raise InvalidArgumentError("The value to verify cannot be empty.")

        if existing_hash is None or not existing_hash.strip():
            raise InvalidArgumentError("The existing hash cannot be empty.")

        try:
            return cls.pwd_context.verify(value, existing_hash)
        except Exception as e:
            log.debug(f"Hash verification errored, treating as mismatch: {type(e).__name__}")
            return False

    @classmethod
    def needs_rehash(cls, existing_hash: Optional[str], desired_cost: int = DEFAULT_COST) -> bool:
        """
        Returns True when the stored record should be regenerated, i.e. its
        embedded cost is below `desired_cost`. Anything that can't be parsed
        also needs a rehash.
        """
        if existing_hash is None or not existing_hash.strip():
            return True

        # Format: $2a$12$... where 12 is the cost
        if len(existing_hash) >= 7 and existing_hash.startswith("$2"):
            cost_part = existing_hash[4:6]
            try:
                current_cost = int(cost_part)
            except ValueError:
                log.warning("Stored hash has a non-numeric cost field; flagging for rehash.")
                return True

            if current_cost < desired_cost:
                log.info(f"Stored hash cost {current_cost} is below {desired_cost}; rehash required.")
                return True
            return False

        log.warning("Stored hash is not a bcrypt record; flagging for rehash.")
        return True
