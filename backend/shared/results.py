"""
Discriminated outcomes for best-effort store operations.

Some operations report a plain boolean to callers, which cannot tell
"nothing matched" apart from "the store was unreachable". Repositories
compute a StoreOutcome first and collapse it to a boolean only at the
caller-facing method, so the distinction stays observable in tests and logs.
"""

from enum import Enum


class StoreOutcome(str, Enum):
    """Result of a best-effort store operation."""

    APPLIED = "applied"                  # The write or lookup took effect
    NOT_FOUND = "not_found"              # No matching record
    DENIED = "denied"                    # Record exists but the caller does not own it
    TRANSIENT_ERROR = "transient_error"  # Store raised; nothing is known

    @property
    def succeeded(self) -> bool:
        """Collapse the outcome to the boolean callers see."""
        return self is StoreOutcome.APPLIED
