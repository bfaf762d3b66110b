"""
Common exception classes.
"""


class InvalidChallenge(Exception):
    """Challenge lies outside of the challenge space [0, 2^k)."""


class ProtocolStateError(Exception):
    """Protocol operation invoked out of sequence."""


class CommitmentError(Exception):
    """Value cannot be committed to under the given parameters."""


class StatementMismatch(Exception):
    """Proof statements mismatch, impossible to prove or verify."""


class GroupMismatchError(Exception):
    """Group elements come from different groups."""


class ValidationError(Exception):
    """Error during validation."""
