"""Outcome enumerations for a summoner lookup."""
from enum import Enum


class OutcomeKind(Enum):
    """Terminal result of one pipeline run.

    Every kind except SUCCESS and NO_MATCHES is an aborted run.
    """

    SUCCESS = "success"
    NO_MATCHES = "no_matches"
    INVALID_INPUT = "invalid_input"
    ACCOUNT_NOT_FOUND = "account_not_found"
    RATE_LIMITED = "rate_limited"
    AUTH_REJECTED = "auth_rejected"
    TRANSIENT_ERROR = "transient_error"

    @property
    def is_failure(self) -> bool:
        return self not in (OutcomeKind.SUCCESS, OutcomeKind.NO_MATCHES)


class FailureReason(Enum):
    """Why a single match in an otherwise successful run has no stats."""

    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    AUTH_REJECTED = "auth_rejected"
    TRANSIENT = "transient"
    UPSTREAM = "upstream"
    PARTICIPANT_NOT_FOUND = "participant_not_found"
    MALFORMED = "malformed"
