"""Pipeline lifecycle states."""
from enum import Enum


class PipelineState(Enum):
    """Stages a lookup moves through.

    IDLE → VALIDATING → RESOLVING_ACCOUNT → LISTING_MATCHES → FETCHING_DETAILS
    → COMPLETED, with an exit to FAILED from every non-terminal stage.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING_ACCOUNT = "resolving_account"
    LISTING_MATCHES = "listing_matches"
    FETCHING_DETAILS = "fetching_details"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.COMPLETED, PipelineState.FAILED)
