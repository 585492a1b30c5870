"""Domain enumerations."""
from .region import Region
from .outcome_kind import OutcomeKind, FailureReason
from .pipeline_state import PipelineState

__all__ = [
    'Region',
    'OutcomeKind',
    'FailureReason',
    'PipelineState',
]
