"""Application services root exports."""
from .name_validator import validate_summoner_name, is_valid_summoner_name
from .stats_extractor import extract_match_stats, split_duration, minions_per_minute
from .retry_policy import RateLimitRetryPolicy
from .fan_out import Backpressure, BoundedFanOut
from .match_stats_pipeline import MatchStatsPipeline

__all__ = [
    "validate_summoner_name",
    "is_valid_summoner_name",
    "extract_match_stats",
    "split_duration",
    "minions_per_minute",
    "RateLimitRetryPolicy",
    "Backpressure",
    "BoundedFanOut",
    "MatchStatsPipeline",
]
