from __future__ import annotations

import asyncio
import shutil
from typing import List, Optional

from application.use_cases import LookupSummonerUseCase
from core.logging.logger import get_logger
from domain.entities import MatchStats, PerMatchFailure, PipelineOutcome
from domain.enums import OutcomeKind

_GREEN = "\033[92m"
_RED = "\033[91m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"

MESSAGES = {
    OutcomeKind.INVALID_INPUT: "Please inform a valid Summoner name!",
    OutcomeKind.ACCOUNT_NOT_FOUND: "This Summoner name could not be found...",
    OutcomeKind.NO_MATCHES: "This Summoner has not played matches yet",
    OutcomeKind.RATE_LIMITED: "Too many requests. Please try again later...",
    OutcomeKind.AUTH_REJECTED: "The Riot API Key was rejected, please update the API Key...",
    OutcomeKind.TRANSIENT_ERROR: "An error occurred while trying to retrieve your matches. Please try again later...",
}


def render_match(stats: MatchStats, *, color: bool = True) -> List[str]:
    verdict = "Victory" if stats.outcome else "Defeat"
    if color:
        verdict = f"{_GREEN if stats.outcome else _RED}{verdict}{_RESET}"
    return [
        f"{verdict}  Duration: {stats.duration_label}  K/D/A: {stats.kills} / {stats.deaths} / {stats.assists}",
        f"  Champion: {stats.champion_id}  Spells: {stats.spell_primary} | {stats.spell_secondary}"
        f"  Runes: {stats.rune_primary} | {stats.rune_secondary}",
        f"  Champ Level: {stats.champion_level}  Items: {', '.join(str(i) for i in stats.items)}",
        f"  Total Minions Killed: {stats.minions_killed}"
        f"  Minions Score Per Minute: {stats.minions_per_minute:.2f}",
    ]


def render_failure(failure: PerMatchFailure) -> List[str]:
    return [f"Match {failure.match_id}: could not be loaded ({failure.reason.value})"]


def render_outcome(outcome: PipelineOutcome, *, color: bool = True) -> List[str]:
    """Turn an outcome into the lines the CLI prints."""
    if outcome.kind is not OutcomeKind.SUCCESS:
        return [MESSAGES[outcome.kind]]
    lines: List[str] = []
    for result in outcome.matches:
        if isinstance(result, MatchStats):
            lines.extend(render_match(result, color=color))
        else:
            lines.extend(render_failure(result))
        lines.append("")
    return lines


class LookupCommand:
    """Prompts for a summoner name and prints their recent matches."""

    def __init__(self, use_case: Optional[LookupSummonerUseCase] = None) -> None:
        self._use_case = use_case or LookupSummonerUseCase()
        self._log = get_logger(__name__, service="lookup-cli")

    def _divider(self) -> str:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        return "─" * min(cols, 72)

    async def run(self, name: Optional[str] = None) -> int:
        if name is None:
            name = await asyncio.to_thread(input, f"  {_CYAN}Enter Summoner Name:{_RESET} ")
        print("...Loading", flush=True)
        self._log.info(lambda: f"lookup {name!r}")

        outcome = await self._use_case.execute(name)

        print(self._divider())
        print(f"League Stats: {outcome.summoner_name or name}")
        print(self._divider())
        for line in render_outcome(outcome):
            print(line)
        if outcome.failures:
            print(f"{_YELLOW}{len(outcome.failures)} match(es) could not be loaded.{_RESET}")
        return 1 if outcome.kind.is_failure else 0
