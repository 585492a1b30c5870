"""Use case for looking up a summoner's recent match stats."""
from __future__ import annotations

import logging
from typing import Optional

from config import settings
from domain.entities import PipelineOutcome
from domain.enums import Region
from domain.interfaces import Transport
from infrastructure import HttpxTransport, MatchRepository, RiotAPIClient, SummonerRepository
from application.services.match_stats_pipeline import MatchStatsPipeline

logger = logging.getLogger(__name__)


class LookupSummonerUseCase:
    """
    Wires the Riot client, repositories and pipeline for one platform.

    Pass a ``transport`` to reuse an open one; otherwise an HttpxTransport
    is opened from settings for the duration of each ``execute`` call.
    """

    def __init__(
        self,
        region: Optional[Region] = None,
        transport: Optional[Transport] = None,
        pipeline_options: Optional[dict] = None,
    ):
        self.region            = region or Region.from_string(settings.PLATFORM)
        self._transport        = transport
        self._pipeline_options = pipeline_options or {}

    def build_pipeline(self, transport: Transport) -> MatchStatsPipeline:
        api_client = RiotAPIClient(transport, self.region)
        options = dict(self._pipeline_options)
        if isinstance(transport, HttpxTransport):
            options.setdefault("call_timeout", transport.call_budget)
        return MatchStatsPipeline(
            SummonerRepository(api_client),
            MatchRepository(api_client),
            **options,
        )

    async def execute(self, raw_name: str) -> PipelineOutcome:
        if self._transport is not None:
            return await self.build_pipeline(self._transport).run(raw_name)

        settings.validate()
        async with HttpxTransport(settings.RIOT_API_KEY, proxy_url=settings.PROXY_URL) as transport:
            logger.info(f"lookup on {self.region.friendly}")
            return await self.build_pipeline(transport).run(raw_name)
