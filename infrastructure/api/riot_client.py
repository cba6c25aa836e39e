"""Riot Games API client."""
import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from domain.enums import Region
from domain.exceptions import RetriesExhaustedError, RiotAPIError
from .rate_limiter import ConcurrencyLimiter
from .retry import BackoffPolicy, retry_after_ms

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


class RiotAPIClient:
    """Asynchronous Riot API client with bounded concurrency and retries.

    One instance owns one httpx session and one ConcurrencyLimiter; share the
    instance (not a copy) between every coroutine that should count against
    the same in-flight budget.
    """

    def __init__(
        self,
        api_key: str,
        *,
        max_concurrency: Optional[int] = None,
        policy: Optional[BackoffPolicy] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        if not api_key:
            raise ValueError("Riot API key missing")
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.policy = policy or BackoffPolicy.from_settings()
        self.limiter = ConcurrencyLimiter(max_concurrency or settings.MAX_CONCURRENT_REQUESTS)
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport
        self._sleep = sleep

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _pause(self, wait_ms: float) -> None:
        await self._sleep(wait_ms / 1000.0)

    async def _make_request(self, url: str) -> Any:
        """GET ``url`` and return its JSON body.

        Raises:
            RiotAPIError: non-retryable status (4xx other than 429).
            RetriesExhaustedError: every attempt was throttled, 5xx or a network failure.
        """
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        async with self.limiter:
            backoff = float(self.policy.base_ms)
            last_status: Optional[int] = None
            last_error: Optional[httpx.TransportError] = None
            max_attempts = self.policy.max_attempts

            for attempt in range(1, max_attempts + 1):
                final = attempt == max_attempts
                try:
                    response = await self.session.get(url)
                except httpx.TransportError as exc:
                    # Covers connect errors and the per-attempt timeout
                    last_error = exc
                    last_status = None
                    logger.warning(f"Network error, retrying (attempt {attempt}/{max_attempts}): {exc!r}")
                    if not final:
                        await self._pause(self.policy.jittered(backoff))
                        backoff = self.policy.next_backoff(backoff)
                    continue

                code = response.status_code
                self.last_status_code = code
                last_status = code
                last_error = None

                if code == 200:
                    return response.json()

                if code == 429:
                    hinted = retry_after_ms(response.headers)
                    wait = hinted if hinted is not None else self.policy.jittered(backoff)
                    logger.warning(f"429 throttled, waiting {wait:.0f}ms (attempt {attempt}/{max_attempts})")
                    if not final:
                        await self._pause(wait)
                        backoff = self.policy.next_backoff(backoff)
                    continue

                if 500 <= code < 600:
                    logger.warning(f"Riot {code}, retrying (attempt {attempt}/{max_attempts})")
                    if not final:
                        await self._pause(self.policy.jittered(backoff))
                        backoff = self.policy.next_backoff(backoff)
                    continue

                if code == 401 or code == 403:
                    logger.error(f"{code} from Riot, check RIOT_API_KEY")
                raise RiotAPIError(code, _body_of(response), url=url)

            raise RetriesExhaustedError(max_attempts, last_status) from last_error

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, region: Region, game_name: str, tag_line: str) -> dict:
        name = quote(game_name, safe="")
        tag = quote(tag_line, safe="")
        url = (
            f"https://{region.account_route}.api.riotgames.com"
            f"/riot/account/v1/accounts/by-riot-id/{name}/{tag}"
        )
        return await self._make_request(url)

    # ── Summoner / League API ──────────────────────────────────────────

    async def get_summoner_by_puuid(self, region: Region, puuid: str) -> dict:
        url = f"https://{region.platform_route}.api.riotgames.com/lol/summoner/v4/summoners/by-puuid/{puuid}"
        return await self._make_request(url)

    async def get_league_entries_by_puuid(self, region: Region, puuid: str) -> List[dict]:
        url = f"https://{region.platform_route}.api.riotgames.com/lol/league/v4/entries/by-puuid/{puuid}"
        result = await self._make_request(url)
        return result if isinstance(result, list) else []

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids(self, region: Region, puuid: str, count: int) -> List[str]:
        count = min(max(int(count), 1), 100)
        url = (
            f"https://{region.regional_route}.api.riotgames.com"
            f"/lol/match/v5/matches/by-puuid/{puuid}/ids?type=ranked&start=0&count={count}"
        )
        result = await self._make_request(url)
        return result if isinstance(result, list) else []

    async def get_match(self, region: Region, match_id: str) -> dict:
        url = f"https://{region.regional_route}.api.riotgames.com/lol/match/v5/matches/{match_id}"
        return await self._make_request(url)


def _body_of(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
