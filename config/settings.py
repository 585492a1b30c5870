"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def attempts_budget(timeout: float, max_retries: int, backoff: float) -> float:
    """Worst-case time of one call: every attempt times out, plus the sleeps between them."""
    return timeout * (max_retries + 1) + sum(backoff ** attempt for attempt in range(max_retries))


class Settings:
    """
    Lookup settings, read once at import time from the environment
    (config/.env is loaded first when present).

    The API key only ever reaches the HTTP transport; nothing in the
    domain or application layers reads it.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Routing ────────────────────────────────────────────────────────────
    PLATFORM:  str = os.getenv('PLATFORM', 'na1').strip().lower()
    # Optional CORS/forwarding proxy prepended to every request URL.
    PROXY_URL: str = os.getenv('PROXY_URL', '')

    # ── Rate limits (per 1 second / per 2 minutes = Riot's actual windows) ──
    RATE_LIMIT_PER_1_SEC:           int = 18
    RATE_LIMIT_PER_2_MIN:           int = 90

    MATCH_RATE_LIMIT_PER_1_SEC:     int = 18
    MATCH_RATE_LIMIT_PER_2_MIN:     int = 90

    SUMMONER_RATE_LIMIT_PER_1_SEC:  int = 18
    SUMMONER_RATE_LIMIT_PER_2_MIN:  int = 85

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = _float('REQUEST_TIMEOUT', 10.0)
    MAX_RETRIES:     int   = _int('MAX_RETRIES', 2)
    RETRY_BACKOFF:   float = 2.0

    # ── Detail fan-out ─────────────────────────────────────────────────────
    MAX_CONCURRENT_REQUESTS: int = _int('MAX_CONCURRENT_REQUESTS', 5)
    MATCH_LIST_LIMIT:        int = _int('MATCH_LIST_LIMIT', 10)

    # 429 on a detail fetch: retried this many times in total, backing off
    # from RATE_LIMIT_BACKOFF_MS unless Retry-After says otherwise.
    RATE_LIMIT_MAX_ATTEMPTS: int = _int('RATE_LIMIT_MAX_ATTEMPTS', 3)
    RATE_LIMIT_BACKOFF_MS:   int = _int('RATE_LIMIT_BACKOFF_MS', 1000)

    # ── Paths / logging ────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def call_budget(cls) -> float:
        return attempts_budget(cls.REQUEST_TIMEOUT, cls.MAX_RETRIES, cls.RETRY_BACKOFF)

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")


settings = Settings()
