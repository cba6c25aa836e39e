"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() == 'true'


class Settings:
    """
    ─── RIOT API BUDGET ───────────────────────────────────────────────────
    A personal key allows 20 req/s and 100 req/120s. One analysis job for
    100 matches costs ~103 calls, so the client keeps at most
    MAX_CONCURRENT_REQUESTS in flight and lets 429 + Retry-After do the rest.
    ──────────────────────────────────────────────────────────────────────
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '15'))
    MAX_ATTEMPTS:    int   = int(os.getenv('MAX_ATTEMPTS', '7'))
    BACKOFF_BASE_MS: int   = int(os.getenv('BACKOFF_BASE_MS', '500'))
    BACKOFF_CAP_MS:  int   = int(os.getenv('BACKOFF_CAP_MS', '16000'))

    # ── Concurrency ────────────────────────────────────────────────────────
    MAX_CONCURRENT_REQUESTS: int = int(os.getenv('MAX_CONCURRENT_REQUESTS', '5'))

    # ── Jobs ───────────────────────────────────────────────────────────────
    DEFAULT_MATCH_LIMIT: int = int(os.getenv('DEFAULT_MATCH_LIMIT', '50'))
    MAX_MATCH_LIMIT:     int = 100
    POLL_INTERVAL_S:     float = float(os.getenv('POLL_INTERVAL_S', '1.0'))

    # ── Storage ────────────────────────────────────────────────────────────
    # "sqlite" keeps jobs across runs, "memory" is per-process only
    DATA_BACKEND: str = os.getenv('DATA_BACKEND', 'sqlite').strip().lower()

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
    DB_DIR:   Path = DATA_DIR / 'db'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    # ── Insights ───────────────────────────────────────────────────────────
    ENABLE_INSIGHTS: bool = _flag('ENABLE_INSIGHTS')

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")
        if cls.DATA_BACKEND not in ('sqlite', 'memory'):
            raise ValueError(f"DATA_BACKEND must be 'sqlite' or 'memory', got '{cls.DATA_BACKEND}'")

    @classmethod
    def create_directories(cls) -> None:
        cls.DB_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
