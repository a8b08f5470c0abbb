"""
Configuration settings

환경변수(.env 포함)에서 RPC 및 캐시 설정을 로드합니다.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import ORCA_WHIRLPOOL_PROGRAM_ID, RPC_ENDPOINTS

# Load environment variables from .env file
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


class Settings:
    """Application settings"""

    # Solana RPC
    RPC_URL: str = os.getenv("WHIRLPOOL_RPC_URL", RPC_ENDPOINTS["mainnet-beta"])
    RPC_COMMITMENT: str = os.getenv("WHIRLPOOL_RPC_COMMITMENT", "confirmed")
    RPC_TIMEOUT: float = float(os.getenv("RPC_TIMEOUT", 30))
    RPC_MAX_RETRIES: int = int(os.getenv("RPC_MAX_RETRIES", 3))
    RPC_RETRY_DELAY: float = float(os.getenv("RPC_RETRY_DELAY", 1.0))

    # Program
    PROGRAM_ID: str = os.getenv("WHIRLPOOL_PROGRAM_ID", ORCA_WHIRLPOOL_PROGRAM_ID)

    # Cache (seconds, unset = 캐시 만료 없음)
    TICK_ARRAY_CACHE_TTL: Optional[float] = _optional_float(os.getenv("TICK_ARRAY_CACHE_TTL", "5"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def rpc_url_for_cluster(self, cluster: Optional[str] = None) -> str:
        """Get RPC URL for a named cluster, falling back to RPC_URL"""
        if cluster is None:
            return self.RPC_URL
        if cluster not in RPC_ENDPOINTS:
            raise ValueError(
                f"지원하지 않는 클러스터: {cluster}. "
                f"지원 클러스터: {', '.join(RPC_ENDPOINTS.keys())}"
            )
        return RPC_ENDPOINTS[cluster]


# Create global settings instance
settings = Settings()
