"""
TickArray 계정 Fetcher

Solana JSON-RPC(getMultipleAccounts)로 TickArray 계정을 일괄 조회하는 클라이언트.
조회 결과는 입력 주소와 같은 순서, 같은 길이이며 계정이 없으면 None.
"""

import asyncio
import base64
import binascii
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

import httpx
from solders.pubkey import Pubkey

from ..constants import MAX_ACCOUNTS_PER_REQUEST
from .pda import Address
from .types import TickArrayData

logger = logging.getLogger(__name__)


@dataclass
class TickArrayFetchOptions:
    """조회/캐시 옵션

    max_age: 캐시 허용 나이(초). 0이면 캐시를 무시하고 항상 새로 조회,
             None이면 fetcher 기본값 사용.
    """
    max_age: Optional[float] = None


class TickArrayFetcher(Protocol):
    """TickArray 일괄 조회 인터페이스"""

    async def get_tick_arrays(
        self,
        addresses: Sequence[Pubkey],
        opts: Optional[TickArrayFetchOptions] = None
    ) -> List[Optional[TickArrayData]]:
        ...


class RpcFetcherError(Exception):
    """Solana RPC 오류"""
    pass


class InMemoryTickArrayFetcher:
    """메모리 기반 Fetcher (테스트/오프라인용)

    사용법:
        fetcher = InMemoryTickArrayFetcher({address: tick_array})
        arrays = await fetcher.get_tick_arrays([address, other])
    """

    def __init__(self, accounts: Optional[Dict[Address, TickArrayData]] = None):
        self._accounts: Dict[str, TickArrayData] = {}
        self.call_count = 0
        self.last_opts: Optional[TickArrayFetchOptions] = None
        for address, tick_array in (accounts or {}).items():
            self.set_tick_array(address, tick_array)

    def set_tick_array(self, address: Address, tick_array: TickArrayData) -> None:
        self._accounts[str(address)] = tick_array

    async def get_tick_arrays(
        self,
        addresses: Sequence[Pubkey],
        opts: Optional[TickArrayFetchOptions] = None
    ) -> List[Optional[TickArrayData]]:
        self.call_count += 1
        self.last_opts = opts
        return [self._accounts.get(str(address)) for address in addresses]


def _chunks(items: List[str], size: int) -> Iterable[List[str]]:
    for i in range(0, len(items), size):
        yield items[i:i + size]


class RpcTickArrayFetcher:
    """Solana RPC 기반 TickArray Fetcher

    디코딩된 결과를 주소별로 캐싱합니다 (계정 없음도 캐싱).

    사용법:
        async with RpcTickArrayFetcher(rpc_url="https://api.mainnet-beta.solana.com") as fetcher:
            arrays = await fetcher.get_tick_arrays([pda.public_key for pda in pdas])
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        cache_ttl: Optional[float] = 5.0,
        commitment: str = "confirmed",
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            rpc_url: Solana JSON-RPC 엔드포인트
            timeout: 요청 타임아웃 (초)
            max_retries: 최대 시도 횟수
            retry_delay: 재시도 간격 기준값 (초, 시도마다 선형 증가)
            cache_ttl: 기본 캐시 유효 시간 (초). None이면 만료 없음
            commitment: RPC commitment 레벨
            client: 외부에서 주입하는 httpx.AsyncClient
        """
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.cache_ttl = cache_ttl
        self.commitment = commitment
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._cache: Dict[str, Tuple[float, Optional[TickArrayData]]] = {}

    @classmethod
    def from_settings(cls, settings=None, **kwargs) -> "RpcTickArrayFetcher":
        """Settings 객체에서 Fetcher 생성"""
        if settings is None:
            from ..config import settings
        params = dict(
            rpc_url=settings.RPC_URL,
            timeout=settings.RPC_TIMEOUT,
            max_retries=settings.RPC_MAX_RETRIES,
            retry_delay=settings.RPC_RETRY_DELAY,
            cache_ttl=settings.TICK_ARRAY_CACHE_TTL,
            commitment=settings.RPC_COMMITMENT,
        )
        params.update(kwargs)
        return cls(**params)

    async def __aenter__(self) -> "RpcTickArrayFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def clear_cache(self) -> None:
        self._cache.clear()

    async def get_tick_arrays(
        self,
        addresses: Sequence[Pubkey],
        opts: Optional[TickArrayFetchOptions] = None
    ) -> List[Optional[TickArrayData]]:
        """TickArray 계정 일괄 조회

        Args:
            addresses: TickArray 계정 주소 목록
            opts: 조회/캐시 옵션

        Returns:
            입력과 같은 순서의 TickArrayData 또는 None 목록

        Raises:
            RpcFetcherError: RPC 오류 또는 디코딩 실패
        """
        max_age = self.cache_ttl
        if opts is not None and opts.max_age is not None:
            max_age = opts.max_age

        keys = [str(address) for address in addresses]
        now = time.monotonic()
        # 중복 주소는 한 번만 조회
        stale = [key for key in dict.fromkeys(keys) if not self._is_fresh(key, now, max_age)]

        for chunk in _chunks(stale, MAX_ACCOUNTS_PER_REQUEST):
            accounts = await self._get_multiple_accounts(chunk)
            fetched_at = time.monotonic()
            for key, account in zip(chunk, accounts):
                self._cache[key] = (fetched_at, self._decode_account(key, account))

        return [self._cache[key][1] for key in keys]

    def _is_fresh(self, key: str, now: float, max_age: Optional[float]) -> bool:
        entry = self._cache.get(key)
        if entry is None:
            return False
        if max_age is None:
            return True
        return max_age > 0 and now - entry[0] <= max_age

    async def _get_multiple_accounts(self, keys: List[str]) -> List[Optional[Dict[str, Any]]]:
        result = await self._execute_rpc(
            "getMultipleAccounts",
            [keys, {"encoding": "base64", "commitment": self.commitment}]
        )
        accounts = result.get("value") if isinstance(result, dict) else None
        if accounts is None or len(accounts) != len(keys):
            raise RpcFetcherError(
                f"getMultipleAccounts 응답 개수가 요청과 다릅니다: 요청 {len(keys)}개"
            )
        return accounts

    @staticmethod
    def _decode_account(key: str, account: Optional[Dict[str, Any]]) -> Optional[TickArrayData]:
        if account is None:
            return None
        try:
            encoded, encoding = account["data"]
            if encoding != "base64":
                raise ValueError(f"지원하지 않는 인코딩: {encoding}")
            return TickArrayData.from_bytes(base64.b64decode(encoded))
        except (KeyError, TypeError, ValueError, binascii.Error) as e:
            raise RpcFetcherError(f"TickArray 계정 디코딩 실패 ({key}): {e}") from e

    async def _execute_rpc(self, method: str, params: List[Any]) -> Any:
        """JSON-RPC 요청 실행

        네트워크 오류와 타임아웃만 재시도합니다. RPC가 돌려준 error는 바로 전달합니다.

        Raises:
            RpcFetcherError: RPC 오류 발생 시
        """
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}

        last_error: Optional[RpcFetcherError] = None
        for attempt in range(self.max_retries):
            try:
                response = await self._client.post(
                    self.rpc_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException:
                last_error = RpcFetcherError(f"요청 타임아웃 ({self.timeout}초)")
            except httpx.HTTPError as e:
                last_error = RpcFetcherError(f"네트워크 오류: {e}")
            except ValueError as e:
                last_error = RpcFetcherError(f"잘못된 JSON 응답: {e}")
            else:
                if "error" in data:
                    error = data["error"]
                    message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
                    raise RpcFetcherError(f"RPC 오류 ({method}): {message}")
                if "result" not in data:
                    raise RpcFetcherError("응답에 'result' 필드가 없습니다")
                return data["result"]

            if attempt < self.max_retries - 1:
                delay = self.retry_delay * (attempt + 1)
                logger.warning("%s 실패 (%d/%d): %s - %.1f초 후 재시도",
                               method, attempt + 1, self.max_retries, last_error, delay)
                await asyncio.sleep(delay)

        raise last_error
