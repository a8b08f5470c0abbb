"""
Data layer for Whirlpool tick arrays

TickArray 데이터 타입, PDA 도출, RPC fetcher, 틱 배열 시퀀스/미초기화 탐지
"""

from .types import TickData, TickArrayData, PDA, UninitializedTickArray
from .pda import AddressDeriver, get_tick_array_pda, to_pubkey, to_pubkeys
from .fetcher import (
    TickArrayFetcher,
    TickArrayFetchOptions,
    InMemoryTickArrayFetcher,
    RpcTickArrayFetcher,
    RpcFetcherError,
)
from .tick_arrays import (
    get_tick_array_pdas,
    get_uninitialized_arrays,
    get_uninitialized_arrays_string,
    get_uninitialized_arrays_pdas,
)
