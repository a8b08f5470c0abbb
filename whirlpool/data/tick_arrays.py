"""
Tick Arrays - 틱 배열 주소 시퀀스 및 미초기화 배열 탐지

스왑/포지션 트랜잭션을 만들기 전에 필요한 TickArray 계정들을 계산하고,
그 중 아직 초기화되지 않은(온체인에 없는) 배열을 찾습니다.

주소 도출(address_deriver)과 조회(fetcher)는 주입받습니다.
"""

import logging
from typing import List, Optional, Sequence

from solders.pubkey import Pubkey

from ..math.tick_math import get_start_tick_index
from .fetcher import TickArrayFetcher, TickArrayFetchOptions
from .pda import Address, AddressDeriver, get_tick_array_pda, to_pubkeys
from .types import PDA, TickArrayData, UninitializedTickArray

logger = logging.getLogger(__name__)


def get_tick_array_pdas(
    tick: int,
    tick_spacing: int,
    num_of_tick_arrays: int,
    program_id: Pubkey,
    whirlpool_address: Pubkey,
    a_to_b: bool,
    address_deriver: AddressDeriver = get_tick_array_pda
) -> List[PDA]:
    """스왑 방향으로 이어지는 틱 배열 PDA 시퀀스

    a_to_b 스왑은 가격이 내려가므로 틱 배열을 아래 방향(-1)으로,
    b_to_a 스왑은 위 방향(+1)으로 이어갑니다.

    Args:
        tick: 시퀀스 첫 번째 배열에 포함된 틱
        tick_spacing: 풀의 틱 간격
        num_of_tick_arrays: 생성할 배열 수
        program_id: Whirlpool 프로그램 ID
        whirlpool_address: Whirlpool 주소
        a_to_b: 스왑 방향
        address_deriver: 주소 도출 함수

    Returns:
        진행 순서대로 정렬된 PDA 목록

    Raises:
        ValueError: 시퀀스가 틱 범위를 벗어난 경우
    """
    direction = -1 if a_to_b else 1
    pdas = []
    for i in range(num_of_tick_arrays):
        start_tick = get_start_tick_index(tick, tick_spacing, i * direction)
        pdas.append(address_deriver(program_id, whirlpool_address, start_tick))
    return pdas


def get_uninitialized_arrays(tick_arrays: Sequence[Optional[TickArrayData]]) -> List[int]:
    """초기화되지 않은 틱 배열의 인덱스 목록

    Args:
        tick_arrays: fetcher.get_tick_arrays() 결과 (계정 없음 = None)

    Returns:
        None인 항목의 인덱스 목록 (모두 초기화되어 있으면 빈 리스트)
    """
    return [index for index, tick_array in enumerate(tick_arrays) if tick_array is None]


async def get_uninitialized_arrays_string(
    tick_array_addrs: Sequence[Address],
    fetcher: TickArrayFetcher,
    opts: Optional[TickArrayFetchOptions] = None
) -> Optional[str]:
    """초기화되지 않은 틱 배열 주소 문자열 (에러 메시지용)

    Args:
        tick_array_addrs: 확인할 틱 배열 주소 목록
        fetcher: TickArray fetcher
        opts: 조회/캐시 옵션

    Returns:
        ", "로 구분된 미초기화 배열 주소. 모두 초기화되어 있으면 None
    """
    ta_addrs = to_pubkeys(tick_array_addrs)
    tick_array_data = await fetcher.get_tick_arrays(ta_addrs, opts)

    uninitialized_indices = get_uninitialized_arrays(tick_array_data)
    if not uninitialized_indices:
        return None

    logger.debug("미초기화 틱 배열 %d개 / %d개", len(uninitialized_indices), len(ta_addrs))
    return ", ".join(str(ta_addrs[index]) for index in uninitialized_indices)


async def get_uninitialized_arrays_pdas(
    ticks: Sequence[int],
    program_id: Pubkey,
    whirlpool_address: Pubkey,
    tick_spacing: int,
    fetcher: TickArrayFetcher,
    opts: Optional[TickArrayFetchOptions] = None,
    address_deriver: AddressDeriver = get_tick_array_pda
) -> List[UninitializedTickArray]:
    """틱 목록에 필요한 틱 배열 중 초기화되지 않은 배열

    같은 배열에 속한 틱들은 한 번만 조회합니다 (처음 나온 순서 유지).

    Args:
        ticks: 포지션/스왑에 사용할 틱 목록
        program_id: Whirlpool 프로그램 ID
        whirlpool_address: Whirlpool 주소
        tick_spacing: 풀의 틱 간격
        fetcher: TickArray fetcher
        opts: 조회/캐시 옵션
        address_deriver: 주소 도출 함수

    Returns:
        초기화가 필요한 배열의 (시작 인덱스, PDA) 목록
    """
    start_ticks = [get_start_tick_index(tick, tick_spacing) for tick in ticks]
    unique_start_ticks = list(dict.fromkeys(start_ticks))
    tick_array_pdas = [
        address_deriver(program_id, whirlpool_address, start_tick)
        for start_tick in unique_start_ticks
    ]

    fetched_arrays = await fetcher.get_tick_arrays(
        [pda.public_key for pda in tick_array_pdas], opts
    )

    uninitialized_indices = get_uninitialized_arrays(fetched_arrays)
    if uninitialized_indices:
        logger.debug(
            "초기화 필요한 틱 배열 start index: %s",
            [unique_start_ticks[index] for index in uninitialized_indices]
        )
    return [
        UninitializedTickArray(start_index=unique_start_ticks[index], pda=tick_array_pdas[index])
        for index in uninitialized_indices
    ]
