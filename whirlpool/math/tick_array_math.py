"""
Tick Array Math - 단일 틱 배열 내부 탐색

하나의 TickArray 안에서 틱 조회 및 초기화된 틱 탐색.
배열 경계를 넘는 탐색은 하지 않습니다. 다음 배열이 필요하면
호출자가 get_tick_array_pdas()로 배열 순서를 구해 이어서 탐색해야 합니다.
"""

from typing import Optional

from ..data.types import TickArrayData, TickData
from .tick_math import tick_index_to_inner_index, inner_index_to_tick_index


def get_tick_from_array(tick_array: TickArrayData, tick_index: int, tick_spacing: int) -> TickData:
    """글로벌 틱 인덱스로 틱 배열의 슬롯 조회

    Args:
        tick_array: 틱 배열
        tick_index: 글로벌 틱 인덱스
        tick_spacing: 틱 간격

    Returns:
        TickData

    Raises:
        ValueError: 오프셋이 배열 범위를 벗어나거나 슬롯이 비어 있는 경우
    """
    real_index = tick_index_to_inner_index(tick_array.start_tick_index, tick_index, tick_spacing)
    # 음수 오프셋이 리스트 끝에서부터 인덱싱되지 않도록 직접 검사
    tick = tick_array.ticks[real_index] if 0 <= real_index < len(tick_array.ticks) else None
    if tick is None:
        raise ValueError(
            f"tick real_index가 범위를 벗어났습니다 - start: {tick_array.start_tick_index}, "
            f"index: {tick_index}, real_index: {real_index}"
        )
    return tick


def find_previous_initialized_tick_index(
    tick_array: TickArrayData,
    current_tick_index: int,
    tick_spacing: int
) -> Optional[int]:
    """같은 배열 안에서 이전(왼쪽) 초기화된 틱 인덱스

    현재 틱의 슬롯부터 포함해서 탐색합니다.

    Returns:
        초기화된 틱 인덱스 또는 None
    """
    return _find_initialized_tick(tick_array, current_tick_index, tick_spacing, step=-1)


def find_next_initialized_tick_index(
    tick_array: TickArrayData,
    current_tick_index: int,
    tick_spacing: int
) -> Optional[int]:
    """같은 배열 안에서 다음(오른쪽) 초기화된 틱 인덱스

    현재 틱의 슬롯은 제외하고 그 다음 슬롯부터 탐색합니다.

    Returns:
        초기화된 틱 인덱스 또는 None
    """
    return _find_initialized_tick(tick_array, current_tick_index, tick_spacing, step=1)


def _find_initialized_tick(
    tick_array: TickArrayData,
    current_tick_index: int,
    tick_spacing: int,
    step: int
) -> Optional[int]:
    current_inner_index = tick_index_to_inner_index(
        tick_array.start_tick_index, current_tick_index, tick_spacing
    )

    # 오른쪽 탐색은 현재 슬롯 다음부터, 왼쪽 탐색은 현재 슬롯부터
    inner_index = current_inner_index + step if step > 0 else current_inner_index
    while 0 <= inner_index < len(tick_array.ticks):
        tick = tick_array.ticks[inner_index]
        if tick is not None and tick.initialized:
            return inner_index_to_tick_index(tick_array.start_tick_index, inner_index, tick_spacing)
        inner_index += step

    return None
