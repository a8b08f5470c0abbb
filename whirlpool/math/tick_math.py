"""
Tick Math - 틱 ↔ 틱 배열 인덱스 변환

Whirlpool 틱 저장 구조의 인덱스 계산 함수들.
틱은 TICK_ARRAY_SIZE 개씩 묶여 하나의 TickArray 계정에 저장됩니다.

핵심 공식:
    ticks_in_array = tick_spacing * TICK_ARRAY_SIZE
    start_tick_index = floor(tick / ticks_in_array) * ticks_in_array
    offset = floor((tick - start_tick_index) / tick_spacing)
"""

from typing import Tuple

from ..constants import (
    TICK_ARRAY_SIZE,
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD,
)


def get_offset_index(tick_index: int, array_start_index: int, tick_spacing: int) -> int:
    """틱 배열 내부의 오프셋 인덱스 계산

    범위 검사는 하지 않습니다. 호출자가 올바른 배열을 넘겨야 합니다.

    Args:
        tick_index: 접근하려는 틱 인덱스
        array_start_index: 틱이 속한 배열의 시작 틱 인덱스
        tick_spacing: 풀의 틱 간격

    Returns:
        배열 내부 슬롯 오프셋
    """
    return (tick_index - array_start_index) // tick_spacing


def get_start_tick_index(tick_index: int, tick_spacing: int, offset: int = 0) -> int:
    """틱을 포함하는 틱 배열의 시작 틱 인덱스 계산

    offset으로 인접한 배열의 시작 인덱스를 구할 수 있습니다.
    (offset=1 이면 바로 위 배열, offset=-1 이면 바로 아래 배열)

    Args:
        tick_index: 틱 인덱스
        tick_spacing: 틱 간격
        offset: 배열 단위 이동량

    Returns:
        시작 틱 인덱스

    Raises:
        ValueError: 결과가 틱 범위를 벗어난 경우
    """
    ticks_in_array = TICK_ARRAY_SIZE * tick_spacing
    real_index = tick_index // ticks_in_array
    start_tick_index = (real_index + offset) * ticks_in_array

    # MIN_TICK_INDEX를 배열 경계로 내림한 값까지 허용
    min_tick_index = MIN_TICK_INDEX - (MIN_TICK_INDEX % ticks_in_array)
    if start_tick_index < min_tick_index:
        raise ValueError(f"start_tick_index가 너무 작습니다: {start_tick_index} (최소: {min_tick_index})")
    if start_tick_index > MAX_TICK_INDEX:
        raise ValueError(f"start_tick_index가 너무 큽니다: {start_tick_index} (최대: {MAX_TICK_INDEX})")
    return start_tick_index


def get_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    """틱 간격 그리드 위의 가장 가까운 틱 (내림)

    tick_spacing 그리드 위에 있는 틱만 초기화할 수 있습니다.
    Python의 % 연산은 음수에서도 내림 방향이므로 항상 tick_index 이하를 반환합니다.
    """
    return tick_index - (tick_index % tick_spacing)


def get_next_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    return get_initializable_tick_index(tick_index, tick_spacing) + tick_spacing


def get_prev_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    return get_initializable_tick_index(tick_index, tick_spacing) - tick_spacing


def check_tick_in_bounds(tick: int) -> bool:
    """틱이 [MIN_TICK_INDEX, MAX_TICK_INDEX] 범위 안에 있는지 확인"""
    return MIN_TICK_INDEX <= tick <= MAX_TICK_INDEX


def is_tick_initializable(tick: int, tick_spacing: int) -> bool:
    return tick % tick_spacing == 0


def invert_tick(tick: int) -> int:
    """역가격에 해당하는 틱

    틱 i에서 Pb/Pa = 1.0001^i 이면
    역가격 Pa/Pb = 1 / 1.0001^i = 1.0001^-i
    """
    return -tick


def get_full_range_tick_index(tick_spacing: int) -> Tuple[int, int]:
    """초기화 가능한 최소/최대 틱 인덱스

    Args:
        tick_spacing: 풀의 틱 간격

    Returns:
        (최소 틱, 최대 틱) - 하드 범위 안에 들어가는 가장 넓은 그리드 구간
    """
    min_tick = -(-MIN_TICK_INDEX // tick_spacing) * tick_spacing
    max_tick = (MAX_TICK_INDEX // tick_spacing) * tick_spacing
    return min_tick, max_tick


def is_full_range(tick_spacing: int, tick_lower_index: int, tick_upper_index: int) -> bool:
    """틱 범위가 풀레인지인지 확인

    Args:
        tick_spacing: 풀의 틱 간격
        tick_lower_index: 하한 틱
        tick_upper_index: 상한 틱

    Returns:
        풀레인지이면 True
    """
    min_tick, max_tick = get_full_range_tick_index(tick_spacing)
    return tick_lower_index == min_tick and tick_upper_index == max_tick


def is_full_range_only(tick_spacing: int) -> bool:
    """풀레인지 포지션만 허용하는 풀인지 확인"""
    return tick_spacing >= FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD


def tick_index_to_inner_index(start_tick_index: int, tick_index: int, tick_spacing: int) -> int:
    """글로벌 틱 인덱스 → 배열 내부 슬롯 오프셋"""
    return get_offset_index(tick_index, start_tick_index, tick_spacing)


def inner_index_to_tick_index(start_tick_index: int, inner_index: int, tick_spacing: int) -> int:
    """배열 내부 슬롯 오프셋 → 글로벌 틱 인덱스"""
    return start_tick_index + inner_index * tick_spacing
