"""
Math layer for Whirlpool tick arrays

- tick_math: 틱 ↔ 틱 배열 인덱스 변환, 범위 검사, 풀레인지 계산
- tick_array_math: 단일 틱 배열 내부 조회/탐색
"""

from .tick_math import (
    get_offset_index,
    get_start_tick_index,
    get_initializable_tick_index,
    get_next_initializable_tick_index,
    get_prev_initializable_tick_index,
    check_tick_in_bounds,
    is_tick_initializable,
    invert_tick,
    get_full_range_tick_index,
    is_full_range,
    is_full_range_only,
)
from .tick_array_math import (
    get_tick_from_array,
    find_previous_initialized_tick_index,
    find_next_initialized_tick_index,
)
