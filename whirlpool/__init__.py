"""
Whirlpool Tick Array Utilities

집중화된 유동성 AMM의 틱 배열(TickArray) 인덱싱 라이브러리.
틱 ↔ 배열 오프셋 변환, 배열 내 초기화된 틱 탐색, 스왑 경로의 틱 배열 주소 생성,
미초기화 틱 배열 탐지를 제공합니다.
"""

__version__ = "0.1.0"

from .constants import (
    TICK_ARRAY_SIZE,
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD,
    ORCA_WHIRLPOOL_PROGRAM_ID,
)
