"""
테스트용 헬퍼

틱 배열 생성, 계정 바이트 생성, 결정적 주소 도출기.
"""

import hashlib
from typing import Iterable, List, Tuple

from solders.pubkey import Pubkey

from ..constants import TICK_ARRAY_SIZE
from ..data.layouts import TICK_ARRAY_LAYOUT, TICK_ARRAY_DISCRIMINATOR
from ..data.types import PDA, TickArrayData, TickData

PROGRAM_ID = Pubkey(bytes([1] * 32))
WHIRLPOOL_ADDRESS = Pubkey(bytes([2] * 32))


def make_tick_array(start_tick_index: int, initialized_offsets: Iterable[int] = ()) -> TickArrayData:
    offsets = set(initialized_offsets)
    ticks = [TickData(initialized=i in offsets) for i in range(TICK_ARRAY_SIZE)]
    return TickArrayData(start_tick_index=start_tick_index, ticks=ticks, whirlpool=WHIRLPOOL_ADDRESS)


def build_tick_array_bytes(
    start_tick_index: int,
    initialized_offsets: Iterable[int] = (),
    whirlpool: Pubkey = WHIRLPOOL_ADDRESS,
    liquidity_net: int = 0,
) -> bytes:
    offsets = set(initialized_offsets)
    ticks = [
        dict(
            initialized=i in offsets,
            liquidityNet=liquidity_net if i in offsets else 0,
            liquidityGross=abs(liquidity_net) if i in offsets else 0,
            feeGrowthOutsideA=0,
            feeGrowthOutsideB=0,
            rewardGrowthsOutside=[0, 0, 0],
        )
        for i in range(TICK_ARRAY_SIZE)
    ]
    return TICK_ARRAY_LAYOUT.build(dict(
        discriminator=TICK_ARRAY_DISCRIMINATOR,
        startTickIndex=start_tick_index,
        ticks=ticks,
        whirlpool=bytes(whirlpool),
    ))


def fake_address(start_tick_index: int) -> Pubkey:
    return Pubkey(hashlib.sha256(str(start_tick_index).encode()).digest())


class RecordingDeriver:
    """start_tick_index 해시로 주소를 만드는 결정적 도출기 (호출 기록)"""

    def __init__(self):
        self.calls: List[Tuple[Pubkey, Pubkey, int]] = []

    def __call__(self, program_id: Pubkey, whirlpool_address: Pubkey, start_tick_index: int) -> PDA:
        self.calls.append((program_id, whirlpool_address, start_tick_index))
        return PDA(public_key=fake_address(start_tick_index), bump=255)

    @property
    def start_indices(self) -> List[int]:
        return [call[2] for call in self.calls]
