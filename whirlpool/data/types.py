"""
Whirlpool 데이터 타입 정의

온체인 TickArray 계정 구조를 Python dataclass로 정의.
모든 숫자 필드는 온체인 정밀도를 위해 int 타입 사용.
"""

from dataclasses import dataclass, field
from typing import Optional, List

from construct import ConstructError
from solders.pubkey import Pubkey

from ..constants import TICK_ARRAY_ACCOUNT_SIZE
from .layouts import TICK_ARRAY_LAYOUT, TICK_ARRAY_DISCRIMINATOR


@dataclass
class TickData:
    """Tick 상태

    - initialized: 이 틱을 경계로 하는 포지션이 있는지 여부
    - liquidityNet: 틱 크로싱 시 유동성 변화량 (ΔL)
    - liquidityGross: 해당 틱을 경계로 하는 총 유동성
    - feeGrowthOutsideA/B: 틱 외부 누적수수료
    - rewardGrowthsOutside: 리워드별 틱 외부 누적량
    """
    initialized: bool
    liquidity_net: int = 0
    liquidity_gross: int = 0
    fee_growth_outside_a: int = 0
    fee_growth_outside_b: int = 0
    reward_growths_outside: List[int] = field(default_factory=lambda: [0, 0, 0])

    @classmethod
    def from_parsed(cls, data) -> "TickData":
        return cls(
            initialized=bool(data.initialized),
            liquidity_net=int(data.liquidityNet),
            liquidity_gross=int(data.liquidityGross),
            fee_growth_outside_a=int(data.feeGrowthOutsideA),
            fee_growth_outside_b=int(data.feeGrowthOutsideB),
            reward_growths_outside=[int(r) for r in data.rewardGrowthsOutside],
        )


@dataclass
class TickArrayData:
    """TickArray 계정

    슬롯 k에는 글로벌 틱 start_tick_index + k * tick_spacing 의 상태가 저장됩니다.
    ticks의 None은 비어 있는 슬롯입니다.
    """
    start_tick_index: int
    ticks: List[Optional[TickData]]
    whirlpool: Optional[Pubkey] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "TickArrayData":
        """계정 데이터 디코딩

        Raises:
            ValueError: 크기나 discriminator가 TickArray 계정과 맞지 않는 경우
        """
        if len(data) != TICK_ARRAY_ACCOUNT_SIZE:
            raise ValueError(
                f"TickArray 계정 크기가 올바르지 않습니다: {len(data)} (기대값: {TICK_ARRAY_ACCOUNT_SIZE})"
            )
        try:
            parsed = TICK_ARRAY_LAYOUT.parse(data)
        except ConstructError as e:
            raise ValueError(f"TickArray 계정 디코딩 실패: {e}") from e

        if parsed.discriminator != TICK_ARRAY_DISCRIMINATOR:
            raise ValueError("TickArray 계정 discriminator가 일치하지 않습니다")

        return cls(
            start_tick_index=int(parsed.startTickIndex),
            ticks=[TickData.from_parsed(t) for t in parsed.ticks],
            whirlpool=Pubkey.from_bytes(parsed.whirlpool),
        )


@dataclass(frozen=True)
class PDA:
    """Program Derived Address"""
    public_key: Pubkey
    bump: int


@dataclass(frozen=True)
class UninitializedTickArray:
    """초기화가 필요한 틱 배열 (시작 인덱스 + 주소)"""
    start_index: int
    pda: PDA
