"""
PDA 유틸리티

TickArray 계정 주소 도출. seeds = ["tick_array", whirlpool, str(start_tick_index)]
"""

from typing import Iterable, List, Protocol, Union

from solders.pubkey import Pubkey

from ..constants import TICK_ARRAY_SEED
from .types import PDA

Address = Union[Pubkey, str]


class AddressDeriver(Protocol):
    """TickArray 주소 도출 인터페이스 (결정적, 순수 함수)"""

    def __call__(self, program_id: Pubkey, whirlpool_address: Pubkey, start_tick_index: int) -> PDA:
        ...


def to_pubkey(address: Address) -> Pubkey:
    """Pubkey 또는 base58 문자열을 Pubkey로 변환"""
    if isinstance(address, Pubkey):
        return address
    return Pubkey.from_string(address)


def to_pubkeys(addresses: Iterable[Address]) -> List[Pubkey]:
    return [to_pubkey(a) for a in addresses]


def get_tick_array_pda(program_id: Pubkey, whirlpool_address: Pubkey, start_tick_index: int) -> PDA:
    """TickArray PDA 도출

    Args:
        program_id: Whirlpool 프로그램 ID
        whirlpool_address: Whirlpool(풀) 계정 주소
        start_tick_index: 틱 배열 시작 인덱스

    Returns:
        PDA (주소 + bump)
    """
    public_key, bump = Pubkey.find_program_address(
        [TICK_ARRAY_SEED, bytes(whirlpool_address), str(start_tick_index).encode("utf-8")],
        program_id,
    )
    return PDA(public_key=public_key, bump=bump)
