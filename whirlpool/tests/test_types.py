"""
데이터 타입 / PDA 테스트

TickArray 계정 디코딩과 TickArray PDA 도출을 테스트합니다.
"""

import pytest
from solders.pubkey import Pubkey

from ..constants import ORCA_WHIRLPOOL_PROGRAM_ID, TICK_ARRAY_ACCOUNT_SIZE, TICK_ARRAY_SIZE
from ..data.pda import get_tick_array_pda, to_pubkey, to_pubkeys
from ..data.types import TickArrayData
from .fixtures import WHIRLPOOL_ADDRESS, build_tick_array_bytes


class TestTickArrayFromBytes:
    """TickArrayData.from_bytes 테스트"""

    def test_account_size(self):
        assert len(build_tick_array_bytes(0)) == TICK_ARRAY_ACCOUNT_SIZE

    def test_decode(self):
        data = build_tick_array_bytes(-5632, [3, 87], liquidity_net=-1000)
        tick_array = TickArrayData.from_bytes(data)

        assert tick_array.start_tick_index == -5632
        assert len(tick_array.ticks) == TICK_ARRAY_SIZE
        assert tick_array.whirlpool == WHIRLPOOL_ADDRESS
        assert [i for i, t in enumerate(tick_array.ticks) if t.initialized] == [3, 87]
        # i128은 부호 있는 값
        assert tick_array.ticks[3].liquidity_net == -1000
        assert tick_array.ticks[3].liquidity_gross == 1000
        assert tick_array.ticks[0].liquidity_net == 0
        assert tick_array.ticks[3].reward_growths_outside == [0, 0, 0]

    def test_wrong_size_raises(self):
        with pytest.raises(ValueError):
            TickArrayData.from_bytes(build_tick_array_bytes(0)[:-1])

    def test_wrong_discriminator_raises(self):
        data = b"\x00" * 8 + build_tick_array_bytes(0)[8:]
        with pytest.raises(ValueError):
            TickArrayData.from_bytes(data)


class TestTickArrayPda:
    """get_tick_array_pda 테스트"""

    def setup_method(self):
        self.program_id = Pubkey.from_string(ORCA_WHIRLPOOL_PROGRAM_ID)

    def test_matches_seeds(self):
        pda = get_tick_array_pda(self.program_id, WHIRLPOOL_ADDRESS, -5632)
        expected, bump = Pubkey.find_program_address(
            [b"tick_array", bytes(WHIRLPOOL_ADDRESS), b"-5632"], self.program_id
        )
        assert pda.public_key == expected
        assert pda.bump == bump

    def test_deterministic(self):
        assert get_tick_array_pda(self.program_id, WHIRLPOOL_ADDRESS, 0) == \
            get_tick_array_pda(self.program_id, WHIRLPOOL_ADDRESS, 0)

    def test_distinct_per_start_index(self):
        a = get_tick_array_pda(self.program_id, WHIRLPOOL_ADDRESS, 0)
        b = get_tick_array_pda(self.program_id, WHIRLPOOL_ADDRESS, 5632)
        assert a.public_key != b.public_key

    def test_to_pubkey(self):
        assert to_pubkey(WHIRLPOOL_ADDRESS) is WHIRLPOOL_ADDRESS
        assert to_pubkey(str(WHIRLPOOL_ADDRESS)) == WHIRLPOOL_ADDRESS
        assert to_pubkeys([str(WHIRLPOOL_ADDRESS), WHIRLPOOL_ADDRESS]) == [WHIRLPOOL_ADDRESS] * 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
