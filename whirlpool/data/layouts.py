"""
TickArray 계정 바이너리 레이아웃

Anchor 계정 = 8바이트 discriminator + Borsh 직렬화 필드.
u128/i128 필드는 little-endian 16바이트 정수.
"""

import hashlib

from construct import Array, Bytes, BytesInteger, Flag, Int32sl
from construct import Struct as cStruct

from ..constants import TICK_ARRAY_SIZE, NUM_REWARDS, ACCOUNT_DISCRIMINATOR_SIZE

# sha256("account:TickArray")[:8]
TICK_ARRAY_DISCRIMINATOR: bytes = hashlib.sha256(b"account:TickArray").digest()[:ACCOUNT_DISCRIMINATOR_SIZE]

TICK_LAYOUT = cStruct(
    "initialized" / Flag,
    "liquidityNet" / BytesInteger(16, signed=True, swapped=True),
    "liquidityGross" / BytesInteger(16, signed=False, swapped=True),
    "feeGrowthOutsideA" / BytesInteger(16, signed=False, swapped=True),
    "feeGrowthOutsideB" / BytesInteger(16, signed=False, swapped=True),
    "rewardGrowthsOutside" / Array(NUM_REWARDS, BytesInteger(16, signed=False, swapped=True)),
)

TICK_ARRAY_LAYOUT = cStruct(
    "discriminator" / Bytes(ACCOUNT_DISCRIMINATOR_SIZE),
    "startTickIndex" / Int32sl,
    "ticks" / Array(TICK_ARRAY_SIZE, TICK_LAYOUT),
    "whirlpool" / Bytes(32),
)
