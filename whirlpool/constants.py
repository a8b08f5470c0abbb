"""
Whirlpool 상수 정의

틱 배열 인덱싱에 사용되는 프로토콜 상수들:
- TICK_ARRAY_SIZE: 틱 배열 하나에 들어가는 슬롯 수
- MIN_TICK_INDEX / MAX_TICK_INDEX: 틱 인덱스 하드 범위
- FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD: 풀레인지 전용 풀 기준 tick spacing
"""

from typing import Dict

# 틱 배열 상수
TICK_ARRAY_SIZE: int = 88

# 틱 범위 상수
MIN_TICK_INDEX: int = -443636
MAX_TICK_INDEX: int = 443636

# 이 값 이상의 tick spacing을 가진 풀은 풀레인지 포지션만 허용
FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD: int = 32768

# 메인넷 Whirlpool 프로그램 ID
ORCA_WHIRLPOOL_PROGRAM_ID: str = "whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc"

# PDA seed
TICK_ARRAY_SEED: bytes = b"tick_array"

# TickArray 계정 레이아웃 크기 (bytes)
ACCOUNT_DISCRIMINATOR_SIZE: int = 8
TICK_SIZE: int = 113
NUM_REWARDS: int = 3
TICK_ARRAY_ACCOUNT_SIZE: int = ACCOUNT_DISCRIMINATOR_SIZE + 4 + TICK_SIZE * TICK_ARRAY_SIZE + 32

# getMultipleAccounts 요청당 최대 계정 수
MAX_ACCOUNTS_PER_REQUEST: int = 100

# 클러스터별 RPC 엔드포인트
RPC_ENDPOINTS: Dict[str, str] = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "devnet": "https://api.devnet.solana.com",
    "testnet": "https://api.testnet.solana.com",
}
