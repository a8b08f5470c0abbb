"""
Check Whirlpool Tick Arrays

스왑 경로 또는 포지션 틱에 필요한 TickArray 계정을 계산하고,
아직 초기화되지 않은 배열을 출력합니다.

Usage:
    # 스왑 경로 (현재 틱부터 3개 배열, a_to_b 방향)
    python scripts/check_tick_arrays.py --pool <WHIRLPOOL> --tick-spacing 64 --tick -1200 --count 3 --a-to-b

    # 포지션 틱 (하한/상한)
    python scripts/check_tick_arrays.py --pool <WHIRLPOOL> --tick-spacing 64 --ticks -12800 12800
"""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from solders.pubkey import Pubkey

from whirlpool.config import settings
from whirlpool.logging_config import setup_logger
from whirlpool.data import (
    RpcTickArrayFetcher,
    TickArrayFetchOptions,
    get_tick_array_pdas,
    get_uninitialized_arrays_pdas,
    get_uninitialized_arrays_string,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Whirlpool TickArray 초기화 상태 확인")
    parser.add_argument("--pool", required=True, help="Whirlpool 주소 (base58)")
    parser.add_argument("--tick-spacing", type=int, required=True, help="풀의 틱 간격")
    parser.add_argument("--program-id", default=settings.PROGRAM_ID, help="Whirlpool 프로그램 ID")
    parser.add_argument("--rpc-url", default=settings.RPC_URL, help="Solana RPC URL")
    parser.add_argument("--ticks", type=int, nargs="+", help="포지션 틱 목록")
    parser.add_argument("--tick", type=int, help="스왑 시작 틱")
    parser.add_argument("--count", type=int, default=3, help="스왑 경로 배열 수")
    parser.add_argument("--a-to-b", action="store_true", help="a_to_b 스왑 (틱 감소 방향)")
    parser.add_argument("--no-cache", action="store_true", help="캐시 무시")
    parser.add_argument("--debug", action="store_true", help="디버그 로그 출력")
    args = parser.parse_args(argv)

    if args.ticks is None and args.tick is None:
        parser.error("--ticks 또는 --tick 중 하나가 필요합니다")
    if args.tick_spacing <= 0:
        parser.error("--tick-spacing은 양수여야 합니다")
    return args


async def check_tick_arrays(args) -> int:
    program_id = Pubkey.from_string(args.program_id)
    whirlpool_address = Pubkey.from_string(args.pool)
    opts = TickArrayFetchOptions(max_age=0) if args.no_cache else None

    async with RpcTickArrayFetcher.from_settings(rpc_url=args.rpc_url) as fetcher:
        if args.ticks is not None:
            missing = await get_uninitialized_arrays_pdas(
                args.ticks, program_id, whirlpool_address, args.tick_spacing, fetcher, opts
            )
            if not missing:
                print("✓ 모든 틱 배열이 초기화되어 있습니다")
                return 0
            print(f"✗ 초기화 필요한 틱 배열 {len(missing)}개:")
            for item in missing:
                print(f"  start_index={item.start_index:>8}  {item.pda.public_key}")
            return 1

        pdas = get_tick_array_pdas(
            args.tick, args.tick_spacing, args.count, program_id, whirlpool_address, args.a_to_b
        )
        print(f"스왑 경로 틱 배열 ({'a_to_b' if args.a_to_b else 'b_to_a'}):")
        for i, pda in enumerate(pdas):
            print(f"  [{i}] {pda.public_key}")

        missing_str = await get_uninitialized_arrays_string(
            [pda.public_key for pda in pdas], fetcher, opts
        )
        if missing_str:
            print(f"✗ 초기화되지 않은 틱 배열: {missing_str}")
            return 1
        print("✓ 모든 틱 배열이 초기화되어 있습니다")
        return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger("whirlpool", level="DEBUG" if args.debug else None)
    try:
        return asyncio.run(check_tick_arrays(args))
    except ValueError as e:
        print(f"✗ 입력 오류: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
