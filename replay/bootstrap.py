"""
Replay Bootstrap

설정 로드, 로깅 초기화, 파이프라인 실행.

실행 방법:
    python -m replay transactions.csv > accounts.csv
    python -m replay transactions.csv --emission-policy per_event
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from adapters.csvfile import CsvEventSource, CsvSnapshotSink
from core.config.loader import SettingsLoadError, get_settings
from core.logging import parse_log_level, setup_logging
from core.types import EmissionPolicy
from replay.pipeline import run_pipeline

logger = logging.getLogger("replay")


def build_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="replay",
        description="거래 이벤트 CSV를 재생하여 계좌별 잔액 CSV를 stdout으로 출력",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="거래 이벤트 CSV 파일 (type,client,tx,amount)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="설정 파일 경로 (기본: config/replay.yaml, 없으면 기본값)",
    )
    parser.add_argument(
        "--emission-policy",
        choices=[policy.value for policy in EmissionPolicy],
        default=None,
        help="스냅샷 출력 정책 (설정 파일 값을 덮어씀)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="로그 레벨 (설정 파일 값을 덮어씀)",
    )
    return parser


async def main(argv: list[str] | None = None) -> int:
    """Replay 메인 함수

    Args:
        argv: CLI 인자 (None이면 sys.argv)

    Returns:
        종료 코드 (0: 정상, 1: 설정/입력 오류 또는 소스 실패)
    """
    args = build_parser().parse_args(argv)

    # 1. 설정 로드
    try:
        config = get_settings(args.config).config.with_overrides(
            emission_policy=args.emission_policy,
            log_level=args.log_level,
        )
    except SettingsLoadError as e:
        setup_logging("replay")
        logger.error(f"설정 로드 실패: {e}")
        return 1

    # 2. 로깅 초기화
    setup_logging(
        "replay",
        console_level=parse_log_level(config.log_level),
        log_dir=config.log_dir,
    )

    # 3. 입력 확인
    if not args.input.is_file():
        logger.error(f"입력 파일을 찾을 수 없습니다: {args.input}")
        return 1

    logger.info(
        f"Replay 시작: {args.input}",
        extra={"emission_policy": config.emission_policy.value},
    )

    # 4. 파이프라인 실행
    report = await run_pipeline(
        CsvEventSource(args.input),
        CsvSnapshotSink(),
        policy=config.emission_policy,
    )

    logger.info(
        f"Replay 완료: 수신 {report.events_received}건, 반영 {report.events_applied}건, "
        f"파싱 실패 {report.ingest_errors}건, 거부 {report.rejected_events}건",
        extra=report.to_dict(),
    )

    if report.source_failed:
        logger.error("이벤트 소스가 도중에 실패했습니다 (부분 결과 출력됨)")
        return 1

    return 0


def run() -> None:
    """콘솔 스크립트 진입점 (ledger-replay)"""
    sys.exit(asyncio.run(main()))
