"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    EMISSION_POLICY: str = "batch"
    LOG_LEVEL: str = "INFO"


class Limits:
    """CSV 레코드 필드 범위"""

    MAX_CLIENT_ID: int = 2**16 - 1  # u16
    MAX_TX_ID: int = 2**32 - 1  # u32


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"

    # 설정 파일
    CONFIG_FILE: Path = CONFIG_DIR / "replay.yaml"


class CsvColumns:
    """CSV 컬럼 이름"""

    EVENT: tuple[str, ...] = ("type", "client", "tx", "amount")
    SNAPSHOT: tuple[str, ...] = ("client", "available", "held", "total", "locked")
