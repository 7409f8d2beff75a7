"""
설정 로더

replay.yaml 로드 및 실행 설정 생성
"""

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from core.constants import Defaults, Paths
from core.logging import parse_log_level
from core.types import EmissionPolicy


@dataclass(frozen=True)
class ReplayConfig:
    """실행 설정 (replay.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    emission_policy: EmissionPolicy = EmissionPolicy(Defaults.EMISSION_POLICY)
    log_level: str = Defaults.LOG_LEVEL
    log_dir: Path | None = None

    def with_overrides(
        self,
        emission_policy: str | EmissionPolicy | None = None,
        log_level: str | None = None,
    ) -> "ReplayConfig":
        """CLI 인자로 일부 값을 덮어쓴 새 설정 반환

        Args:
            emission_policy: 스냅샷 출력 정책 (None이면 유지)
            log_level: 로그 레벨 (None이면 유지)

        Returns:
            새 ReplayConfig 인스턴스

        Raises:
            SettingsLoadError: 유효하지 않은 값
        """
        config = self
        if emission_policy is not None:
            config = replace(config, emission_policy=_parse_policy(emission_policy))
        if log_level is not None:
            config = replace(config, log_level=_parse_level(log_level))
        return config


class SettingsLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _parse_policy(value: str | EmissionPolicy) -> EmissionPolicy:
    try:
        return EmissionPolicy(value)
    except ValueError as e:
        valid = [p.value for p in EmissionPolicy]
        raise SettingsLoadError(
            f"유효하지 않은 emission_policy입니다: '{value}'. 유효한 값: {valid}"
        ) from e


def _parse_level(value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as e:
        raise SettingsLoadError(str(e)) from e
    return value.strip().upper()


def load_config(path: Path | None = None) -> ReplayConfig:
    """replay.yaml 파일 로드

    기본 경로의 파일이 없으면 기본값 사용.
    명시적으로 지정한 경로의 파일이 없으면 오류.

    Args:
        path: replay.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        ReplayConfig 인스턴스

    Raises:
        SettingsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    explicit = path is not None
    if path is None:
        path = Paths.CONFIG_FILE

    if not path.exists():
        if explicit:
            raise SettingsLoadError(f"설정 파일을 찾을 수 없습니다: {path}")
        return ReplayConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"설정 파일 파싱 실패: {e}") from e

    # 빈 파일은 기본값
    if data is None:
        return ReplayConfig()

    if not isinstance(data, dict):
        raise SettingsLoadError("설정 파일 최상위는 매핑이어야 합니다")

    pipeline_config = data.get("pipeline") or {}
    logging_config = data.get("logging") or {}

    policy = _parse_policy(
        pipeline_config.get("emission_policy", Defaults.EMISSION_POLICY)
    )
    level = _parse_level(str(logging_config.get("level", Defaults.LOG_LEVEL)))

    log_dir_value = logging_config.get("dir")
    log_dir: Path | None = None
    if log_dir_value:
        log_dir = Path(log_dir_value)
        # 상대 경로는 설정 파일 위치 기준
        if not log_dir.is_absolute():
            log_dir = path.parent / log_dir

    return ReplayConfig(
        emission_policy=policy,
        log_level=level,
        log_dir=log_dir,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    replay.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: ReplayConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_config(config_path)

    @property
    def config(self) -> ReplayConfig:
        """로드된 설정"""
        assert self._config is not None
        return self._config

    @property
    def emission_policy(self) -> EmissionPolicy:
        """스냅샷 출력 정책"""
        return self.config.emission_policy

    @property
    def log_level(self) -> str:
        """로그 레벨"""
        return self.config.log_level

    @property
    def log_dir(self) -> Path | None:
        """로그 디렉토리 (None이면 파일 로그 없음)"""
        return self.config.log_dir

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: replay.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
