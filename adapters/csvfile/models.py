"""
CSV 레코드 스키마 (Pydantic)

입력 레코드 검증 후 도메인 이벤트로 변환
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.constants import Limits
from core.domain.events import TransactionEvent
from core.types import TransactionType


class TransactionRecord(BaseModel):
    """거래 레코드 (type, client, tx, amount)

    금액은 문자열에서 바로 Decimal로 파싱 (float 경유 없음).
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    type: TransactionType = Field(..., description="거래 유형")
    client: int = Field(..., ge=0, le=Limits.MAX_CLIENT_ID, description="계좌 ID (u16)")
    tx: int = Field(..., ge=0, le=Limits.MAX_TX_ID, description="거래 ID (u32)")
    amount: Decimal | None = Field(default=None, description="거래 금액 (입금/출금만)")

    @field_validator("amount", mode="before")
    @classmethod
    def _blank_amount(cls, value: Any) -> Any:
        if isinstance(value, float):
            raise ValueError("amount must be given as text, not float")
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("amount")
    @classmethod
    def _non_negative_amount(cls, value: Decimal | None) -> Decimal | None:
        if value is None:
            return None
        if not value.is_finite():
            raise ValueError("amount must be a finite decimal")
        if value < 0:
            raise ValueError("amount must not be negative")
        return value

    def to_event(self) -> TransactionEvent:
        """도메인 이벤트로 변환

        분쟁/해소/지불거절 레코드의 amount는 버림 (원거래 금액 사용).
        """
        return TransactionEvent(
            account_id=self.client,
            tx_id=self.tx,
            kind=self.type,
            amount=self.amount if self.type.moves_funds else None,
        )


def describe_validation_error(error: ValidationError) -> str:
    """ValidationError를 한 줄 사유로 요약"""
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail.get("loc", ()))
        parts.append(f"{location}: {detail.get('msg')}" if location else str(detail.get("msg")))
    return "; ".join(parts)
