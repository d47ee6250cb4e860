"""Leads 도메인 모델 정의

매물 문의(리드) 모델입니다. 전환되면 고객과 방문 예약이 생성됩니다.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.domains.clients.models import Client
    from app.domains.properties.models import Property


class LeadStatus(str, Enum):
    """리드 상태"""

    NEW = "new"
    CONTACTED = "contacted"
    CONVERTED = "converted"
    ARCHIVED = "archived"


class Lead(Base):
    """매물 문의 모델"""

    __tablename__ = "leads"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="리드 ID",
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="이름",
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        comment="이메일",
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="전화번호",
    )
    message: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="문의 내용",
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="문의 매물 ID",
    )
    status: Mapped[LeadStatus] = mapped_column(
        String(20),
        nullable=False,
        default=LeadStatus.NEW.value,
        server_default=LeadStatus.NEW.value,
        index=True,
        comment="상태 (new/contacted/converted/archived)",
    )
    converted_to_client_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        comment="전환된 고객 ID",
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="접수 일시",
    )

    property: Mapped["Property"] = relationship()
    converted_to_client: Mapped[Optional["Client"]] = relationship()

    def __repr__(self) -> str:
        return (
            f"<Lead(id={self.id}, email={self.email}, "
            f"property_id={self.property_id}, status={self.status})>"
        )
