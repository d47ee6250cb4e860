"""Viewings 도메인 모델 정의"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.domains.clients.models import Client
    from app.domains.properties.models import Property


class ViewingStatus(str, Enum):
    """방문 상태"""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    NO_SHOW = "no-show"


class Viewing(Base):
    """매물 방문 예약 모델"""

    __tablename__ = "viewings"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="방문 예약 ID",
    )
    client_id: Mapped[int] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="고객 ID",
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="매물 ID",
    )
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="방문 일시",
    )
    status: Mapped[ViewingStatus] = mapped_column(
        String(20),
        nullable=False,
        default=ViewingStatus.SCHEDULED.value,
        server_default=ViewingStatus.SCHEDULED.value,
        comment="상태 (scheduled/completed/no-show)",
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="메모",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="등록 일시",
    )

    client: Mapped["Client"] = relationship(back_populates="viewings")
    property: Mapped["Property"] = relationship()

    def __repr__(self) -> str:
        return (
            f"<Viewing(id={self.id}, client_id={self.client_id}, "
            f"property_id={self.property_id}, status={self.status})>"
        )
