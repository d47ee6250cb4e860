"""Clients 도메인 모델 정의

방문 예약을 진행한 고객 모델입니다. 리드 전환 시 이메일 기준으로 재사용됩니다.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.domains.viewings.models import Viewing


class Client(Base):
    """고객 모델"""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="고객 ID",
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="이름",
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        index=True,
        comment="이메일",
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="전화번호",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="등록 일시",
    )

    viewings: Mapped[list["Viewing"]] = relationship(
        back_populates="client",
        order_by="Viewing.scheduled_at",
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, email={self.email})>"
