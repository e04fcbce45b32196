"""SQLAlchemy declarative base for all ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class CharacterInventoryModel(Base):
    """ORM model for a character's flattened inventory."""

    __tablename__ = "character_inventories"

    account_id: Mapped[str] = mapped_column(String, primary_key=True)
    # 슬롯 레코드 MAX_INVENTORY개를 '~' 로 이은 문자열
    inventory: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
