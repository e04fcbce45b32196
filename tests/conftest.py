"""Shared test fixtures."""

from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from netitem.core.item.codec import Base64JsonCodec, ExtensionCodec
from netitem.core.item.models import GameItem, LiveItem
from netitem.db.models import Base


class FakeCodec(ExtensionCodec):
    """토큰 ↔ 아이템 사전으로 동작하는 테스트용 코덱. 호출 기록을 남긴다."""

    def __init__(self) -> None:
        self.items: dict[str, LiveItem] = {}
        self.encoded: list[LiveItem] = []
        self.decoded: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def encode(self, item: LiveItem) -> str:
        self.encoded.append(item)
        token = f"MOD{len(self.items)}=="
        self.items[token] = item
        return token

    def decode(self, token: str) -> Optional[LiveItem]:
        self.decoded.append(token)
        return self.items.get(token)


@pytest.fixture()
def fake_codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture()
def codec() -> Base64JsonCodec:
    return Base64JsonCodec()


@pytest.fixture()
def mod_item() -> GameItem:
    """확장 정의 아이템 샘플"""
    return GameItem(
        net_id=5000,
        stack=3,
        prefix=17,
        mod_name="CalamityMod",
        item_name="AuricBar",
        mod_data={"charge": 42, "owner": "p1"},
    )


@pytest.fixture()
def db_session() -> Session:
    """In-memory SQLite session with tables created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
