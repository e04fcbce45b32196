"""InventoryService 통합 테스트 (인메모리 SQLite)"""

import logging

import pytest

from netitem.core.item.layout import MAX_INVENTORY
from netitem.core.item.models import GameItem
from netitem.core.item.record import ItemFormatError, ItemRecord
from netitem.core.item.snapshot import InventorySnapshot
from netitem.db.models import CharacterInventoryModel
from netitem.services.inventory_service import InventoryService


@pytest.fixture()
def service(db_session, codec) -> InventoryService:
    return InventoryService(db_session, codec)


def _corrupt(db_session, account_id: str, index: int, text: str) -> None:
    orm = db_session.get(CharacterInventoryModel, account_id)
    parts = orm.inventory.split("~")
    parts[index] = text
    orm.inventory = "~".join(parts)
    db_session.commit()


class TestSaveLoad:
    def test_load_missing(self, service: InventoryService) -> None:
        assert service.load("nobody") is None

    def test_save_and_load(self, service: InventoryService) -> None:
        snapshot = InventorySnapshot([ItemRecord.from_scalars(5, 10, 0)])
        service.save("p1", snapshot)
        assert service.load("p1") == snapshot

    def test_save_overwrites(self, service: InventoryService, db_session) -> None:
        service.save("p1", InventorySnapshot([ItemRecord(5, 1, 0)]))
        service.save("p1", InventorySnapshot([ItemRecord(6, 1, 0)]))
        assert db_session.query(CharacterInventoryModel).count() == 1
        assert service.load("p1")[0].net_id == 6

    def test_stored_form(self, service: InventoryService, db_session) -> None:
        service.save("p1", InventorySnapshot.empty())
        orm = db_session.get(CharacterInventoryModel, "p1")
        assert orm.inventory.split("~") == ["0,0,0"] * MAX_INVENTORY
        assert orm.updated_at is not None

    def test_capture_extension_items(self, service: InventoryService, mod_item: GameItem) -> None:
        service.capture("p1", [GameItem(net_id=4, stack=1, prefix=0), mod_item])
        restored = service.load("p1")
        assert restored[0].net_id == 4
        assert restored[1].item == mod_item

    def test_delete(self, service: InventoryService) -> None:
        service.save("p1", InventorySnapshot.empty())
        assert service.delete("p1") is True
        assert service.delete("p1") is False
        assert service.load("p1") is None


class TestRestorePolicy:
    def test_skips_bad_slot(
        self, service: InventoryService, db_session, caplog: pytest.LogCaptureFixture
    ) -> None:
        service.save("p1", InventorySnapshot([ItemRecord(5, 1, 0), ItemRecord(6, 1, 0)]))
        _corrupt(db_session, "p1", 1, "6,??,0")

        with caplog.at_level(logging.WARNING):
            restored = service.load("p1", strict=False)

        assert restored[0].net_id == 5
        assert restored[1].is_empty
        assert "Skipped malformed slot 1" in caplog.text

    def test_strict_raises(self, service: InventoryService, db_session) -> None:
        service.save("p1", InventorySnapshot.empty())
        _corrupt(db_session, "p1", 179, "1,2,3,4")

        with pytest.raises(ItemFormatError, match="trash"):
            service.load("p1", strict=True)

    def test_strict_from_settings(
        self, service: InventoryService, db_session, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from netitem.config import settings

        monkeypatch.setattr(settings, "STRICT_RESTORE", True)
        service.save("p1", InventorySnapshot.empty())
        _corrupt(db_session, "p1", 0, "1,x,0")

        with pytest.raises(ItemFormatError):
            service.load("p1")

    def test_undecodable_payload_is_not_an_error(self, service: InventoryService, db_session) -> None:
        service.save("p1", InventorySnapshot.empty())
        _corrupt(db_session, "p1", 0, "%%%garbage%%%")

        restored = service.load("p1", strict=True)
        assert restored[0].is_empty


class TestClose:
    def test_close_releases_session(self, service: InventoryService, db_session) -> None:
        service.save("p1", InventorySnapshot.empty())
        service.close()
        # 닫힌 세션은 새 트랜잭션으로 다시 조회 가능
        assert service.load("p1") == InventorySnapshot.empty()
