"""인벤토리 Service — 스냅샷 Core ↔ DB 연결

Service → Core, Service → DB 허용.
슬롯 하나가 깨졌을 때 복원 전체를 실패시킬지(strict) 건너뛸지는 여기서 정한다.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from netitem.config import settings
from netitem.core.item.codec import ExtensionCodec
from netitem.core.item.models import LiveItem
from netitem.core.item.snapshot import InventorySnapshot, parse_inventory
from netitem.core.logging import get_logger
from netitem.db.models import CharacterInventoryModel

logger = get_logger(__name__)


class InventoryService:
    """캐릭터 인벤토리 저장/복원"""

    def __init__(self, db: Session, codec: ExtensionCodec):
        self._db = db
        self._codec = codec

    def save(self, account_id: str, snapshot: InventorySnapshot) -> None:
        """스냅샷 저장. 이미 있으면 덮어쓴다."""
        text = snapshot.to_string()
        now = datetime.now(timezone.utc)

        orm = self._get_orm(account_id)
        if orm is None:
            orm = CharacterInventoryModel(
                account_id=account_id, inventory=text, updated_at=now
            )
            self._db.add(orm)
        else:
            orm.inventory = text
            orm.updated_at = now
        self._db.commit()

        logger.debug(
            "Saved inventory for %s (%d non-empty slots)",
            account_id,
            snapshot.non_empty_count(),
        )

    def capture(
        self, account_id: str, items: Sequence[Optional[LiveItem]]
    ) -> InventorySnapshot:
        """라이브 아이템 배열 → 스냅샷 → 저장."""
        snapshot = InventorySnapshot.capture(items, self._codec)
        self.save(account_id, snapshot)
        return snapshot

    def load(
        self, account_id: str, strict: Optional[bool] = None
    ) -> Optional[InventorySnapshot]:
        """저장된 스냅샷 복원. 저장된 게 없으면 None.

        strict 미지정 시 settings.STRICT_RESTORE 사용.
        strict=True면 깨진 슬롯에서 ItemFormatError가 그대로 올라간다.
        """
        orm = self._get_orm(account_id)
        if orm is None:
            return None

        if strict is None:
            strict = settings.STRICT_RESTORE

        snapshot, errors = parse_inventory(orm.inventory, self._codec, strict=strict)
        for err in errors:
            logger.warning(
                "Skipped malformed slot %d (%s) for %s: %s",
                err.index,
                err.region,
                account_id,
                err.reason,
            )
        logger.info(
            "Restored inventory for %s (%d skipped)", account_id, len(errors)
        )
        return snapshot

    def delete(self, account_id: str) -> bool:
        """저장된 스냅샷 삭제. 삭제했으면 True."""
        orm = self._get_orm(account_id)
        if orm is None:
            return False
        self._db.delete(orm)
        self._db.commit()
        return True

    def close(self) -> None:
        """세션 종료. bootstrap()으로 만든 서비스는 호출자가 닫는다."""
        self._db.close()

    def _get_orm(self, account_id: str) -> Optional[CharacterInventoryModel]:
        return (
            self._db.query(CharacterInventoryModel)
            .filter(CharacterInventoryModel.account_id == account_id)
            .first()
        )
