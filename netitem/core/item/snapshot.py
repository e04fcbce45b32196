"""인벤토리 스냅샷 — 플레이어 저장공간 전체를 MAX_INVENTORY개 레코드로 평탄화"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from netitem.core.item.codec import ExtensionCodec
from netitem.core.item.layout import MAX_INVENTORY, get_region, region_of
from netitem.core.item.models import LiveItem
from netitem.core.item.record import (
    EMPTY_RECORD,
    ItemFormatError,
    ItemRecord,
    convert_live_item,
    parse_item_record,
)
from netitem.core.logging import get_logger

logger = get_logger(__name__)

SLOT_SEPARATOR = "~"


@dataclass(frozen=True)
class SlotError:
    """복원 중 건너뛴 슬롯 정보."""

    index: int
    region: str
    text: str
    reason: str


class InventorySnapshot:
    """
    레코드 MAX_INVENTORY개의 불변 시퀀스.
    인덱스 i의 의미는 layout.REGIONS가 정한다.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[ItemRecord] = ()) -> None:
        items = tuple(records)
        if len(items) > MAX_INVENTORY:
            raise ValueError(
                f"Too many slots: {len(items)} > {MAX_INVENTORY}"
            )
        padding = (EMPTY_RECORD,) * (MAX_INVENTORY - len(items))
        self._records: tuple[ItemRecord, ...] = items + padding

    @classmethod
    def empty(cls) -> InventorySnapshot:
        return cls()

    @classmethod
    def capture(
        cls, items: Sequence[Optional[LiveItem]], codec: ExtensionCodec
    ) -> InventorySnapshot:
        """라이브 아이템 배열(None = 빈 슬롯) → 스냅샷."""
        return cls(convert_live_item(item, codec) for item in items)

    @property
    def records(self) -> tuple[ItemRecord, ...]:
        return self._records

    def region(self, name: str) -> tuple[ItemRecord, ...]:
        return self._records[get_region(name).slice]

    def non_empty_count(self) -> int:
        return sum(1 for r in self._records if not r.is_empty)

    def to_string(self) -> str:
        return SLOT_SEPARATOR.join(r.to_string() for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ItemRecord:
        return self._records[index]

    def __iter__(self) -> Iterator[ItemRecord]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventorySnapshot):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"InventorySnapshot(non_empty={self.non_empty_count()})"


def parse_inventory(
    text: str, codec: ExtensionCodec, strict: bool = False
) -> tuple[InventorySnapshot, list[SlotError]]:
    """'~' 로 이어진 슬롯 문자열 → 스냅샷.

    슬롯은 서로 독립적으로 파싱한다.
    strict=False: 깨진 슬롯은 빈 레코드로 두고 SlotError로 보고.
    strict=True:  첫 번째 깨진 슬롯에서 ItemFormatError.
    슬롯 수가 MAX_INVENTORY를 넘으면 strict 여부와 무관하게 ItemFormatError.
    """
    parts = text.split(SLOT_SEPARATOR) if text else []
    if len(parts) > MAX_INVENTORY:
        raise ItemFormatError(
            f"Too many slots: {len(parts)} > {MAX_INVENTORY}"
        )

    records: list[ItemRecord] = []
    errors: list[SlotError] = []
    for index, part in enumerate(parts):
        try:
            records.append(parse_item_record(part, codec))
        except ItemFormatError as e:
            region = region_of(index).name
            if strict:
                raise ItemFormatError(
                    f"Slot {index} ({region}) is malformed: {e}"
                ) from e
            errors.append(SlotError(index=index, region=region, text=part, reason=str(e)))
            records.append(EMPTY_RECORD)

    logger.debug("Parsed %d slots (%d malformed)", len(parts), len(errors))
    return InventorySnapshot(records), errors
