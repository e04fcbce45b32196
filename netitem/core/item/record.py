"""아이템 레코드 — 인벤토리 슬롯 하나의 직렬화 단위

두 가지 모양:
- SCALAR:  "<net_id>,<stack>,<prefix>"  (빈 슬롯은 "0,0,0")
- PAYLOAD: 확장 코덱이 만든 쉼표 없는 토큰 하나

와이어에는 태그가 없다. 파싱은 쉼표로 나눈 토큰 수와 첫 토큰의
숫자 여부로 모양을 판별한다 (parse_item_record 참조).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from netitem.core.item.codec import ExtensionCodec
from netitem.core.item.models import PREFIX_MAX, PREFIX_MIN, GameItem, LiveItem, check_prefix
from netitem.core.logging import get_logger

logger = get_logger(__name__)

SECTION_SEPARATOR = ","
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ItemFormatError(ValueError):
    """레코드 문자열 형식 오류 (섹션 수, 숫자 파싱)."""


class RecordKind(str, Enum):
    SCALAR = "scalar"
    PAYLOAD = "payload"


@dataclass(frozen=True)
class ItemRecord:
    """인벤토리 슬롯 하나. 불변.

    payload가 있으면 복원의 기준은 payload이고
    net_id / stack / prefix는 디코딩 결과의 사본일 뿐이다.
    """

    net_id: int = 0
    stack: int = 0
    prefix: int = 0
    payload: Optional[str] = None

    # 즉시 사용용으로 만들어 둔 라이브 아이템. 와이어 계약 밖.
    item: Optional[LiveItem] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        check_prefix(self.prefix)
        if self.payload is not None and (
            not self.payload or SECTION_SEPARATOR in self.payload
        ):
            raise ValueError("Payload must be a non-empty token without commas")

    @property
    def kind(self) -> RecordKind:
        return RecordKind.SCALAR if self.payload is None else RecordKind.PAYLOAD

    @property
    def is_empty(self) -> bool:
        return self.payload is None and self.net_id == 0

    @classmethod
    def from_scalars(
        cls,
        net_id: int,
        stack: int,
        prefix: int,
        item_factory: Callable[[], LiveItem] = GameItem,
    ) -> ItemRecord:
        """스칼라 세 개로 생성. net_id != 0이면 라이브 아이템도 같이 만든다.

        순서: 엔진 기본값 → prefix → stack.
        """
        item: Optional[LiveItem] = None
        if net_id != 0:
            item = item_factory()
            item.set_defaults(net_id)
            item.apply_prefix(prefix)
            item.stack = stack
        return cls(net_id=net_id, stack=stack, prefix=prefix, item=item)

    @classmethod
    def from_live_item(cls, item: LiveItem) -> ItemRecord:
        """라이브 아이템의 현재 필드를 그대로 읽는다. payload는 채우지 않음."""
        return cls(net_id=item.net_id, stack=item.stack, prefix=item.prefix, item=item)

    def to_string(self) -> str:
        if self.payload is not None:
            return self.payload
        return f"{self.net_id},{self.stack},{self.prefix}"

    def __str__(self) -> str:
        return self.to_string()


EMPTY_RECORD = ItemRecord()


def convert_live_item(
    item: Optional[LiveItem], codec: ExtensionCodec
) -> ItemRecord:
    """출처를 모르는 라이브 아이템 → 레코드.

    None → 빈 레코드 / 기본 아이템 → 스칼라 / 확장 아이템 → 코덱 payload.
    """
    if item is None:
        return EMPTY_RECORD
    if not item.is_extension:
        return ItemRecord.from_live_item(item)

    token = codec.encode(item)
    return ItemRecord(
        net_id=item.net_id,
        stack=item.stack,
        prefix=item.prefix,
        payload=token,
        item=item,
    )


def _decode_payload(token: str, codec: ExtensionCodec) -> ItemRecord:
    if not token.strip():
        logger.warning("Empty item payload token")
        return EMPTY_RECORD
    item = codec.decode(token)
    if item is None:
        # 실패 로그는 코덱 쪽에서 남긴다
        return EMPTY_RECORD
    try:
        return ItemRecord(
            net_id=item.net_id,
            stack=item.stack,
            prefix=item.prefix,
            payload=token,
            item=item,
        )
    except ValueError as e:
        # 레코드로 표현 못 하는 디코딩 결과는 디코딩 실패와 같게 취급
        logger.warning("Unrepresentable decoded item: %s (%s)", token, e)
        return EMPTY_RECORD


def _parse_int(text: str) -> Optional[int]:
    """부호 + ASCII 숫자만 정수로 인정. "1_000", 비ASCII 숫자는 None."""
    if not _INT_PATTERN.fullmatch(text.strip()):
        return None
    return int(text)


def parse_item_record(text: Optional[str], codec: ExtensionCodec) -> ItemRecord:
    """레코드 문자열 파싱. 규칙은 위에서부터 순서대로 적용된다.

    1. 토큰 1개                      → payload 디코딩
    2. 토큰 3개, 첫 토큰이 정수 아님   → 첫 토큰을 payload로 디코딩 (나머지 무시)
    3. 토큰 3개, 첫 토큰이 정수       → 스칼라. stack/prefix 파싱 실패는 ItemFormatError
    4. 그 외 토큰 수                 → ItemFormatError

    Raises:
        TypeError: text가 None.
        ItemFormatError: 섹션 수 또는 숫자 형식 오류.
    """
    if text is None:
        raise TypeError("Item record string must not be None")

    sections = text.split(SECTION_SEPARATOR)

    if len(sections) == 1 and sections[0]:
        return _decode_payload(sections[0], codec)

    if len(sections) != 3:
        raise ItemFormatError(
            f"Wrong number of sections: expected 1 or 3, got {len(sections) if text else 0}"
        )

    net_id = _parse_int(sections[0])
    if net_id is None:
        return _decode_payload(sections[0], codec)

    stack = _parse_int(sections[1])
    if stack is None:
        raise ItemFormatError(f"Invalid stack: {sections[1]!r}")

    prefix = _parse_int(sections[2])
    if prefix is None or not PREFIX_MIN <= prefix <= PREFIX_MAX:
        raise ItemFormatError(f"Invalid prefix: {sections[2]!r}")

    return ItemRecord.from_scalars(net_id, stack, prefix)
