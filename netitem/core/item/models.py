"""라이브 아이템 모델 — 엔진 아이템 객체의 최소 인터페이스"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

PREFIX_MIN = 0
PREFIX_MAX = 255


def check_prefix(prefix: int) -> int:
    """prefix는 unsigned byte. 범위 밖이면 ValueError."""
    if not PREFIX_MIN <= prefix <= PREFIX_MAX:
        raise ValueError(f"Prefix out of range 0-255: {prefix}")
    return prefix


class LiveItem(ABC):
    """엔진이 들고 있는 살아있는 아이템 객체.

    레코드 코덱은 net_id / stack / prefix 세 필드와
    is_extension 여부만 본다. 게임플레이 필드는 관심 밖.
    """

    net_id: int
    stack: int
    prefix: int

    @property
    @abstractmethod
    def is_extension(self) -> bool:
        """확장(모드) 정의 아이템 여부."""
        ...

    @abstractmethod
    def set_defaults(self, net_id: int) -> None:
        """net_id에 대한 엔진 기본값 적용."""
        ...

    @abstractmethod
    def apply_prefix(self, prefix: int) -> None:
        """prefix 적용."""
        ...


@dataclass
class GameItem(LiveItem):
    """프로세스 내에서 쓰는 기본 LiveItem 구현. mutable."""

    net_id: int = 0
    stack: int = 0
    prefix: int = 0

    # 확장 아이템 전용
    mod_name: Optional[str] = None  # 정의한 확장 이름 (None = 기본 아이템)
    item_name: Optional[str] = None  # 확장 내부 아이템 이름
    mod_data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_extension(self) -> bool:
        return self.mod_name is not None

    def set_defaults(self, net_id: int) -> None:
        self.net_id = net_id
        self.stack = 1 if net_id != 0 else 0
        self.prefix = 0
        self.mod_name = None
        self.item_name = None
        self.mod_data = {}

    def apply_prefix(self, prefix: int) -> None:
        self.prefix = check_prefix(prefix)
