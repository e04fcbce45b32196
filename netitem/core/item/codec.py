"""확장 아이템 코덱 — 세 스칼라로 표현 못 하는 아이템의 불투명 토큰 인코딩"""

from __future__ import annotations

import base64
import json
from abc import ABC, abstractmethod
from typing import Optional

from netitem.config import settings
from netitem.core.item.models import GameItem, LiveItem, check_prefix
from netitem.core.logging import get_logger

logger = get_logger(__name__)


class ExtensionCodec(ABC):
    """Abstract base class for extension item codecs.

    encode() must produce a printable token with no embedded commas.
    decode() never raises: on failure it logs and returns None.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the codec name."""
        ...

    @abstractmethod
    def encode(self, item: LiveItem) -> str:
        """Serialize an extension item into a single token."""
        ...

    @abstractmethod
    def decode(self, token: str) -> Optional[LiveItem]:
        """Inverse of encode(). None when the token cannot be loaded."""
        ...


class Base64JsonCodec(ExtensionCodec):
    """GameItem ↔ compact JSON ↔ standard base64.

    base64 알파벳에는 ',' 와 '~' 가 없으므로 슬롯/인벤토리 구분자와 충돌하지 않는다.
    """

    @property
    def name(self) -> str:
        return "base64"

    def encode(self, item: LiveItem) -> str:
        raw = {
            "net_id": item.net_id,
            "stack": item.stack,
            "prefix": item.prefix,
            "mod": getattr(item, "mod_name", None),
            "name": getattr(item, "item_name", None),
            "data": getattr(item, "mod_data", {}),
        }
        blob = json.dumps(raw, separators=(",", ":"), sort_keys=True)
        return base64.b64encode(blob.encode("utf-8")).decode("ascii")

    def decode(self, token: str) -> Optional[LiveItem]:
        try:
            blob = base64.b64decode(token.strip(), validate=True)
            raw = json.loads(blob.decode("utf-8"))
            return GameItem(
                net_id=int(raw["net_id"]),
                stack=int(raw["stack"]),
                prefix=check_prefix(int(raw["prefix"])),
                mod_name=raw.get("mod"),
                item_name=raw.get("name"),
                mod_data=dict(raw.get("data") or {}),
            )
        except Exception as e:
            logger.warning("Error when load item: %s (%s)", token, e)
            return None


def get_extension_codec(codec_name: Optional[str] = None) -> ExtensionCodec:
    """Get an extension codec instance.

    Args:
        codec_name: Optional codec name. If not specified,
                    uses EXTENSION_CODEC from config.

    Returns:
        An ExtensionCodec instance.
    """
    name = codec_name or settings.EXTENSION_CODEC

    if name == "base64":
        logger.debug("Using Base64JsonCodec")
        return Base64JsonCodec()

    logger.warning("Unknown codec '%s', falling back to Base64JsonCodec", name)
    return Base64JsonCodec()
