"""아이템 레코드 Core — 순수 Python, DB 무관"""

from .codec import Base64JsonCodec, ExtensionCodec, get_extension_codec
from .layout import MAX_INVENTORY, REGIONS, Region, get_region, region_of
from .models import GameItem, LiveItem
from .record import (
    EMPTY_RECORD,
    ItemFormatError,
    ItemRecord,
    RecordKind,
    convert_live_item,
    parse_item_record,
)
from .snapshot import InventorySnapshot, SlotError, parse_inventory

__all__ = [
    "Base64JsonCodec",
    "ExtensionCodec",
    "get_extension_codec",
    "MAX_INVENTORY",
    "REGIONS",
    "Region",
    "get_region",
    "region_of",
    "GameItem",
    "LiveItem",
    "EMPTY_RECORD",
    "ItemFormatError",
    "ItemRecord",
    "RecordKind",
    "convert_live_item",
    "parse_item_record",
    "InventorySnapshot",
    "SlotError",
    "parse_inventory",
]
