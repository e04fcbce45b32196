"""인벤토리 영역 레이아웃 — 평탄화된 슬롯 배열의 고정 분할

영역 순서와 크기는 저장/전송 계약이다. 순서가 바뀌면 값이 다른 영역으로
조용히 들어간다. 각 영역은 반열림 구간 [start, end).
"""

from __future__ import annotations

from dataclasses import dataclass

INVENTORY_SLOTS = 59  # 인벤토리 + 코인 + 탄약 + 손에 든 아이템
ARMOR_SLOTS = 20  # 방어구 + 액세서리
DYE_SLOTS = 10
MISC_EQUIP_SLOTS = 5  # 장식/소셜 장비
MISC_DYE_SLOTS = MISC_EQUIP_SLOTS
PIGGY_SLOTS = 40
SAFE_SLOTS = PIGGY_SLOTS
TRASH_SLOTS = 1
FORGE_SLOTS = SAFE_SLOTS


@dataclass(frozen=True)
class Region:
    """슬롯 배열의 이름 붙은 연속 구간."""

    name: str
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def slice(self) -> slice:
        return slice(self.start, self.end)

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


def _build_regions(sizes: list[tuple[str, int]]) -> tuple[Region, ...]:
    regions: list[Region] = []
    start = 0
    for name, size in sizes:
        regions.append(Region(name=name, start=start, end=start + size))
        start += size
    return tuple(regions)


REGIONS: tuple[Region, ...] = _build_regions(
    [
        ("inventory", INVENTORY_SLOTS),
        ("armor", ARMOR_SLOTS),
        ("dye", DYE_SLOTS),
        ("misc_equip", MISC_EQUIP_SLOTS),
        ("misc_dye", MISC_DYE_SLOTS),
        ("piggy", PIGGY_SLOTS),
        ("safe", SAFE_SLOTS),
        ("trash", TRASH_SLOTS),
        ("forge", FORGE_SLOTS),
    ]
)

_REGIONS_BY_NAME: dict[str, Region] = {r.name: r for r in REGIONS}

MAX_INVENTORY = REGIONS[-1].end  # 220

INVENTORY_INDEX = _REGIONS_BY_NAME["inventory"].as_tuple()
ARMOR_INDEX = _REGIONS_BY_NAME["armor"].as_tuple()
DYE_INDEX = _REGIONS_BY_NAME["dye"].as_tuple()
MISC_EQUIP_INDEX = _REGIONS_BY_NAME["misc_equip"].as_tuple()
MISC_DYE_INDEX = _REGIONS_BY_NAME["misc_dye"].as_tuple()
PIGGY_INDEX = _REGIONS_BY_NAME["piggy"].as_tuple()
SAFE_INDEX = _REGIONS_BY_NAME["safe"].as_tuple()
TRASH_INDEX = _REGIONS_BY_NAME["trash"].as_tuple()
FORGE_INDEX = _REGIONS_BY_NAME["forge"].as_tuple()


def get_region(name: str) -> Region:
    """이름으로 영역 조회. 없으면 KeyError."""
    try:
        return _REGIONS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown region: {name}") from None


def region_of(index: int) -> Region:
    """슬롯 인덱스가 속한 영역. [0, MAX_INVENTORY) 밖이면 IndexError."""
    if not 0 <= index < MAX_INVENTORY:
        raise IndexError(f"Slot index out of range: {index}")
    for region in REGIONS:
        if region.contains(index):
            return region
    raise IndexError(f"Slot index out of range: {index}")
