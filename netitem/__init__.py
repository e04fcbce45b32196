"""NetItem — 인벤토리 슬롯 레코드 코덱"""

__version__ = "0.1.0"
