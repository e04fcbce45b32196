"""JSON 표현 스키마 — 스칼라 레코드의 {"netID", "prefix", "stack"} 형태"""

from pydantic import BaseModel, ConfigDict, Field

from netitem.core.item.record import ItemRecord


class NetItemSchema(BaseModel):
    """스칼라 레코드 JSON 스키마. payload 레코드는 표현할 수 없다."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    net_id: int = Field(0, alias="netID", description="아이템 net ID (0 = 빈 슬롯)")
    prefix: int = Field(0, ge=0, le=255, description="prefix (unsigned byte)")
    stack: int = Field(0, description="스택 수량")

    @classmethod
    def from_record(cls, record: ItemRecord) -> "NetItemSchema":
        if record.payload is not None:
            raise ValueError("Payload-bearing records have no JSON form")
        return cls(net_id=record.net_id, prefix=record.prefix, stack=record.stack)

    def to_record(self) -> ItemRecord:
        return ItemRecord.from_scalars(self.net_id, self.stack, self.prefix)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
