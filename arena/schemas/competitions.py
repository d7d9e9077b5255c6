from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def format_rfc3339(value: datetime) -> str:
    """RFC3339 (秒精度)，UTC 输出 Z，无时区视为 UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


# --- 比赛信息 ---
class CompetitionInfo(BaseModel):
    """
    比赛描述
    JSON 键名固定；可选字段缺失时输出 null，而不是零值
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    name: str = Field(..., alias="Name")
    last_registration_date: Optional[datetime] = Field(None, alias="LastRegistrationDate")
    start_date: Optional[datetime] = Field(None, alias="StartDate")
    prize_pool: Optional[int] = Field(None, alias="PrizePool", description="奖金池 (整数货币单位)")
    desc: Optional[str] = Field(None, alias="Desc")
    image_src: Optional[str] = Field(None, alias="ImageSrc")

    @field_serializer("last_registration_date", "start_date")
    def serialize_time(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return format_rfc3339(value)

    @classmethod
    def from_record(cls, record: Any) -> "CompetitionInfo":
        """从数据库行 (或任意同名属性对象) 构建"""
        return cls.model_validate(record, from_attributes=True)

    @classmethod
    def from_json(cls, data: str) -> "CompetitionInfo":
        return cls.model_validate_json(data)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
