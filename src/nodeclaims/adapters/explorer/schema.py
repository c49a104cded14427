"""Pydantic models describing the explorer ``txlist`` payloads."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExplorerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TransactionPayload(ExplorerBaseModel):
    block_number: int = Field(alias="blockNumber")
    time_stamp: int = Field(alias="timeStamp")
    hash: str
    from_address: str = Field(alias="from")
    to: str | None = None
    input: str
    is_error: str = Field(default="0", alias="isError")
    txreceipt_status: str = ""

    @field_validator("block_number", "time_stamp", mode="before")
    @classmethod
    def _parse_int(cls, value: int | str) -> int:
        return int(value)

    @property
    def succeeded(self) -> bool:
        # Receipt status is blank before Byzantium; fall back to the error flag.
        if self.txreceipt_status.strip():
            return self.txreceipt_status.strip() == "1"
        return self.is_error.strip() == "0"


class TxListResponse(ExplorerBaseModel):
    status: str
    message: str
    result: list[TransactionPayload] | str

    @property
    def is_ok(self) -> bool:
        return self.status == "1" and isinstance(self.result, list)

    @property
    def is_empty(self) -> bool:
        return self.status == "0" and self.message.lower().startswith("no transactions found")


TransactionPayloadInput = TransactionPayload | Mapping[str, object]
