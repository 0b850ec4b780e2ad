"""Pydantic models for the node JSON-RPC wire format."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RpcRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: int
    method: str = Field(..., min_length=1)
    params: List[Any] = Field(default_factory=list)


class RpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class RpcResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[int] = None
    result: Optional[Any] = None
    error: Optional[RpcError] = None

    @model_validator(mode="before")
    @classmethod
    def _result_or_error(cls, data: Any) -> Any:
        if isinstance(data, dict) and ("result" in data) == ("error" in data):
            raise ValueError("response must carry exactly one of `result` or `error`")
        return data


class RuntimeVersion(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    spec_name: str = Field(..., alias="specName")
    spec_version: int = Field(..., alias="specVersion")
    transaction_version: int = Field(..., alias="transactionVersion")


__all__ = ["RpcError", "RpcRequest", "RpcResponse", "RuntimeVersion"]
