"""Схемы запросов и ответов HTTP API."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Значение поля: число, строка с числом, null или ""
NumberField = Optional[Union[float, str]]


class CalculateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    V: NumberField = None
    VUnit: Optional[str] = None
    I: NumberField = None
    IUnit: Optional[str] = None
    R: NumberField = None
    RUnit: Optional[str] = None
    P: NumberField = None
    PUnit: Optional[str] = None

    @field_validator("V", "I", "R", "P", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        # true/false не являются значениями величин
        if isinstance(value, bool):
            raise ValueError("Boolean is not a numeric value")
        return value


class CalculateResponse(BaseModel):
    V: float
    VUnit: str
    I: float
    IUnit: str
    R: float
    RUnit: str
    P: float
    PUnit: str
    explanations: List[str]
    consistent: bool = True


class ErrorResponse(BaseModel):
    error: str
    note: str
    kind: Optional[str] = None


class HistoryItem(BaseModel):
    timestamp: str
    input: Dict[str, Any]
    result: Dict[str, Any]


class HistoryResponse(BaseModel):
    note: str
    items: List[HistoryItem] = Field(default_factory=list)


class ClearHistoryResponse(BaseModel):
    cleared: int
