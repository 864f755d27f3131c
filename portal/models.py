"""
Pydantic models for formatting options and table schemas.
"""

from typing import Any, Callable, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPPORTED_LOCALE = "en-US"


class FormatOptions(BaseModel):
    """Options shared by the numeric formatters."""
    precision: int = Field(default=2, ge=0, le=100)
    currency_code: Optional[str] = None
    locale: Literal["en-US"] = SUPPORTED_LOCALE

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, value: Optional[str]) -> Optional[str]:
        """Currency codes are three-letter ISO 4217 codes, stored upper-case."""
        if value is None:
            return value
        code = value.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Invalid ISO 4217 currency code: {value!r}")
        return code


class ColumnSpec(BaseModel):
    """One table column: header label, cell accessor and alignment."""
    model_config = ConfigDict(frozen=True)

    header: str
    accessor: Callable[[Any], Any]
    align: Literal["left", "right", "center"] = "left"
    class_name: Optional[str] = None


class TableSpec(BaseModel):
    """Columns, rows and display options for one table render."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    columns: List[ColumnSpec]
    rows: List[Any] = Field(default_factory=list)
    dense: bool = False
    on_row_click: Optional[Callable[[Any], Any]] = None
    empty_message: str = "No data available"
