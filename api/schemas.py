"""
Pydantic schemas for JSON Diff Pro API.
"""
from typing import Optional, Any
from pydantic import BaseModel, Field


# ============================================================
# DIAGNOSTIC SCHEMAS
# ============================================================

class ContextLineSchema(BaseModel):
    line: int
    text: str


class DiagnosticSchema(BaseModel):
    line: int
    column: int
    message: str
    summary: str
    context_lines: list[ContextLineSchema] = []
    caret_offset: int = 0
    rendered: str


# ============================================================
# FORMAT SCHEMAS
# ============================================================

class TextRequest(BaseModel):
    text: str = Field(..., description="Relaxed JSON text")


class FormatResponse(BaseModel):
    formatted: str


class CleanResponse(BaseModel):
    cleaned: str


class ValidationResponse(BaseModel):
    valid: bool
    diagnostic: Optional[DiagnosticSchema] = None


# ============================================================
# COMPARISON SCHEMAS
# ============================================================

class ComparisonRequest(BaseModel):
    left: str = Field(..., description="Original relaxed JSON text")
    right: str = Field(..., description="Modified relaxed JSON text")
    inline_diff: Optional[bool] = None


class DiffRecordSchema(BaseModel):
    path: str
    path_keys: list[str]
    change_type: str
    # Absent sides are left out of the response entirely
    old_value: Optional[Any] = None
    new_value: Optional[Any] = None
    inline_diff: Optional[dict] = None


class ComparisonResponse(BaseModel):
    is_identical: bool
    change_count: int
    counts: dict[str, int]
    old_hash: str
    new_hash: str
    changes: list[DiffRecordSchema]
