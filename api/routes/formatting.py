"""
Formatting routes for JSON Diff Pro.

Single-document operations: format, validate and clean.
"""
from fastapi import APIRouter, HTTPException

from config import settings
from core import Diagnostic, clean, format_json, validate
from api.schemas import TextRequest, FormatResponse, CleanResponse, ValidationResponse

router = APIRouter()


@router.post("", response_model=FormatResponse)
def format_text(request: TextRequest):
    """
    Reformat relaxed JSON as indented strict JSON.
    """
    formatted = format_json(
        request.text,
        indent=settings.INDENT_WIDTH,
        tab_width=settings.TAB_WIDTH,
        context_radius=settings.CONTEXT_RADIUS
    )
    if isinstance(formatted, Diagnostic):
        raise HTTPException(status_code=400, detail=formatted.to_dict())

    return FormatResponse(formatted=formatted)


@router.post("/validate", response_model=ValidationResponse)
def validate_text(request: TextRequest):
    """
    Validate relaxed JSON. Always answers 200; check 'valid'.
    """
    result = validate(
        request.text,
        tab_width=settings.TAB_WIDTH,
        context_radius=settings.CONTEXT_RADIUS
    )
    return ValidationResponse(**result.to_dict())


@router.post("/clean", response_model=CleanResponse)
def clean_text(request: TextRequest):
    """
    Apply the relaxed-JSON cleanup without parsing.
    """
    return CleanResponse(cleaned=clean(request.text, tab_width=settings.TAB_WIDTH))
