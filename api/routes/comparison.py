"""
Comparison routes for JSON Diff Pro.

Both buffers are validated first; the differ only runs when both parse.
"""
import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from config import settings
from core import (
    compare_texts,
    compare_values,
    create_inline_diff,
    has_json_suffix,
    parse_json_content,
    render_report,
    TextComparison
)
from api.schemas import ComparisonRequest, ComparisonResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _diagnostic_detail(comparison: TextComparison) -> dict:
    """Build the 400 detail naming the side(s) that failed to parse."""
    failed = [
        side for side, result in (("left", comparison.left), ("right", comparison.right))
        if not result.valid
    ]
    return {
        "message": f"Invalid JSON in {' and '.join(failed)} input",
        "left": comparison.left.diagnostic.to_dict() if comparison.left.diagnostic else None,
        "right": comparison.right.diagnostic.to_dict() if comparison.right.diagnostic else None,
    }


@router.post("", response_model=ComparisonResponse, response_model_exclude_unset=True)
def compare_json(request: ComparisonRequest):
    """
    Compare two relaxed JSON texts and return differences.
    """
    inline = settings.INLINE_DIFF_DEFAULT if request.inline_diff is None else request.inline_diff
    comparison = compare_texts(
        request.left,
        request.right,
        inline=inline,
        tab_width=settings.TAB_WIDTH,
        context_radius=settings.CONTEXT_RADIUS
    )

    if not comparison.ok:
        raise HTTPException(status_code=400, detail=_diagnostic_detail(comparison))

    return ComparisonResponse(**comparison.result.to_dict())


@router.post("/files")
async def compare_files(
    before_file: UploadFile = File(...),
    after_file: UploadFile = File(...)
):
    """
    Compare two uploaded JSON files.
    """
    parsed = {}
    for label, upload in (("Before", before_file), ("After", after_file)):
        if not has_json_suffix(upload.filename or ""):
            raise HTTPException(status_code=400, detail=f"{label} file must be JSON")

        content = await upload.read()
        try:
            parsed_file = parse_json_content(
                content,
                upload.filename,
                tab_width=settings.TAB_WIDTH,
                context_radius=settings.CONTEXT_RADIUS
            )
        except UnicodeDecodeError as e:
            raise HTTPException(status_code=400, detail=f"{label} file is not UTF-8: {e}")

        if not parsed_file.valid:
            logger.info(f"Rejected upload {upload.filename}: {parsed_file.validation.diagnostic.summary}")
            raise HTTPException(
                status_code=400,
                detail={
                    "message": f"Invalid JSON in {label.lower()} file",
                    "diagnostic": parsed_file.validation.diagnostic.to_dict()
                }
            )
        parsed[label] = parsed_file

    before, after = parsed["Before"], parsed["After"]
    result = compare_values(before.value, after.value)

    return {
        "before_file": before.filename,
        "after_file": after.filename,
        **result.to_dict(),
        "report": render_report(
            result,
            before.filename,
            after.filename,
            app_label=f"{settings.APP_NAME} v{settings.APP_VERSION}"
        )
    }


@router.post("/inline-diff")
def get_inline_diff(old_value: str, new_value: str):
    """
    Get word-level inline diff highlighting for two string values.

    Returns HTML with highlighted changes.
    """
    return create_inline_diff(old_value, new_value)
