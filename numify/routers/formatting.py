"""Formatting router exposing the engine over HTTP.

Query options that are omitted fall back to the configured defaults
(``NUMIFY_DEFAULT_FORMAT_TYPE`` / ``NUMIFY_DEFAULT_STYLE``).
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field, FiniteFloat

from numify.config.logging import bind_context
from numify.config.settings import get_settings
from numify.models.format import FormatOptions, GroupOptions
from numify.services.grouping import format_grouped
from numify.services.locale_registry import resolve, supported_format_types
from numify.services.magnitude import format_magnitude
from numify.utils.api_shapes import success
from numify.utils.errors import BatchTooLarge

router = APIRouter()


class NumifyBatchRequest(BaseModel):
    values: List[FiniteFloat] = Field(default_factory=list)
    format_type: Optional[str] = None
    precise: bool = False
    style: Optional[str] = None


def _format_options(format_type: Optional[str], precise: bool, style: Optional[str]) -> FormatOptions:
    settings = get_settings()
    return FormatOptions(
        format_type=format_type or settings.DEFAULT_FORMAT_TYPE,
        precise=precise,
        style=style or settings.DEFAULT_STYLE,
    )


@router.get("/numify")
async def numify_value(
    value: float = Query(..., allow_inf_nan=False),
    format_type: Optional[str] = Query(None),
    precise: bool = Query(False),
    style: Optional[str] = Query(None),
):
    options = _format_options(format_type, precise, style)
    return success(
        {"value": value, "formatted": format_magnitude(value, options)},
        format_type=options.format_type,
        precise=options.precise,
        style=options.style,
    )


@router.post("/numify/batch")
async def numify_batch(payload: NumifyBatchRequest):
    limit = get_settings().MAX_BATCH_SIZE
    if len(payload.values) > limit:
        raise BatchTooLarge(len(payload.values), limit)
    options = _format_options(payload.format_type, payload.precise, payload.style)
    items = [{"value": v, "formatted": format_magnitude(v, options)} for v in payload.values]
    bind_context(
        __name__,
        format_type=options.format_type,
        style=options.style,
        count=len(items),
    ).debug("batch formatted")
    return success(
        {"items": items},
        count=len(items),
        format_type=options.format_type,
        precise=options.precise,
        style=options.style,
    )


@router.get("/format-number")
async def format_number_value(
    value: float = Query(..., allow_inf_nan=False),
    format_type: Optional[str] = Query(None),
):
    options = GroupOptions(format_type=format_type or get_settings().DEFAULT_FORMAT_TYPE)
    return success(
        {"value": value, "formatted": format_grouped(value, options)},
        format_type=options.format_type,
    )


@router.get("/locales")
async def list_locales():
    locales = []
    for code in supported_format_types():
        config = resolve(code)
        locales.append({
            "format_type": code,
            "decimal_separator": config.decimal_separator,
            "thousand_separator": config.thousand_separator,
            "number_system": config.number_system.value,
        })
    return success({"locales": locales}, count=len(locales))
