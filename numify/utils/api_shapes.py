"""Shared API shape helpers.

  - success(): standard success envelope used by every formatting endpoint
"""
from __future__ import annotations
from typing import Any


def success(data: Any, **meta) -> dict:
    import time as _t
    return {"status": "success", "data": data, "meta": meta or None, "timestamp": _t.time()}
