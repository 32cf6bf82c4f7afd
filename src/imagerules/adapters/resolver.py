from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from imagerules.core.errors import DecodeError


def resolve_image_path(value: Any) -> str:
    """
    Turn whatever the caller handed us into a file path.

    Accepts:
      - a str or os.PathLike path
      - a mapping with a "tmp_name" entry (an upload descriptor)
      - an object with a temporary_file_path() method or a tmp_name attribute
    """
    if isinstance(value, (str, os.PathLike)):
        return os.fspath(value)

    if isinstance(value, Mapping):
        tmp = value.get("tmp_name")
        if tmp is not None:
            return resolve_image_path(tmp)

    getter = getattr(value, "temporary_file_path", None)
    if callable(getter):
        return resolve_image_path(getter())

    tmp = getattr(value, "tmp_name", None)
    if tmp is not None:
        return resolve_image_path(tmp)

    raise DecodeError(f"Cannot resolve an image path from {type(value).__name__}")
