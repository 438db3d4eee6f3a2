"""Pydantic response models for the mimeref server API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class MimeRecord(BaseModel):
    # Every field is optional: an unknown extension resolves to {}
    type: Optional[str] = None
    source: Optional[str] = None
    extensions: Optional[list[str]] = None
    compressible: Optional[bool] = None
    charset: Optional[str] = None


class StatsResponse(BaseModel):
    types: int
    extensions: int
    max_ext_length: int
