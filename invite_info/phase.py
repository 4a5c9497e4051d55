"""Interaction phases of the invite lookup view."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from .models import InviteRecord


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    code: str


@dataclass(frozen=True)
class Success:
    code: str
    record: InviteRecord
    payload: dict[str, Any]
    fetched_at: datetime


@dataclass(frozen=True)
class Error:
    message: str


Phase = Union[Idle, Loading, Success, Error]
