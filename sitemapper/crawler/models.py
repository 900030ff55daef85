# sitemapper/crawler/models.py
"""
Data models for the Sitemapper crawler: references found on pages and the
messages exchanged between fetch tasks and the coordinator.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class LinkKind(enum.Enum):
    """Kind of an outbound reference."""

    PAGE = "page"
    ASSET = "asset"


class Bucket(enum.Enum):
    """Relation bucket a Track message writes into."""

    LINKS = "links"
    ASSETS = "assets"


@dataclass(frozen=True, slots=True)
class Reference:
    """Outbound URL discovered on a fetched page."""

    url: str
    kind: LinkKind


@dataclass(frozen=True, slots=True)
class Dispatch:
    """Request to fetch *target*, discovered on *source* (None for the root)."""

    source: Optional[str]
    target: str


@dataclass(frozen=True, slots=True)
class Track:
    """Edge source -> target to be recorded in *bucket*."""

    bucket: Bucket
    source: Optional[str]
    target: str


@dataclass(frozen=True, slots=True)
class Complete:
    """Emitted exactly once by every dispatched fetch task."""

    url: str
    error: Optional[Exception] = None


Message = Union[Dispatch, Track, Complete]
