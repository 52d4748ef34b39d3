"""Shared data types for backend interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vertex:
    """A polygon corner in image pixel coordinates."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class BoundingRegion:
    """Polygon enclosing a detected text fragment."""

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Annotation:
    """A unit of recognized text returned by a text detection backend."""

    description: str
    region: BoundingRegion | None = None


@dataclass(frozen=True)
class LanguageCandidate:
    """One entry of a ranked language detection result."""

    language: str  # ISO 639-1
    confidence: float = 0.0


@dataclass(frozen=True)
class ResultRecord:
    """An original text fragment paired with its translation."""

    original: str
    translated: str
