"""Data models for skeleton root fields, style accumulation, and build results"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Head(BaseModel):
    """Document head: optional title plus ordered link/meta attribute maps."""
    title: Optional[str] = None
    link:  list[dict[str, Any]] = []
    meta:  list[dict[str, Any]] = []


class FontFace(BaseModel):
    """One @font-face block; descriptors beyond the three named ones are kept in order."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    family:  str = Field(alias="font-family")
    src:     str
    display: Optional[str] = Field(default=None, alias="font-display")


class MediaRule(BaseModel):
    query: str
    style: str


class ClassroomRule(BaseModel):
    """Named reusable rule: `.name` when type is "class", bare `name` otherwise."""
    model_config = ConfigDict(populate_by_name=True)

    type:          str = "class"
    name:          str
    style:         str = ""
    media_queries: list[MediaRule] = Field(default=[], alias="mediaQueries")

    @property
    def selector(self) -> str:
        return f".{self.name}" if self.type == "class" else self.name


class SkeletonRoot(BaseModel):
    """Validated view of the root-only fields of a skeleton document."""
    model_config = ConfigDict(extra="ignore")

    head:      Head = Field(default_factory=Head)
    fonts:     list[FontFace] = []
    root:      dict[str, Any] = {}
    classroom: list[ClassroomRule] = []


@dataclass
class StyleSheet:
    """Per-compilation selector and media-query maps, insertion ordered."""
    selectors: dict[str, str] = field(default_factory=dict)
    media:     dict[str, dict[str, str]] = field(default_factory=dict)

    def set_rule(self, selector: str, style: str) -> None:
        self.selectors[selector] = style

    def set_media_rule(self, query: str, selector: str, style: str) -> None:
        self.media.setdefault(query, {})[selector] = style

    def clear(self) -> None:
        self.selectors.clear()
        self.media.clear()

    def is_empty(self) -> bool:
        return not self.selectors and not self.media


@dataclass
class CompiledPage:
    html: str
    css:  str


class RouteStatus(str, Enum):
    compiled = "compiled"
    skipped  = "skipped"
    failed   = "failed"


@dataclass
class RouteResult:
    route:  Path                # relative to the routes root; Path(".") for the root
    status: RouteStatus
    output: Optional[Path] = None
    error:  Optional[str] = None


@dataclass
class BuildReport:
    results: list[RouteResult] = field(default_factory=list)

    def count(self, status: RouteStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def ok(self) -> bool:
        return self.count(RouteStatus.failed) == 0
