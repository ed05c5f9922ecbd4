from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ZoneCategory(str, Enum):
    OPTIMAL = "optimal"
    CAUTION = "caution"
    CONCERNING = "concerning"


class Point(BaseModel):
    x: float
    y: float


class NeedlePosition(BaseModel):
    tip_x: float
    tip_y: float
    angle: float


class ArcAngles(BaseModel):
    start_angle: float
    end_angle: float


class ZoneArc(BaseModel):
    category: ZoneCategory
    start_value: float
    end_value: float
    start_angle: float
    end_angle: float
    path: str
    color: str


class GaugeState(BaseModel):
    value: float
    percentage: float = Field(ge=0.0, le=1.0)
    angle_degrees: float = Field(ge=0.0, le=180.0)
    needle: NeedlePosition
    arc_path: str
    zone_arcs: list[ZoneArc] = Field(default_factory=list)


class GaugeCard(BaseModel):
    metric_key: str
    label: str
    unit: str
    value: float
    display_value: str
    category: ZoneCategory
    color: str
    range_min: float
    range_max: float
    reference_range: Optional[str] = None
    description: Optional[str] = None
    gauge: GaugeState


class ResultsReport(BaseModel):
    title: str = "Assessment Results"
    cards: list[GaugeCard] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
