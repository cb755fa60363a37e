# -*- coding: utf-8 -*-
"""Data models for PocketGauger export records.

This module contains Pydantic models mirroring the records found in a
PocketGauger export:
- VerticalItem: A single point velocity observation within a panel
- PanelItem: One measurement station across the cross-section
- MeterCalibrationItem: One calibration row of a current meter
- MeterDetailsItem: A current meter and its calibrations
- GaugingSummaryItem: A complete gauging with its panels

Field names follow Python conventions; the PocketGauger PascalCase names
(``VerticalNumber``, ``MeanVelocity``, ...) are accepted as aliases so raw
records can be fed directly to ``model_validate()``.

Validation is relaxed: real-world exports contain non-monotonic distances
and odd observation counts, which are passed through to the mappers.
"""

from __future__ import annotations

import datetime  # noqa: TC003

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_pascal

from pocketgauger_lib.enums import FlowCalculationMethod
from pocketgauger_lib.enums import StartPointType

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_pascal,
    populate_by_name=True,
    extra="ignore",
    frozen=True,
    allow_inf_nan=False,
    coerce_numbers_to_str=True,
)


class VerticalItem(BaseModel):
    """A single point velocity observation at a panel.

    Attributes:
        sample_position: Fraction of the depth the sample was taken at
        depth: Observation depth
        revs: Revolutions counted (may be fractional)
        exposure_time: Counting interval in seconds
        velocity: Computed point velocity
    """

    model_config = _RECORD_CONFIG

    gauging_id: str | None = None
    vertical_number: int | None = None
    sample_position: float = 0.0
    depth: float = 0.0
    revs: float = 0.0
    exposure_time: float = 0.0
    velocity: float = 0.0


class PanelItem(BaseModel):
    """One measurement station across the stream cross-section."""

    model_config = _RECORD_CONFIG

    gauging_id: str | None = None
    vertical_number: int
    distance: float = 0.0
    depth: float = 0.0
    area: float = 0.0
    mean_velocity: float = 0.0
    flow: float = 0.0
    verticals: list[VerticalItem] = Field(default_factory=list)


class MeterCalibrationItem(BaseModel):
    """A calibration row: velocity = factor * rotation speed + constant."""

    model_config = _RECORD_CONFIG

    meter_id: str
    min_rotation_speed: float | None = None
    max_rotation_speed: float | None = None
    factor: float = 0.0
    constant: float = 0.0


class MeterDetailsItem(BaseModel):
    """A current meter with its calibrations."""

    model_config = _RECORD_CONFIG

    meter_id: str
    impeller_number: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    meter_type: str | None = None
    first_used_date: datetime.date | None = None
    calibrations: list[MeterCalibrationItem] = Field(default_factory=list)


class GaugingSummaryItem(BaseModel):
    """A complete PocketGauger gauging.

    Start and end dates are local times at the gauging site; the UTC offset
    comes from the host's location info.

    ``flow_calculation_method_proxy`` keeps the raw method string so that
    unrecognized methods can still be mapped onto the default method.
    """

    model_config = _RECORD_CONFIG

    gauging_id: str
    site_id: str | None = None
    river_name: str | None = None
    observers_name: str | None = None
    start_date: datetime.datetime
    end_date: datetime.datetime
    flow_calculation_method_proxy: str | None = Field(
        default=None, alias="FlowCalculationMethod"
    )
    start_point_proxy: str | None = Field(default=None, alias="StartPoint")
    mean_gauge_height: float | None = None
    gauge_height_start: float | None = None
    gauge_height_end: float | None = None
    flow: float | None = None
    area: float | None = None
    width: float | None = None
    mean_velocity: float | None = None
    max_depth: float | None = None
    meter_id: str | None = None
    comments: str | None = None
    panel_items: list[PanelItem] = Field(default_factory=list)
    meter_details_item: MeterDetailsItem | None = None

    @property
    def flow_calculation_method(self) -> FlowCalculationMethod | None:
        return FlowCalculationMethod.from_string(self.flow_calculation_method_proxy)

    @property
    def start_point(self) -> StartPointType | None:
        return StartPointType.from_bank(self.start_point_proxy)
