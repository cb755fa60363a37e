# -*- coding: utf-8 -*-
"""Host discharge-activity data model.

This module contains the Pydantic models the plugin hands back to the
host application:
- Vertical: One mapped panel, with its Segment and VelocityObservation
- MeterCalibration: A current meter and its rating equations
- PointVelocityDischarge: The mid-section discharge sub-activity
- DischargeActivity: A complete discharge measurement

Output models are mutable: the vertical calculator fills derived fields
(vertical type, discharge portion) in passes after construction.
"""

from __future__ import annotations

import datetime  # noqa: TC003
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from pocketgauger_lib.constants import DEFAULT_DEPTH_MULTIPLIER
from pocketgauger_lib.constants import DEFAULT_OBSERVATION_WEIGHTING
from pocketgauger_lib.context import MonitoringMethod  # noqa: TC001
from pocketgauger_lib.enums import DeploymentMethodType
from pocketgauger_lib.enums import FlowDirectionType
from pocketgauger_lib.enums import MeterType
from pocketgauger_lib.enums import PointVelocityObservationType
from pocketgauger_lib.enums import StartPointType  # noqa: TC001
from pocketgauger_lib.enums import VerticalType

# --- Meters ---


class MeterCalibrationEquation(BaseModel):
    """A linear rating equation valid over a rotation speed range."""

    range_start: float | None = None
    range_end: float | None = None
    slope: float
    intercept: float
    intercept_unit: str | None = None


class MeterCalibration(BaseModel):
    """A current meter with its calibration equations."""

    meter_type: MeterType = MeterType.UNKNOWN
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    first_used_date: datetime.date | None = None
    equations: list[MeterCalibrationEquation] = Field(default_factory=list)


# --- Verticals ---


class OpenWaterData(BaseModel):
    """Measurement condition for verticals taken in open water."""

    type: Literal["open_water"] = "open_water"


class VelocityDepthObservation(BaseModel):
    """A single point velocity observation at a vertical."""

    depth: float
    velocity: float
    observation_interval: float
    revolution_count: int
    depth_multiplier: float = DEFAULT_DEPTH_MULTIPLIER
    weighting: float = DEFAULT_OBSERVATION_WEIGHTING


class VelocityObservation(BaseModel):
    """Velocity measurements taken at a vertical."""

    deployment_method: DeploymentMethodType = DeploymentMethodType.UNSPECIFIED
    mean_velocity: float
    meter_calibration: MeterCalibration | None = None
    velocity_observation_method: PointVelocityObservationType = (
        PointVelocityObservationType.UNCLASSIFIED
    )
    observations: list[VelocityDepthObservation] = Field(default_factory=list)


class Segment(BaseModel):
    """Slice of the cross-section attributed to one vertical.

    ``total_discharge_portion`` is a percentage of the gauging's total
    discharge; it stays None when the total discharge is zero.
    """

    width: float
    area: float
    velocity: float
    discharge: float
    is_discharge_estimated: bool = False
    total_discharge_portion: float | None = None


class Vertical(BaseModel):
    """One mapped panel of the cross-section."""

    sequence_number: int
    vertical_type: VerticalType = VerticalType.MID_RIVER
    measurement_condition_data: OpenWaterData = Field(default_factory=OpenWaterData)
    flow_direction: FlowDirectionType = FlowDirectionType.NORMAL
    tagline_position: float
    sounded_depth: float
    is_sounded_depth_estimated: bool = False
    effective_depth: float
    segment: Segment
    velocity_observation: VelocityObservation


# --- Discharge Activities ---


class DischargeChannelMeasurement(BaseModel):
    """Channel-wide settings shared by every vertical of a gauging."""

    deployment_method: DeploymentMethodType = DeploymentMethodType.UNSPECIFIED
    starting_point: StartPointType | None = None
    discharge_unit: str | None = None


class PointVelocityDischarge(BaseModel):
    """Discharge sub-activity computed from point velocity verticals."""

    type: Literal["point_velocity"] = "point_velocity"
    channel_measurement: DischargeChannelMeasurement = Field(
        default_factory=DischargeChannelMeasurement
    )
    discharge_method_code: str | None = None
    area: float | None = None
    width: float | None = None
    velocity_average: float | None = None
    discharge: float | None = None
    max_depth: float | None = None
    verticals: list[Vertical] = Field(default_factory=list)

    @property
    def vertical_count(self) -> int:
        return len(self.verticals)


class DischargeActivity(BaseModel):
    """A complete discharge measurement ready for the host."""

    start_time: datetime.datetime
    end_time: datetime.datetime
    measurement_time: datetime.datetime | None = None
    party: str | None = None
    discharge: float | None = None
    discharge_unit: str | None = None
    gage_height: float | None = None
    gage_height_unit: str | None = None
    gage_height_method: MonitoringMethod | None = None
    discharge_method: MonitoringMethod | None = None
    mean_index_velocity: float | None = None
    comments: str | None = None
    discharge_sub_activities: list[PointVelocityDischarge] = Field(
        default_factory=list
    )
