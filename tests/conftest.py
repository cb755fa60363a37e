# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures for building PocketGauger DTOs, host
context and a recording calibration resolver.
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Any

import orjson
import pytest

from pocketgauger_lib.context import ChannelInfo
from pocketgauger_lib.context import LocationInfo
from pocketgauger_lib.context import ParseContext
from pocketgauger_lib.dtos.models import GaugingSummaryItem
from pocketgauger_lib.dtos.models import MeterCalibrationItem
from pocketgauger_lib.dtos.models import MeterDetailsItem
from pocketgauger_lib.dtos.models import PanelItem
from pocketgauger_lib.dtos.models import VerticalItem
from pocketgauger_lib.enums import DeploymentMethodType
from pocketgauger_lib.enums import MeterType
from pocketgauger_lib.models import DischargeChannelMeasurement
from pocketgauger_lib.models import MeterCalibration

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"
RECORDS_FILE = ARTIFACTS_DIR / "pocketgauger_records.json"

LOCATION_UTC_OFFSET = 3.0


# =============================================================================
# Builders
# =============================================================================


def make_vertical_item(**overrides: Any) -> VerticalItem:
    values = {
        "sample_position": 0.6,
        "depth": 0.42,
        "revs": 31.7,
        "exposure_time": 40.0,
        "velocity": 0.35,
    }
    values.update(overrides)
    return VerticalItem(**values)


def make_panel_item(vertical_number: int, **overrides: Any) -> PanelItem:
    values = {
        "vertical_number": vertical_number,
        "distance": float(vertical_number),
        "depth": 0.7,
        "area": 0.7,
        "mean_velocity": 0.35,
        "flow": 0.245,
        "verticals": [make_vertical_item()],
    }
    values.update(overrides)
    return PanelItem(**values)


def make_panel_items(count: int = 3) -> list[PanelItem]:
    return [make_panel_item(number) for number in range(1, count + 1)]


class RecordingCalibrationResolver:
    """Calibration resolver returning a fixed calibration and recording calls."""

    def __init__(self, calibration: MeterCalibration | None = None) -> None:
        self.calibration = calibration or MeterCalibration(
            meter_type=MeterType.PROPELLER,
            manufacturer="OTT",
            model="C31",
            serial_number="12345",
        )
        self.calls: list[MeterDetailsItem | None] = []

    def map(self, meter_details: MeterDetailsItem | None) -> MeterCalibration:
        self.calls.append(meter_details)
        return self.calibration


class FailingCalibrationResolver:
    """Calibration resolver that always raises."""

    def map(self, meter_details: MeterDetailsItem | None) -> MeterCalibration:
        raise LookupError("calibration store unavailable")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def raw_records() -> dict[str, list[dict[str, Any]]]:
    """Return the raw PocketGauger record tables."""
    return orjson.loads(RECORDS_FILE.read_bytes())


@pytest.fixture
def calibration_resolver() -> RecordingCalibrationResolver:
    return RecordingCalibrationResolver()


@pytest.fixture
def channel_measurement() -> DischargeChannelMeasurement:
    return DischargeChannelMeasurement(deployment_method=DeploymentMethodType.WADING)


@pytest.fixture
def meter_details() -> MeterDetailsItem:
    return MeterDetailsItem(
        meter_id="M1",
        manufacturer="OTT",
        model="C31",
        serial_number="12345",
        meter_type="Propeller",
        first_used_date=datetime.date(2012, 3, 1),
        calibrations=[
            MeterCalibrationItem(
                meter_id="M1",
                min_rotation_speed=0.0,
                max_rotation_speed=0.57,
                factor=0.2525,
                constant=0.0075,
            ),
            MeterCalibrationItem(
                meter_id="M1",
                min_rotation_speed=0.57,
                max_rotation_speed=10.0,
                factor=0.2581,
                constant=0.0043,
            ),
        ],
    )


@pytest.fixture
def gauging_summary(meter_details: MeterDetailsItem) -> GaugingSummaryItem:
    return GaugingSummaryItem(
        gauging_id="G1",
        site_id="S1",
        river_name="Test River",
        observers_name="J. Hydrographer",
        start_date=datetime.datetime(2016, 5, 12, 10, 0),
        end_date=datetime.datetime(2016, 5, 12, 11, 0),
        flow_calculation_method_proxy="Mid",
        start_point_proxy="Left",
        mean_gauge_height=1.23,
        flow=0.735,
        area=2.1,
        width=3.0,
        mean_velocity=0.35,
        max_depth=0.7,
        meter_id="M1",
        comments="Calm conditions",
        panel_items=make_panel_items(3),
        meter_details_item=meter_details,
    )


@pytest.fixture
def parse_context() -> ParseContext:
    return ParseContext()


@pytest.fixture
def location_info() -> LocationInfo:
    return LocationInfo(
        name="Test River at Gauge",
        identifier="TR001",
        utc_offset_hours=LOCATION_UTC_OFFSET,
        channels=[ChannelInfo()],
    )
