# -*- coding: utf-8 -*-
"""Mappers from PocketGauger DTOs to the host discharge model."""

from pocketgauger_lib.mappers.base import MeterCalibrationResolver
from pocketgauger_lib.mappers.discharge_activity import DischargeActivityMapper
from pocketgauger_lib.mappers.meter_calibration import MeterCalibrationMapper
from pocketgauger_lib.mappers.vertical import calculate_segment_widths
from pocketgauger_lib.mappers.vertical import classify_observation_method
from pocketgauger_lib.mappers.vertical import compute_verticals
from pocketgauger_lib.mappers.vertical import map_verticals

__all__ = [
    "DischargeActivityMapper",
    "MeterCalibrationMapper",
    "MeterCalibrationResolver",
    "calculate_segment_widths",
    "classify_observation_method",
    "compute_verticals",
    "map_verticals",
]
