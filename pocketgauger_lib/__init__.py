# -*- coding: utf-8 -*-
"""PocketGauger Field Data Library.

A Python library for mapping PocketGauger gauging records onto a host
discharge-activity data model.

Usage:
    from pocketgauger_lib import DischargeActivityMapper
    from pocketgauger_lib import MeterCalibrationMapper
    from pocketgauger_lib import ParseContext
    from pocketgauger_lib import PocketGaugerParser

    parser = PocketGaugerParser()
    meters = parser.parse_meter_details(meter_records, calibration_records)
    gaugings = parser.parse_gauging_summaries(summary_records, meters)

    mapper = DischargeActivityMapper(ParseContext())
    for gauging in gaugings:
        activity = mapper.map(location, gauging, MeterCalibrationMapper())
        for vertical in activity.discharge_sub_activities[0].verticals:
            print(vertical.sequence_number, vertical.segment.width)
"""

__version__ = "0.1.0"

# Constants
from pocketgauger_lib.constants import DEFAULT_MONITORING_METHOD
from pocketgauger_lib.constants import DOUBLE_EPSILON
from pocketgauger_lib.constants import MEAN_SECTION_MONITORING_METHOD
from pocketgauger_lib.constants import MID_SECTION_MONITORING_METHOD

# Context
from pocketgauger_lib.context import ChannelInfo
from pocketgauger_lib.context import LocationInfo
from pocketgauger_lib.context import MonitoringMethod
from pocketgauger_lib.context import ParameterInfo
from pocketgauger_lib.context import ParseContext

# DTOs
from pocketgauger_lib.dtos.models import GaugingSummaryItem
from pocketgauger_lib.dtos.models import MeterCalibrationItem
from pocketgauger_lib.dtos.models import MeterDetailsItem
from pocketgauger_lib.dtos.models import PanelItem
from pocketgauger_lib.dtos.models import VerticalItem
from pocketgauger_lib.dtos.parser import PocketGaugerParser

# Enums
from pocketgauger_lib.enums import DeploymentMethodType
from pocketgauger_lib.enums import FlowCalculationMethod
from pocketgauger_lib.enums import FlowDirectionType
from pocketgauger_lib.enums import MeterType
from pocketgauger_lib.enums import PointVelocityObservationType
from pocketgauger_lib.enums import Severity
from pocketgauger_lib.enums import StartPointType
from pocketgauger_lib.enums import VerticalType

# Errors
from pocketgauger_lib.errors import MeterCalibrationError
from pocketgauger_lib.errors import PocketGaugerException
from pocketgauger_lib.errors import PocketGaugerParseError

# Mappers
from pocketgauger_lib.mappers.base import MeterCalibrationResolver
from pocketgauger_lib.mappers.discharge_activity import DischargeActivityMapper
from pocketgauger_lib.mappers.meter_calibration import MeterCalibrationMapper
from pocketgauger_lib.mappers.vertical import compute_verticals
from pocketgauger_lib.mappers.vertical import map_verticals

# Host Models
from pocketgauger_lib.models import DischargeActivity
from pocketgauger_lib.models import DischargeChannelMeasurement
from pocketgauger_lib.models import MeterCalibration
from pocketgauger_lib.models import MeterCalibrationEquation
from pocketgauger_lib.models import OpenWaterData
from pocketgauger_lib.models import PointVelocityDischarge
from pocketgauger_lib.models import Segment
from pocketgauger_lib.models import VelocityDepthObservation
from pocketgauger_lib.models import VelocityObservation
from pocketgauger_lib.models import Vertical

__all__ = [
    # Constants
    "DEFAULT_MONITORING_METHOD",
    "DOUBLE_EPSILON",
    "MEAN_SECTION_MONITORING_METHOD",
    "MID_SECTION_MONITORING_METHOD",
    # Context
    "ChannelInfo",
    # Enums
    "DeploymentMethodType",
    # Host Models
    "DischargeActivity",
    # Mappers
    "DischargeActivityMapper",
    "DischargeChannelMeasurement",
    "FlowCalculationMethod",
    "FlowDirectionType",
    # DTOs
    "GaugingSummaryItem",
    "LocationInfo",
    "MeterCalibration",
    "MeterCalibrationEquation",
    # Errors
    "MeterCalibrationError",
    "MeterCalibrationItem",
    "MeterCalibrationMapper",
    "MeterCalibrationResolver",
    "MeterDetailsItem",
    "MeterType",
    "MonitoringMethod",
    "OpenWaterData",
    "PanelItem",
    "ParameterInfo",
    "ParseContext",
    "PocketGaugerException",
    "PocketGaugerParseError",
    "PocketGaugerParser",
    "PointVelocityDischarge",
    "PointVelocityObservationType",
    "Segment",
    "Severity",
    "StartPointType",
    "VelocityDepthObservation",
    "VelocityObservation",
    "Vertical",
    "VerticalItem",
    "VerticalType",
    "compute_verticals",
    "map_verticals",
]
