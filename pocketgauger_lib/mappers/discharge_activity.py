# -*- coding: utf-8 -*-
"""Discharge activity assembler.

Combines a PocketGauger gauging summary with the host's parse context and
location info into a ``DischargeActivity``.  The verticals of its point
velocity sub-activity come from the vertical calculator.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

from pocketgauger_lib.constants import MEAN_SECTION_MONITORING_METHOD
from pocketgauger_lib.constants import MID_SECTION_MONITORING_METHOD
from pocketgauger_lib.context import MonitoringMethod
from pocketgauger_lib.enums import DeploymentMethodType
from pocketgauger_lib.enums import FlowCalculationMethod
from pocketgauger_lib.mappers.vertical import map_verticals
from pocketgauger_lib.models import DischargeActivity
from pocketgauger_lib.models import DischargeChannelMeasurement
from pocketgauger_lib.models import PointVelocityDischarge

if TYPE_CHECKING:
    from pocketgauger_lib.context import LocationInfo
    from pocketgauger_lib.context import ParseContext
    from pocketgauger_lib.dtos.models import GaugingSummaryItem
    from pocketgauger_lib.mappers.base import MeterCalibrationResolver

logger = logging.getLogger(__name__)

DISCHARGE_METHOD_CODES: dict[FlowCalculationMethod, str] = {
    FlowCalculationMethod.MEAN: MEAN_SECTION_MONITORING_METHOD,
    FlowCalculationMethod.MID: MID_SECTION_MONITORING_METHOD,
}


class DischargeActivityMapper:
    """Map gauging summaries onto host discharge activities.

    The mapper only holds the (immutable) parse context, so one instance can
    map any number of gaugings.

    Example:
        mapper = DischargeActivityMapper(ParseContext())
        activity = mapper.map(location, gauging, MeterCalibrationMapper())
        for vertical in activity.discharge_sub_activities[0].verticals:
            print(vertical.segment.total_discharge_portion)
    """

    def __init__(self, parse_context: ParseContext) -> None:
        self.parse_context = parse_context

    def map(
        self,
        location_info: LocationInfo,
        gauging_summary: GaugingSummaryItem,
        calibration_resolver: MeterCalibrationResolver,
        *,
        deployment_method: DeploymentMethodType = DeploymentMethodType.UNSPECIFIED,
    ) -> DischargeActivity:
        """Assemble the discharge activity of a gauging.

        Args:
            location_info: Location of the gauging (UTC offset)
            gauging_summary: The gauging to map
            calibration_resolver: Resolves the gauging's meter calibration
            deployment_method: How the meter was deployed

        Returns:
            DischargeActivity with a single point velocity sub-activity

        Raises:
            Exception: Whatever the calibration resolver raises
        """
        start_time = self._to_location_time(gauging_summary.start_date, location_info)
        end_time = self._to_location_time(gauging_summary.end_date, location_info)
        discharge_method = self._map_discharge_method(gauging_summary)

        channel_measurement = DischargeChannelMeasurement(
            deployment_method=deployment_method,
            starting_point=gauging_summary.start_point,
            discharge_unit=self.parse_context.discharge_parameter.default_unit,
        )
        point_velocity_discharge = PointVelocityDischarge(
            channel_measurement=channel_measurement,
            discharge_method_code=discharge_method.method_code,
            area=gauging_summary.area,
            width=gauging_summary.width,
            velocity_average=gauging_summary.mean_velocity,
            discharge=gauging_summary.flow,
            max_depth=gauging_summary.max_depth,
            verticals=map_verticals(
                gauging_summary, channel_measurement, calibration_resolver
            ),
        )

        logger.debug(
            "Mapped gauging `%s` with %d verticals",
            gauging_summary.gauging_id,
            point_velocity_discharge.vertical_count,
        )

        return DischargeActivity(
            start_time=start_time,
            end_time=end_time,
            measurement_time=start_time + (end_time - start_time) / 2,
            party=gauging_summary.observers_name,
            discharge=gauging_summary.flow,
            discharge_unit=self.parse_context.discharge_parameter.default_unit,
            gage_height=gauging_summary.mean_gauge_height,
            gage_height_unit=self.parse_context.gage_height_parameter.default_unit,
            gage_height_method=self.parse_context.get_default_monitoring_method(),
            discharge_method=discharge_method,
            mean_index_velocity=gauging_summary.mean_velocity,
            comments=gauging_summary.comments,
            discharge_sub_activities=[point_velocity_discharge],
        )

    @staticmethod
    def _to_location_time(
        local_time: datetime.datetime, location_info: LocationInfo
    ) -> datetime.datetime:
        """Stamp a local date-time with the location's UTC offset."""
        if local_time.tzinfo is not None:
            return local_time.astimezone(location_info.utc_offset)
        return local_time.replace(tzinfo=location_info.utc_offset)

    def _map_discharge_method(
        self, gauging_summary: GaugingSummaryItem
    ) -> MonitoringMethod:
        method = gauging_summary.flow_calculation_method
        if method is None:
            logger.warning(
                "Unknown flow calculation method %r for gauging `%s`, using default",
                gauging_summary.flow_calculation_method_proxy,
                gauging_summary.gauging_id,
            )
            return self.parse_context.get_default_monitoring_method()
        return MonitoringMethod(method_code=DISCHARGE_METHOD_CODES[method])
