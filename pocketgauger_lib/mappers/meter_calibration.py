# -*- coding: utf-8 -*-
"""Default meter calibration resolver.

Builds a host ``MeterCalibration`` from PocketGauger meter details, turning
each calibration row into a linear rating equation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pocketgauger_lib.enums import MeterType
from pocketgauger_lib.errors import MeterCalibrationError
from pocketgauger_lib.models import MeterCalibration
from pocketgauger_lib.models import MeterCalibrationEquation

if TYPE_CHECKING:
    from pocketgauger_lib.dtos.models import MeterCalibrationItem
    from pocketgauger_lib.dtos.models import MeterDetailsItem

logger = logging.getLogger(__name__)


class MeterCalibrationMapper:
    """Resolve calibrations straight from the meter details records.

    Attributes:
        intercept_unit: Unit attached to every equation's intercept
    """

    def __init__(self, intercept_unit: str | None = "m/s") -> None:
        self.intercept_unit = intercept_unit

    def map(self, meter_details: MeterDetailsItem | None) -> MeterCalibration:
        """Build the calibration for a meter.

        Args:
            meter_details: The meter used for the gauging

        Returns:
            MeterCalibration with one equation per calibration row

        Raises:
            MeterCalibrationError: If no meter details are available
        """
        if meter_details is None:
            raise MeterCalibrationError("No meter details to build a calibration from")

        meter_type = MeterType.from_string(meter_details.meter_type)
        if meter_type is MeterType.UNKNOWN and meter_details.meter_type:
            logger.warning(
                "Unrecognized meter type %r for meter `%s`",
                meter_details.meter_type,
                meter_details.meter_id,
            )

        if not meter_details.calibrations:
            logger.warning("Meter `%s` has no calibrations", meter_details.meter_id)

        return MeterCalibration(
            meter_type=meter_type,
            manufacturer=meter_details.manufacturer,
            model=meter_details.model,
            serial_number=meter_details.serial_number,
            first_used_date=meter_details.first_used_date,
            equations=[
                self._create_equation(calibration)
                for calibration in meter_details.calibrations
            ],
        )

    def _create_equation(
        self, calibration: MeterCalibrationItem
    ) -> MeterCalibrationEquation:
        return MeterCalibrationEquation(
            range_start=calibration.min_rotation_speed,
            range_end=calibration.max_rotation_speed,
            slope=calibration.factor,
            intercept=calibration.constant,
            intercept_unit=self.intercept_unit,
        )
