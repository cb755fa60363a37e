# -*- coding: utf-8 -*-
"""Parser for PocketGauger export records.

A PocketGauger export holds several record tables (gauging summaries, meter
details, meter calibrations) that reference each other by id.  Reading the
tables from disk is the host's job; this parser receives the already
loaded records as dictionaries and links them together.

Architecture: records are linked and nested at the dictionary level, then
each top-level record is fed to its Pydantic model via a single
``model_validate()`` call.

Errors are collected rather than thrown, allowing partial parsing of
inconsistent exports.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING
from typing import Any

from pydantic import ValidationError

from pocketgauger_lib.constants import UNKNOWN_RECORD
from pocketgauger_lib.dtos.models import GaugingSummaryItem
from pocketgauger_lib.dtos.models import MeterCalibrationItem
from pocketgauger_lib.dtos.models import MeterDetailsItem
from pocketgauger_lib.enums import Severity
from pocketgauger_lib.errors import PocketGaugerParseError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class PocketGaugerParser:
    """Parser for PocketGauger record tables.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    def __init__(self) -> None:
        """Initialize a new parser with empty error list."""
        self.errors: list[PocketGaugerParseError] = []

    def _add_issue(
        self,
        severity: Severity,
        message: str,
        record_type: str,
        record_id: str | None = None,
    ) -> None:
        issue = PocketGaugerParseError(
            severity=severity,
            message=message,
            record_type=record_type,
            record_id=record_id,
        )
        logger.warning("%s", issue)
        self.errors.append(issue)

    def _add_error(
        self, message: str, record_type: str, record_id: str | None = None
    ) -> None:
        self._add_issue(Severity.ERROR, message, record_type, record_id)

    def _add_warning(
        self, message: str, record_type: str, record_id: str | None = None
    ) -> None:
        self._add_issue(Severity.WARNING, message, record_type, record_id)

    @property
    def has_errors(self) -> bool:
        return any(error.severity is Severity.ERROR for error in self.errors)

    # -------------------------------------------------------------------------
    # Meter details
    # -------------------------------------------------------------------------

    def parse_meter_details(
        self,
        meter_records: Iterable[Mapping[str, Any]],
        calibration_records: Iterable[Mapping[str, Any]],
    ) -> dict[str, MeterDetailsItem]:
        """Link meters to their calibrations.

        Each meter receives every calibration row carrying its meter id.

        Args:
            meter_records: Raw meter details records
            calibration_records: Raw meter calibration records

        Returns:
            Meter details keyed by meter id
        """
        calibrations_by_meter = self._group_calibrations(calibration_records)

        meter_details: dict[str, MeterDetailsItem] = {}
        for record in meter_records:
            meter_id = self._record_id(record, "MeterId", "meter_id")
            data = {**record, "Calibrations": calibrations_by_meter.get(meter_id, [])}
            try:
                meter = MeterDetailsItem.model_validate(data)
            except ValidationError as e:
                self._add_error(f"invalid meter details: {e}", "MeterDetails", meter_id)
                continue

            if meter.meter_id in meter_details:
                self._add_warning(
                    "duplicate meter id, keeping the last record",
                    "MeterDetails",
                    meter.meter_id,
                )
            meter_details[meter.meter_id] = meter

        for meter_id in sorted(calibrations_by_meter.keys() - meter_details.keys()):
            self._add_warning(
                "calibration references an unknown meter",
                "MeterCalibration",
                meter_id,
            )

        return meter_details

    def _group_calibrations(
        self, calibration_records: Iterable[Mapping[str, Any]]
    ) -> dict[str, list[MeterCalibrationItem]]:
        grouped: dict[str, list[MeterCalibrationItem]] = defaultdict(list)
        for record in calibration_records:
            try:
                calibration = MeterCalibrationItem.model_validate(record)
            except ValidationError as e:
                self._add_error(
                    f"invalid meter calibration: {e}",
                    "MeterCalibration",
                    self._record_id(record, "MeterId", "meter_id"),
                )
                continue
            grouped[calibration.meter_id].append(calibration)
        return dict(grouped)

    # -------------------------------------------------------------------------
    # Gauging summaries
    # -------------------------------------------------------------------------

    def parse_gauging_summaries(
        self,
        summary_records: Iterable[Mapping[str, Any]],
        meter_details: Mapping[str, MeterDetailsItem],
    ) -> list[GaugingSummaryItem]:
        """Validate gauging summaries and link their meters.

        Panel items are sorted by vertical number.

        Args:
            summary_records: Raw gauging summary records (with nested
                ``PanelItems`` and their ``Verticals``)
            meter_details: Meter details keyed by meter id

        Returns:
            The valid gauging summaries, in input order
        """
        summaries: list[GaugingSummaryItem] = []
        for record in summary_records:
            gauging_id = self._record_id(record, "GaugingId", "gauging_id")
            meter_id = self._record_id(record, "MeterId", "meter_id")

            data = dict(record)
            if meter_id in meter_details:
                data["MeterDetailsItem"] = meter_details[meter_id]
            elif meter_id != UNKNOWN_RECORD:
                self._add_warning(
                    f"meter `{meter_id}` not found in meter details",
                    "GaugingSummary",
                    gauging_id,
                )

            try:
                summary = GaugingSummaryItem.model_validate(data)
            except ValidationError as e:
                self._add_error(
                    f"invalid gauging summary: {e}", "GaugingSummary", gauging_id
                )
                continue

            if summary.flow_calculation_method is None:
                self._add_warning(
                    "unrecognized flow calculation method: "
                    f"{summary.flow_calculation_method_proxy!r}",
                    "GaugingSummary",
                    gauging_id,
                )

            panel_items = sorted(summary.panel_items, key=lambda p: p.vertical_number)
            summaries.append(summary.model_copy(update={"panel_items": panel_items}))

        return summaries

    @staticmethod
    def _record_id(record: Mapping[str, Any], *keys: str) -> str:
        for key in keys:
            if (value := record.get(key)) is not None:
                return str(value)
        return UNKNOWN_RECORD
