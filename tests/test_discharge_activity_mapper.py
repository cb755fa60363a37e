# -*- coding: utf-8 -*-
"""Tests for the discharge activity assembler."""

import datetime

import pytest
from deepdiff import DeepDiff

from pocketgauger_lib.constants import DEFAULT_MONITORING_METHOD
from pocketgauger_lib.constants import MEAN_SECTION_MONITORING_METHOD
from pocketgauger_lib.constants import MID_SECTION_MONITORING_METHOD
from pocketgauger_lib.context import LocationInfo
from pocketgauger_lib.context import MonitoringMethod
from pocketgauger_lib.context import ParseContext
from pocketgauger_lib.enums import DeploymentMethodType
from pocketgauger_lib.enums import StartPointType
from pocketgauger_lib.enums import VerticalType
from pocketgauger_lib.mappers.discharge_activity import DischargeActivityMapper
from pocketgauger_lib.models import DischargeActivity
from tests.conftest import LOCATION_UTC_OFFSET
from tests.conftest import FailingCalibrationResolver


@pytest.fixture
def mapper(parse_context) -> DischargeActivityMapper:
    return DischargeActivityMapper(parse_context)


class TestTimes:
    """Tests for start, end and measurement times."""

    def test_start_time_has_location_offset(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        activity = mapper.map(location_info, gauging_summary, calibration_resolver)

        assert activity.start_time.utcoffset() == datetime.timedelta(
            hours=LOCATION_UTC_OFFSET
        )
        assert activity.start_time.replace(tzinfo=None) == gauging_summary.start_date

    def test_end_time_has_location_offset(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        activity = mapper.map(location_info, gauging_summary, calibration_resolver)

        assert activity.end_time.utcoffset() == datetime.timedelta(
            hours=LOCATION_UTC_OFFSET
        )
        assert activity.end_time.replace(tzinfo=None) == gauging_summary.end_date

    def test_measurement_time_is_midpoint(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        activity = mapper.map(location_info, gauging_summary, calibration_resolver)

        assert activity.measurement_time == activity.start_time + datetime.timedelta(
            minutes=30
        )

    def test_fractional_offset(self, mapper, gauging_summary, calibration_resolver):
        """Test half-hour offsets such as -8.5 hours."""
        location = LocationInfo(utc_offset_hours=-8.5)

        activity = mapper.map(location, gauging_summary, calibration_resolver)

        assert activity.start_time.utcoffset() == datetime.timedelta(
            hours=-8, minutes=-30
        )

    def test_aware_times_are_converted(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        """Test already zone-aware times are converted, not relabelled."""
        summary = gauging_summary.model_copy(
            update={
                "start_date": datetime.datetime(
                    2016, 5, 12, 7, 0, tzinfo=datetime.timezone.utc
                )
            }
        )

        activity = mapper.map(location_info, summary, calibration_resolver)

        assert activity.start_time.hour == 10
        assert activity.start_time == summary.start_date


class TestDischargeMethod:
    """Tests for mapping the flow calculation method."""

    @pytest.mark.parametrize(
        ("method", "expected_code"),
        [
            ("Mean", MEAN_SECTION_MONITORING_METHOD),
            ("Mid", MID_SECTION_MONITORING_METHOD),
            ("mid", MID_SECTION_MONITORING_METHOD),
            (" MEAN ", MEAN_SECTION_MONITORING_METHOD),
            ("Trapezoidal", DEFAULT_MONITORING_METHOD),
            (None, DEFAULT_MONITORING_METHOD),
        ],
    )
    def test_method_code(
        self,
        mapper,
        location_info,
        gauging_summary,
        calibration_resolver,
        method,
        expected_code,
    ):
        summary = gauging_summary.model_copy(
            update={"flow_calculation_method_proxy": method}
        )

        activity = mapper.map(location_info, summary, calibration_resolver)

        assert activity.discharge_method.method_code == expected_code
        sub_activity = activity.discharge_sub_activities[0]
        assert sub_activity.discharge_method_code == expected_code

    def test_unknown_method_uses_context_default(
        self, location_info, gauging_summary, calibration_resolver
    ):
        context = ParseContext(
            default_monitoring_method=MonitoringMethod(method_code="Custom")
        )
        summary = gauging_summary.model_copy(
            update={"flow_calculation_method_proxy": "Trapezoidal"}
        )

        activity = DischargeActivityMapper(context).map(
            location_info, summary, calibration_resolver
        )

        assert activity.discharge_method.method_code == "Custom"


class TestDischargeActivity:
    """Tests for the assembled discharge activity."""

    def test_is_mapped_to_expected_activity(
        self,
        mapper,
        parse_context,
        location_info,
        gauging_summary,
        calibration_resolver,
    ):
        """Test the context- and summary-derived fields of the activity."""
        expected = {
            "party": gauging_summary.observers_name,
            "discharge": gauging_summary.flow,
            "discharge_unit": parse_context.discharge_parameter.default_unit,
            "gage_height": gauging_summary.mean_gauge_height,
            "gage_height_unit": parse_context.gage_height_parameter.default_unit,
            "gage_height_method": (
                parse_context.get_default_monitoring_method().model_dump()
            ),
            "mean_index_velocity": gauging_summary.mean_velocity,
            "comments": gauging_summary.comments,
        }

        activity = mapper.map(location_info, gauging_summary, calibration_resolver)

        ddiff = DeepDiff(
            expected,
            activity.model_dump(),
            exclude_paths=[
                "root['start_time']",
                "root['end_time']",
                "root['measurement_time']",
                "root['discharge_method']",
                "root['discharge_sub_activities']",
            ],
        )
        assert ddiff == {}, ddiff

    def test_point_velocity_sub_activity(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        activity = mapper.map(
            location_info,
            gauging_summary,
            calibration_resolver,
            deployment_method=DeploymentMethodType.CABLEWAY,
        )

        assert len(activity.discharge_sub_activities) == 1
        sub_activity = activity.discharge_sub_activities[0]
        assert sub_activity.channel_measurement.deployment_method == (
            DeploymentMethodType.CABLEWAY
        )
        assert sub_activity.channel_measurement.starting_point == (
            StartPointType.LEFT_EDGE_OF_WATER
        )
        assert sub_activity.area == gauging_summary.area
        assert sub_activity.width == gauging_summary.width
        assert sub_activity.discharge == gauging_summary.flow
        assert sub_activity.vertical_count == len(gauging_summary.panel_items)
        assert sub_activity.verticals[0].vertical_type == (
            VerticalType.START_EDGE_NO_WATER_BEFORE
        )
        assert all(
            v.velocity_observation.deployment_method == DeploymentMethodType.CABLEWAY
            for v in sub_activity.verticals
        )

    def test_resolver_exception_propagates(
        self, mapper, location_info, gauging_summary
    ):
        with pytest.raises(LookupError):
            mapper.map(location_info, gauging_summary, FailingCalibrationResolver())

    def test_json_roundtrip(
        self, mapper, location_info, gauging_summary, calibration_resolver
    ):
        """Test the activity survives a JSON dump and reload."""
        activity = mapper.map(location_info, gauging_summary, calibration_resolver)

        reloaded = DischargeActivity.model_validate_json(activity.model_dump_json())

        assert reloaded == activity
