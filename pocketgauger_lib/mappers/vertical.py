# -*- coding: utf-8 -*-
"""Vertical/segment calculator for mid-section gaugings.

Maps PocketGauger panel items onto host verticals:

1. One vertical per panel, geometry and segment values copied directly.
2. Segment widths are the differences between consecutive tagline
   distances; the first segment's width is its own distance.
3. The velocity observation method is classified from the number of point
   observations (and, for a single observation, its sample position).
4. The first and last verticals are flagged as edges.
5. Each segment's share of the total discharge is filled in once all
   segments are known.

The calculator is total: odd input (non-monotonic distances, unknown
observation counts, zero total discharge) becomes odd data, never an
exception.  Only the calibration resolver may raise.
"""

from __future__ import annotations

import logging
import math
from itertools import pairwise
from typing import TYPE_CHECKING

from pocketgauger_lib.constants import DOUBLE_EPSILON
from pocketgauger_lib.constants import POINT_FIVE_SAMPLE_POSITION
from pocketgauger_lib.constants import POINT_SIX_SAMPLE_POSITION
from pocketgauger_lib.enums import PointVelocityObservationType
from pocketgauger_lib.enums import VerticalType
from pocketgauger_lib.models import Segment
from pocketgauger_lib.models import VelocityDepthObservation
from pocketgauger_lib.models import VelocityObservation
from pocketgauger_lib.models import Vertical

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pocketgauger_lib.dtos.models import GaugingSummaryItem
    from pocketgauger_lib.dtos.models import MeterDetailsItem
    from pocketgauger_lib.dtos.models import PanelItem
    from pocketgauger_lib.dtos.models import VerticalItem
    from pocketgauger_lib.mappers.base import MeterCalibrationResolver
    from pocketgauger_lib.models import DischargeChannelMeasurement
    from pocketgauger_lib.models import MeterCalibration

logger = logging.getLogger(__name__)

#: Observation method by number of point observations (1 is position-dependent)
OBSERVATION_METHOD_BY_COUNT: dict[int, PointVelocityObservationType] = {
    2: PointVelocityObservationType.ONE_AT_POINT_TWO_AND_POINT_EIGHT,
    3: PointVelocityObservationType.ONE_AT_POINT_TWO_POINT_SIX_AND_POINT_EIGHT,
    5: PointVelocityObservationType.FIVE_POINT,
    6: PointVelocityObservationType.SIX_POINT,
    11: PointVelocityObservationType.ELEVEN_POINT,
}


def map_verticals(
    gauging_summary: GaugingSummaryItem,
    channel_measurement: DischargeChannelMeasurement,
    calibration_resolver: MeterCalibrationResolver,
) -> list[Vertical]:
    """Map the panels of a gauging onto verticals.

    Args:
        gauging_summary: The gauging whose panel items are mapped
        channel_measurement: Channel-wide settings (deployment method)
        calibration_resolver: Resolves the gauging's meter calibration

    Returns:
        One vertical per panel item, in panel order
    """
    return compute_verticals(
        gauging_summary.panel_items,
        channel_measurement,
        calibration_resolver,
        gauging_summary.meter_details_item,
    )


def compute_verticals(
    panel_items: Sequence[PanelItem],
    channel_measurement: DischargeChannelMeasurement,
    calibration_resolver: MeterCalibrationResolver,
    meter_details: MeterDetailsItem | None = None,
) -> list[Vertical]:
    """Compute verticals, segments and velocity observations for panels.

    The resolver is called once per call (never for an empty panel list)
    and the calibration it returns is shared by every vertical.

    Args:
        panel_items: Ordered cross-section stations
        channel_measurement: Channel-wide settings (deployment method)
        calibration_resolver: Resolves the meter calibration
        meter_details: The meter passed to the resolver

    Returns:
        One vertical per panel item, in panel order
    """
    if not panel_items:
        return []

    meter_calibration = calibration_resolver.map(meter_details)
    widths = calculate_segment_widths([item.distance for item in panel_items])

    verticals = [
        _create_vertical(panel_item, width, channel_measurement, meter_calibration)
        for panel_item, width in zip(panel_items, widths, strict=True)
    ]

    set_edge_vertical_types(verticals)
    set_total_discharge_portions(verticals)

    logger.debug("Mapped %d panel items to verticals", len(verticals))
    return verticals


def calculate_segment_widths(distances: Sequence[float]) -> list[float]:
    """Derive segment widths from cumulative tagline distances.

    ``width[0] = distance[0]`` and ``width[i] = distance[i] - distance[i-1]``.
    Non-monotonic distances give negative widths; they are logged, not
    rejected.

    Args:
        distances: Tagline distance of each panel, in order

    Returns:
        Width of each panel's segment
    """
    if not distances:
        return []

    widths = [distances[0]]
    widths.extend(current - previous for previous, current in pairwise(distances))

    for index, width in enumerate(widths):
        if width < 0:
            logger.warning(
                "Negative segment width %s at panel index %d "
                "(tagline distances are not increasing)",
                width,
                index,
            )
    return widths


def classify_observation_method(
    observations: Sequence[VerticalItem],
) -> PointVelocityObservationType:
    """Classify the velocity observation method of a panel.

    Args:
        observations: The panel's point observations

    Returns:
        The observation method, or UNCLASSIFIED for unknown counts
    """
    count = len(observations)
    if count == 1:
        return _classify_single_observation(observations[0].sample_position)

    method = OBSERVATION_METHOD_BY_COUNT.get(
        count, PointVelocityObservationType.UNCLASSIFIED
    )
    if not method.is_classified:
        logger.warning("No velocity observation method for %d observations", count)
    return method


def set_edge_vertical_types(verticals: Sequence[Vertical]) -> None:
    """Flag the first and last verticals as edges.

    A lone vertical is both first and last; it ends as an end edge.
    """
    if not verticals:
        return

    verticals[0].vertical_type = VerticalType.START_EDGE_NO_WATER_BEFORE
    verticals[-1].vertical_type = VerticalType.END_EDGE_NO_WATER_AFTER


def set_total_discharge_portions(verticals: Sequence[Vertical]) -> None:
    """Fill in each segment's percentage of the total discharge.

    Portions are left unset when the total discharge is zero.
    """
    total_discharge = sum(vertical.segment.discharge for vertical in verticals)
    if _is_equal(total_discharge, 0.0):
        logger.debug("Total discharge is zero, discharge portions left unset")
        return

    for vertical in verticals:
        vertical.segment.total_discharge_portion = (
            vertical.segment.discharge / total_discharge * 100
        )


def _create_vertical(
    panel_item: PanelItem,
    width: float,
    channel_measurement: DischargeChannelMeasurement,
    meter_calibration: MeterCalibration,
) -> Vertical:
    return Vertical(
        sequence_number=panel_item.vertical_number,
        vertical_type=VerticalType.MID_RIVER,
        tagline_position=panel_item.distance,
        sounded_depth=panel_item.depth,
        is_sounded_depth_estimated=False,
        effective_depth=panel_item.depth,
        segment=Segment(
            width=width,
            area=panel_item.area,
            velocity=panel_item.mean_velocity,
            discharge=panel_item.flow,
            is_discharge_estimated=False,
        ),
        velocity_observation=VelocityObservation(
            deployment_method=channel_measurement.deployment_method,
            mean_velocity=panel_item.mean_velocity,
            meter_calibration=meter_calibration,
            velocity_observation_method=classify_observation_method(
                panel_item.verticals
            ),
            observations=[
                _create_velocity_depth_observation(item)
                for item in panel_item.verticals
            ],
        ),
    )


def _create_velocity_depth_observation(
    vertical_item: VerticalItem,
) -> VelocityDepthObservation:
    return VelocityDepthObservation(
        depth=vertical_item.depth,
        velocity=vertical_item.velocity,
        observation_interval=vertical_item.exposure_time,
        # Fractional revolutions are truncated, not rounded
        revolution_count=math.trunc(vertical_item.revs),
    )


def _classify_single_observation(
    sample_position: float,
) -> PointVelocityObservationType:
    if _is_equal(sample_position, POINT_FIVE_SAMPLE_POSITION):
        return PointVelocityObservationType.ONE_AT_POINT_FIVE
    if _is_equal(sample_position, POINT_SIX_SAMPLE_POSITION):
        return PointVelocityObservationType.ONE_AT_POINT_SIX
    return PointVelocityObservationType.SURFACE


def _is_equal(value: float, other: float) -> bool:
    return abs(value - other) < DOUBLE_EPSILON
