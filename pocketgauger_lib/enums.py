# -*- coding: utf-8 -*-
"""Enumerations for PocketGauger records and the host discharge model.

This module contains all enumerations used when mapping PocketGauger
gaugings, including vertical classification, velocity observation methods,
deployment methods and meter types.
"""

from enum import Enum


class VerticalType(str, Enum):
    """Position of a vertical within the cross-section.

    Attributes:
        START_EDGE_NO_WATER_BEFORE: First vertical, dry bank before it
        MID_RIVER: Any vertical between the two edges
        END_EDGE_NO_WATER_AFTER: Last vertical, dry bank after it
    """

    START_EDGE_NO_WATER_BEFORE = "StartEdgeNoWaterBefore"
    MID_RIVER = "MidRiver"
    END_EDGE_NO_WATER_AFTER = "EndEdgeNoWaterAfter"


class PointVelocityObservationType(str, Enum):
    """How many and which depths were sampled at a vertical.

    Attributes:
        SURFACE: Single observation near the surface
        ONE_AT_POINT_FIVE: Single observation at 0.5 of the depth
        ONE_AT_POINT_SIX: Single observation at 0.6 of the depth
        ONE_AT_POINT_TWO_AND_POINT_EIGHT: Observations at 0.2 and 0.8
        ONE_AT_POINT_TWO_POINT_SIX_AND_POINT_EIGHT: Observations at 0.2, 0.6, 0.8
        FIVE_POINT: Five-point method
        SIX_POINT: Six-point method
        ELEVEN_POINT: Eleven-point method
        UNCLASSIFIED: Observation count matches no known method
    """

    SURFACE = "Surface"
    ONE_AT_POINT_FIVE = "OneAtPointFive"
    ONE_AT_POINT_SIX = "OneAtPointSix"
    ONE_AT_POINT_TWO_AND_POINT_EIGHT = "OneAtPointTwoAndPointEight"
    ONE_AT_POINT_TWO_POINT_SIX_AND_POINT_EIGHT = "OneAtPointTwoPointSixAndPointEight"
    FIVE_POINT = "FivePoint"
    SIX_POINT = "SixPoint"
    ELEVEN_POINT = "ElevenPoint"
    UNCLASSIFIED = "Unclassified"

    @property
    def is_classified(self) -> bool:
        """Whether this is a known observation method."""
        return self is not PointVelocityObservationType.UNCLASSIFIED


class FlowDirectionType(str, Enum):
    """Direction of flow at a vertical.

    Attributes:
        NORMAL: Downstream flow
        REVERSED: Upstream flow (eddies, backwater)
    """

    NORMAL = "Normal"
    REVERSED = "Reversed"


class DeploymentMethodType(str, Enum):
    """How the current meter was deployed during the gauging."""

    UNSPECIFIED = "Unspecified"
    WADING = "Wading"
    BRIDGE_UPSTREAM_SIDE = "BridgeUpstreamSide"
    BRIDGE_DOWNSTREAM_SIDE = "BridgeDownstreamSide"
    CABLEWAY = "Cableway"
    BOAT = "Boat"
    ICE = "Ice"


class StartPointType(str, Enum):
    """Bank the tagline distances are measured from.

    Attributes:
        LEFT_EDGE_OF_WATER: Distances start at the left bank
        RIGHT_EDGE_OF_WATER: Distances start at the right bank
    """

    LEFT_EDGE_OF_WATER = "LeftEdgeOfWater"
    RIGHT_EDGE_OF_WATER = "RightEdgeOfWater"

    @classmethod
    def from_bank(cls, value: str | None) -> "StartPointType | None":
        """Get the start point from a PocketGauger bank label.

        Args:
            value: Bank label such as ``"Left"`` or ``"RightBank"``
                (case-insensitive)

        Returns:
            StartPointType or None if not recognized
        """
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized.startswith("left"):
            return cls.LEFT_EDGE_OF_WATER
        if normalized.startswith("right"):
            return cls.RIGHT_EDGE_OF_WATER
        return None


class FlowCalculationMethod(str, Enum):
    """Discharge computation method recorded by PocketGauger.

    Attributes:
        MEAN: Mean-section method
        MID: Mid-section method
    """

    MEAN = "Mean"
    MID = "Mid"

    @classmethod
    def from_string(cls, value: str | None) -> "FlowCalculationMethod | None":
        """Get the flow calculation method from its raw string.

        Args:
            value: Raw method string (case-insensitive)

        Returns:
            FlowCalculationMethod or None if not recognized
        """
        if value is None:
            return None
        normalized = value.strip().lower()
        for method in cls:
            if method.value.lower() == normalized:
                return method
        return None


class MeterType(str, Enum):
    """Type of current meter used for the gauging."""

    UNKNOWN = "Unknown"
    PRICE_AA = "PriceAa"
    PRICE_PYGMY = "PricePygmy"
    PROPELLER = "Propeller"
    ELECTROMAGNETIC = "Electromagnetic"
    ACOUSTIC_DOPPLER = "AcousticDoppler"

    @classmethod
    def from_string(cls, value: str | None) -> "MeterType":
        """Map a PocketGauger meter type string onto a MeterType.

        Matching ignores case, spaces, dashes and underscores.

        Args:
            value: Raw meter type string

        Returns:
            The matching MeterType, or MeterType.UNKNOWN
        """
        if not value:
            return cls.UNKNOWN
        normalized = "".join(c for c in value.lower() if c not in " -_")
        for meter_type in cls:
            if meter_type.value.lower() == normalized:
                return meter_type
        return cls.UNKNOWN


class Severity(str, Enum):
    """Severity level for parse issues.

    Attributes:
        ERROR: The record could not be used
        WARNING: The record was used but looks suspicious
    """

    ERROR = "error"
    WARNING = "warning"
