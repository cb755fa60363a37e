# -*- coding: utf-8 -*-
"""Constants used throughout the pocketgauger_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

import math

# -----------------------------------------------------------------------------
# Floating Point Comparison
# -----------------------------------------------------------------------------

#: Smallest positive double. Comparisons against it are effectively exact.
DOUBLE_EPSILON: float = math.ulp(0.0)

# -----------------------------------------------------------------------------
# Monitoring Method Codes
# -----------------------------------------------------------------------------

#: Discharge method code for gaugings computed with the mean-section method
MEAN_SECTION_MONITORING_METHOD: str = "MeanSection"

#: Discharge method code for gaugings computed with the mid-section method
MID_SECTION_MONITORING_METHOD: str = "MidSection"

#: Discharge method code used when the flow calculation method is not recognized
DEFAULT_MONITORING_METHOD: str = "DefaultNone"

# -----------------------------------------------------------------------------
# Velocity Depth Observations
# -----------------------------------------------------------------------------

#: Every PocketGauger point observation carries the same weight
DEFAULT_OBSERVATION_WEIGHTING: float = 1.0

#: PocketGauger depths are already absolute, no multiplier is applied
DEFAULT_DEPTH_MULTIPLIER: float = 1.0

# -----------------------------------------------------------------------------
# Sample Positions (fraction of total depth)
# -----------------------------------------------------------------------------

#: Single observation taken at 0.5 of the depth
POINT_FIVE_SAMPLE_POSITION: float = 0.5

#: Single observation taken at 0.6 of the depth
POINT_SIX_SAMPLE_POSITION: float = 0.6

# -----------------------------------------------------------------------------
# Record Identifiers
# -----------------------------------------------------------------------------

#: Identifier used in issue records when a record carries no id
UNKNOWN_RECORD: str = "<unknown>"
