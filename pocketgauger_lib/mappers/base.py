# -*- coding: utf-8 -*-
"""Collaborator protocols for the mappers.

To plug in a different calibration source, implement
``MeterCalibrationResolver.map``.  The vertical calculator receives the
resolver explicitly on every call and treats the returned calibration as
an opaque value to embed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from pocketgauger_lib.dtos.models import MeterDetailsItem
    from pocketgauger_lib.models import MeterCalibration


class MeterCalibrationResolver(Protocol):
    """Protocol for resolving the calibration of a current meter."""

    def map(self, meter_details: MeterDetailsItem | None) -> MeterCalibration:
        """Resolve the calibration for ``meter_details``.

        Any exception raised here propagates to the mapper's caller.
        """
        ...
