# -*- coding: utf-8 -*-
"""DTO module for PocketGauger export records."""

from pocketgauger_lib.dtos.models import GaugingSummaryItem
from pocketgauger_lib.dtos.models import MeterCalibrationItem
from pocketgauger_lib.dtos.models import MeterDetailsItem
from pocketgauger_lib.dtos.models import PanelItem
from pocketgauger_lib.dtos.models import VerticalItem
from pocketgauger_lib.dtos.parser import PocketGaugerParser

__all__ = [
    "GaugingSummaryItem",
    "MeterCalibrationItem",
    "MeterDetailsItem",
    "PanelItem",
    "PocketGaugerParser",
    "VerticalItem",
]
