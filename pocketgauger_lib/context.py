# -*- coding: utf-8 -*-
"""Host-supplied context models.

The host application hands the plugin a parse context (default units and
monitoring methods) and the location being visited (UTC offset, channels).
Both are read-only from the plugin's point of view.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from pocketgauger_lib.constants import DEFAULT_MONITORING_METHOD


class MonitoringMethod(BaseModel):
    """A monitoring method known to the host.

    Attributes:
        method_code: Host identifier of the method
        display_name: Human-readable name
    """

    model_config = ConfigDict(frozen=True)

    method_code: str
    display_name: str | None = None


class ParameterInfo(BaseModel):
    """A host parameter together with its default unit."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    default_unit: str


class ParseContext(BaseModel):
    """Defaults the host applies to every parsed field visit.

    Attributes:
        discharge_parameter: Parameter discharge values are reported in
        gage_height_parameter: Parameter stage values are reported in
        default_monitoring_method: Method used when none is recorded
    """

    model_config = ConfigDict(frozen=True)

    discharge_parameter: ParameterInfo = Field(
        default_factory=lambda: ParameterInfo(identifier="QR", default_unit="m^3/s")
    )
    gage_height_parameter: ParameterInfo = Field(
        default_factory=lambda: ParameterInfo(identifier="HG", default_unit="m")
    )
    default_monitoring_method: MonitoringMethod = Field(
        default_factory=lambda: MonitoringMethod(method_code=DEFAULT_MONITORING_METHOD)
    )

    def get_default_monitoring_method(self) -> MonitoringMethod:
        return self.default_monitoring_method


class ChannelInfo(BaseModel):
    """A channel configured at the location."""

    model_config = ConfigDict(frozen=True)

    name: str = "Main"


class LocationInfo(BaseModel):
    """The location a field visit belongs to.

    Attributes:
        name: Location name
        identifier: Location identifier
        utc_offset_hours: Fixed offset of the location's local time from UTC
        channels: Channels configured at the location
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    identifier: str | None = None
    utc_offset_hours: float = 0.0
    channels: list[ChannelInfo] = Field(default_factory=list)

    @property
    def utc_offset(self) -> datetime.timezone:
        """The UTC offset as a fixed timezone."""
        return datetime.timezone(datetime.timedelta(hours=self.utc_offset_hours))
