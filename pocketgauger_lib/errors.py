# -*- coding: utf-8 -*-
"""Error handling for PocketGauger record parsing and mapping.

This module provides issue records collected while parsing (not raised)
and the exceptions raised by mapping collaborators.
"""

from dataclasses import dataclass

from pocketgauger_lib.enums import Severity


@dataclass(frozen=True)
class PocketGaugerParseError:
    """Represents a parsing error or warning for a single record.

    This is a data record for storing issue information, not an exception.
    Use PocketGaugerException for raising errors.

    Attributes:
        severity: ERROR or WARNING
        message: Human-readable message
        record_type: Kind of record, e.g. "MeterDetails" (optional)
        record_id: Identifier of the offending record (optional)
    """

    severity: Severity
    message: str
    record_type: str | None = None
    record_id: str | None = None

    def __str__(self) -> str:
        """Format as human-readable issue string."""
        base = f"{self.severity.value}: {self.message}"
        if self.record_type:
            base += f" (in {self.record_type}"
            if self.record_id:
                base += f" {self.record_id}"
            base += ")"
        return base


class PocketGaugerException(Exception):  # noqa: N818
    """Base exception for PocketGauger mapping failures.

    Attributes:
        message: Error message
        record_id: Identifier of the record being mapped (optional)
    """

    def __init__(self, message: str, record_id: str | None = None):
        self.message = message
        self.record_id = record_id
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.record_id:
            return f"{self.message} (record {self.record_id})"
        return self.message

    def to_error(self) -> PocketGaugerParseError:
        """Convert exception to PocketGaugerParseError record."""
        return PocketGaugerParseError(
            severity=Severity.ERROR,
            message=self.message,
            record_id=self.record_id,
        )


class MeterCalibrationError(PocketGaugerException):
    """Raised when a meter calibration cannot be resolved."""
