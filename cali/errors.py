"""Exceptions raised by the cali core."""


class CaliError(Exception):
    """Base class for errors reported to the user."""


class CorruptDataError(CaliError):
    """The data file exists but cannot be read as a cali store."""


class SaveError(CaliError):
    """Writing the data file failed; the previous file is left in place."""


class InvalidAmountError(CaliError, ValueError):
    """An amount was negative, non-finite or not a number."""


class UnknownMetricError(CaliError, ValueError):
    """A metric name is not one of the tracked metrics."""


class InvalidDateError(CaliError, ValueError):
    """A date string is not an ISO-8601 calendar date."""
