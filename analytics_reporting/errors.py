"""
Failure types raised by the reporting client.
"""


class ReportingError(Exception):
    """Base class for every failure of a reporting run."""


class SetupError(ReportingError):
    """Credentials or the API service object could not be prepared."""


class RemoteCallError(ReportingError):
    """The batchGet call failed or was rejected by the API."""
