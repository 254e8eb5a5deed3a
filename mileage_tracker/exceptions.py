# mileage_tracker/exceptions.py
"""
Domain errors raised by the services layer.
main.py turns every MileageTrackerError into the {success, error} envelope
using the status_code carried by the class.
"""


class MileageTrackerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MileageTrackerError):
    """Malformed, missing or out-of-range input (e.g. endMileage < startMileage)."""
    status_code = 400


class ConflictError(MileageTrackerError):
    """Unique-key collision: plate, badge, or a second active shift for a vehicle."""
    status_code = 400


class NotFoundError(MileageTrackerError):
    """Target record does not exist or is already in a terminal state."""
    status_code = 404
