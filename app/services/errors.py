# /student-records/app/services/errors.py

"""
Error taxonomy shared by the repositories, the services and the routers.

Each error carries the HTTP status it maps to, so the routers can build the
response envelope without a lookup table of their own.
"""


class StudentRecordsError(Exception):
    """Base class for every expected failure of a data-access operation."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StudentRecordsError):
    """Required input is missing or malformed. Raised before touching the store."""
    status_code = 400


class NotFoundError(StudentRecordsError):
    """A referenced student, subject or mark does not exist."""
    status_code = 404


class ConflictError(StudentRecordsError):
    """A uniqueness rule would be violated (pre-check or store constraint)."""
    status_code = 409


class StoreError(StudentRecordsError):
    """Unexpected persistence failure. Never retried."""
    status_code = 500
