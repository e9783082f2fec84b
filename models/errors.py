"""
Data access errors.
"""


class NotFoundError(LookupError):
    """
    Raised when a requested record does not exist.

    Carries an HTTP-style status code so the error handlers can relay it.
    """

    status_code = 404

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
