# uastats/errors.py


class UAStatsError(Exception):
    """Base class for uastats errors"""


class LogIngestionError(UAStatsError):
    """Reading an access log failed. The underlying error is chained as __cause__."""

    def __init__(self, path, message: str):
        super().__init__(f"Error processing log file: {message}")
        self.path = path
