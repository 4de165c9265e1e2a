"""
Custom exceptions for the scoring engine with user-friendly error messages.
"""

class ScoreboardException(Exception):
    """Base exception for scoring engine errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class InvalidPeriodError(ScoreboardException):
    """Raised when a date range is inverted, unknown, or points into the future."""
    def __init__(self, reason: str):
        super().__init__(
            f"Invalid period: {reason}",
            "❌ That date range is not available."
        )
        self.reason = reason

class InvalidWeightPolicyError(ScoreboardException):
    """Raised when a weighting table breaks the monotonic weighting contract."""
    def __init__(self, reason: str):
        super().__init__(
            f"Invalid weighting policy: {reason}",
            "❌ Productivity weighting is misconfigured. Please contact an administrator."
        )
        self.reason = reason

class InvalidConfigurationError(ScoreboardException):
    """Raised when a tunable value cannot be used."""
    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Invalid configuration for '{key}': {reason}",
            "❌ Scoreboard settings are misconfigured. Please contact an administrator."
        )
        self.key = key
        self.reason = reason
