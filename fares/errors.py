"""
Fare Errors

Exceptions raised by the fare calculator.
"""


class ConfigurationError(ValueError):
    """Fare, cap or peak-hour configuration is missing or invalid."""
