"""Exceptions raised by the barbershop core."""


class InvalidConfiguration(ValueError):
    """Raised when shop parameters are out of range."""


class Cancelled(Exception):
    """Raised to a barber blocked in ``take_next`` that was asked to stop."""
