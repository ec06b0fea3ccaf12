"""
Error taxonomy for the calculators.

Parse failures are returned as values (see ``voltkit.units.ParseError``).
Everything a calculator rejects is raised as a ``CalculationError`` so that
callers can turn it into a single display message.
"""


class CalculationError(ValueError):
    """Base class for calculator failures. Always recoverable."""


class ValidationError(CalculationError):
    """An input violates a precondition (negative, zero, non-finite, ...)."""


class DomainError(CalculationError):
    """The input combination has no meaning for the circuit model."""
