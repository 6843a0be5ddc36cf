"""
Exception hierarchy for pricefit.

All exceptions inherit from PriceFitError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PriceFitError(Exception):
    """Base exception for all pricefit errors."""
    pass


class ValidationError(PriceFitError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few observations to fit a line.
    
    Raised before any computation when the observation count is below
    the minimum a straight line needs.
    
    Attributes:
        n_observations: Number of observations supplied
        required: Minimum number of observations needed
    """
    
    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.required = required


class CapacityError(PriceFitError):
    """
    A bounded collection is full.
    
    Attributes:
        capacity: Maximum number of items the collection accepts
    """
    
    def __init__(self, message: str, capacity: int | None = None):
        super().__init__(message)
        self.capacity = capacity


class ObservationNotFoundError(PriceFitError, KeyError):
    """
    No observation has the requested id.
    
    Subclasses KeyError so mapping-style callers can catch it as usual.
    
    Attributes:
        observation_id: The id that was looked up
    """
    
    def __init__(self, message: str, observation_id: str | None = None):
        super().__init__(message)
        self.observation_id = observation_id
    
    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ''
