# grid_generator/errors.py


class InvalidArgumentError(ValueError):
    """Raised when a grid operation is called with an argument it cannot accept."""
