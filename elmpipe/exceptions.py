"""The :mod:`elmpipe.exceptions` module includes all custom errors."""

# License: BSD 3 clause

__all__ = ('InvalidConfigurationError',
           'InvalidInputError',
           'NumericalFailureError',
           'ModelFormatError')


class InvalidConfigurationError(ValueError):
    """
    Exception class to raise if a hyper-parameter is not valid.

    This covers unknown activation functions, non-positive numbers of hidden
    nodes and invalid sampling ranges.
    """


class InvalidInputError(ValueError):
    """
    Exception class to raise if the data passed to an operation is malformed.

    Shape and length mismatches, ragged feature vectors, empty datasets and
    non-finite inputs end up here.
    """


class NumericalFailureError(ArithmeticError):
    """
    Exception class to raise if the closed-form solution cannot be computed.

    Raised when the hidden layer contains non-finite values or when the
    singular value decomposition behind the pseudo-inverse does not converge.
    """


class ModelFormatError(InvalidInputError):
    """Exception class to raise if a serialized model cannot be decoded."""
