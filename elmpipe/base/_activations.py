"""The :mod:`activations` contains the activation functions of the hidden layer."""

# License: BSD 3 clause

from __future__ import annotations

from typing import Callable, Dict, Union

import numpy as np
from sklearn.neural_network._base import ACTIVATIONS as SKLEARN_ACTIVATIONS

from ..exceptions import InvalidConfigurationError


# 'sigmoid' is scikit-learn's inplace logistic, computed with
# scipy.special.expit, which saturates to 0. and 1. instead of overflowing.
ACTIVATIONS: Dict[str, Callable[[np.ndarray], None]] = {
    'sigmoid': SKLEARN_ACTIVATIONS['logistic'],
    'tanh': SKLEARN_ACTIVATIONS['tanh']
}


class ActivationFunction:
    """
    Elementwise nonlinearity of the hidden layer.

    The set of variants is closed: only the names listed in ``ACTIVATIONS``
    are accepted, and an unknown name is rejected on construction.

    Parameters
    ----------
    name : Literal['sigmoid', 'tanh']
        - 'sigmoid', the logistic sigmoid function,
        returns f(x) = 1/(1+exp(-x)).
        - 'tanh', the hyperbolic tan function, returns f(x) = tanh(x).

    Examples
    --------
    >>> from elmpipe.base import ActivationFunction
    >>> ActivationFunction('sigmoid').apply(0.)
    0.5
    """

    __slots__ = ('_name', )

    def __init__(self, name: str) -> None:
        """Construct the ActivationFunction."""
        if not isinstance(name, str) or name not in ACTIVATIONS:
            raise InvalidConfigurationError(
                "The activation function '{0}' is not supported. Supported "
                "activations are {1}.".format(name, sorted(ACTIVATIONS)))
        self._name = name

    @property
    def name(self) -> str:
        """
        Return the name of the activation function.

        Returns
        -------
        name : str
        """
        return self._name

    def apply(self, x: float) -> float:
        """
        Apply the activation function to a single value.

        Parameters
        ----------
        x : float

        Returns
        -------
        y : float
        """
        y = np.array([x], dtype=np.float64)
        ACTIVATIONS[self._name](y)
        return float(y[0])

    def __call__(self, X: np.ndarray) -> np.ndarray:
        """
        Apply the activation function elementwise to an array.

        Parameters
        ----------
        X : ndarray of any shape

        Returns
        -------
        y : ndarray of the same shape as X
            A new array, X is left untouched.
        """
        y = np.array(X, dtype=np.float64, copy=True)
        ACTIVATIONS[self._name](y)
        return y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActivationFunction):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return "ActivationFunction('{0}')".format(self._name)

    def __reduce__(self) -> tuple:
        return ActivationFunction, (self._name, )


def check_activation(activation: Union[ActivationFunction, str]) \
        -> ActivationFunction:
    """
    Turn a name into an ActivationFunction, pass instances through.

    Parameters
    ----------
    activation : Union[ActivationFunction, str]

    Returns
    -------
    activation : ActivationFunction
    """
    if isinstance(activation, ActivationFunction):
        return activation
    return ActivationFunction(activation)
