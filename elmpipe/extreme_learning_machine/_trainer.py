"""The :mod:`trainer` contains the closed-form training of the ELM."""

# License: BSD 3 clause

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import Any, Tuple, Union

import numpy as np
import scipy.linalg
from sklearn.utils import check_random_state

from ..base import (ActivationFunction, check_activation, _node_inputs,
                    _uniform_random_bias, _uniform_random_input_weights)
from ..exceptions import (InvalidConfigurationError, InvalidInputError,
                          NumericalFailureError)
from ._model import ELMModel


logger = logging.getLogger(__name__)


def _check_range(value: Any, name: str) -> Tuple[float, float]:
    try:
        low, high = value
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            "{0} must be a pair (low, high), got {1}.".format(name, value))
    if not (isinstance(low, Real) and isinstance(high, Real)
            and np.isfinite(low) and np.isfinite(high) and low <= high):
        raise InvalidConfigurationError(
            "{0} must be a finite pair with low <= high, got {1}."
            .format(name, value))
    return float(low), float(high)


def _check_hidden_nodes(hidden_nodes: Any) -> int:
    if isinstance(hidden_nodes, bool) or not isinstance(hidden_nodes,
                                                        Integral):
        raise InvalidConfigurationError(
            "hidden_nodes must be an integer, got {0}.".format(hidden_nodes))
    if hidden_nodes <= 0:
        raise InvalidConfigurationError(
            "hidden_nodes must be > 0, got {0}.".format(hidden_nodes))
    return int(hidden_nodes)


def _check_training_data(X: Any, T: Any) -> Tuple[np.ndarray, np.ndarray]:
    try:
        X = np.asarray(X, dtype=np.float64)
        T = np.asarray(T, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "X and T must be numeric arrays: {0}".format(e)) from e
    if X.ndim != 2:
        raise InvalidInputError(
            "X must be a 2-dimensional feature matrix, got shape {0}."
            .format(X.shape))
    if X.shape[0] < 1:
        raise InvalidInputError(
            "At least one training sample is required, got {0}."
            .format(X.shape[0]))
    if X.shape[1] < 1:
        raise InvalidInputError(
            "At least one feature is required, got {0}.".format(X.shape[1]))
    if T.ndim != 1:
        raise InvalidInputError(
            "T must be a 1-dimensional label vector, got shape {0}."
            .format(T.shape))
    if T.shape[0] != X.shape[0]:
        raise InvalidInputError(
            "Found {0} label(s) for {1} training sample(s)."
            .format(T.shape[0], X.shape[0]))
    if not np.all(np.isfinite(X)):
        raise InvalidInputError("X contains NaN or infinity.")
    if not np.all(np.isfinite(T)):
        raise InvalidInputError("T contains NaN or infinity.")
    return X, T


class ELMTrainer:
    """
    Closed-form training of an Extreme Learning Machine.

    The input weights and the bias of the hidden layer are drawn from uniform
    distributions, the output weights are the least-squares solution computed
    with the Moore-Penrose pseudo-inverse of the hidden layer output matrix
    [#]_.

    Parameters
    ----------
    weight_range : Tuple[float, float], default = (-1., 1.)
        Bounds of the uniform distribution of the input weights.
    bias_range : Tuple[float, float], default = (-1., 1.)
        Bounds of the uniform distribution of the bias.
    random_state : Union[int, np.random.RandomState, None], default = 42
        An integer seeds a new generator in every call to ``train``, which
        makes training reproducible. A RandomState instance is used as is and
        is advanced by each call.

    References
    ----------
    .. [#] Guang-Bin Huang et al., ‘Extreme learning machine: Theory and
           applications’, p. 489-501, 2006, doi: 10.1016/j.neucom.2005.12.126.
    """

    def __init__(self, *,
                 weight_range: Tuple[float, float] = (-1., 1.),
                 bias_range: Tuple[float, float] = (-1., 1.),
                 random_state: Union[int, np.random.RandomState,
                                     None] = 42) -> None:
        """Construct the ELMTrainer."""
        self.weight_range = _check_range(weight_range, 'weight_range')
        self.bias_range = _check_range(bias_range, 'bias_range')
        self.random_state = random_state

    def train(self, X: np.ndarray, T: np.ndarray, hidden_nodes: int,
              activation: Union[ActivationFunction, str]) -> ELMModel:
        """
        Train an ELMModel.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The feature matrix, one row per training sample.
        T : ndarray of shape (n_samples, )
            The labels, usually 0. and 1.
        hidden_nodes : int
            The number of hidden nodes L.
        activation : Union[ActivationFunction, str]
            The activation function of the hidden layer.

        Returns
        -------
        model : ELMModel
        """
        hidden_nodes = _check_hidden_nodes(hidden_nodes)
        activation = check_activation(activation)
        X, T = _check_training_data(X, T)
        n_samples, n_features = X.shape
        logger.debug("Training on %d samples with %d features and %d hidden "
                     "nodes.", n_samples, n_features, hidden_nodes)

        random_state = check_random_state(self.random_state)
        input_weights = _uniform_random_input_weights(
            n_features_in=n_features, hidden_layer_size=hidden_nodes,
            random_state=random_state, weight_range=self.weight_range)
        bias = _uniform_random_bias(
            hidden_layer_size=hidden_nodes, random_state=random_state,
            bias_range=self.bias_range)

        hidden_layer_state = _node_inputs(X, input_weights, bias)
        if not np.all(np.isfinite(hidden_layer_state)):
            raise NumericalFailureError(
                "The input projection overflowed, the hidden layer inputs "
                "contain NaN or infinity.")
        hidden_layer_state = activation(hidden_layer_state)
        if not np.all(np.isfinite(hidden_layer_state)):
            raise NumericalFailureError(
                "The hidden layer output matrix contains NaN or infinity.")
        logger.debug("Hidden layer output matrix has shape %s.",
                     hidden_layer_state.shape)

        output_weights = self._solve(hidden_layer_state, T)
        logger.debug("Output weights have length %d.", output_weights.shape[0])

        return ELMModel(input_weights=input_weights, bias=bias,
                        output_weights=output_weights, activation=activation)

    @staticmethod
    def _solve(hidden_layer_state: np.ndarray, T: np.ndarray) -> np.ndarray:
        """
        Compute beta = pinv(H) * T.

        Parameters
        ----------
        hidden_layer_state : ndarray of shape (n_samples, hidden_nodes)
        T : ndarray of shape (n_samples, )

        Returns
        -------
        output_weights : ndarray of shape (hidden_nodes, )
        """
        try:
            pseudo_inverse = scipy.linalg.pinv(hidden_layer_state)
        except (np.linalg.LinAlgError, ValueError) as e:
            raise NumericalFailureError(
                "The pseudo-inverse of the hidden layer output matrix could "
                "not be computed: {0}".format(e)) from e
        output_weights = np.matmul(pseudo_inverse, T)
        if not np.all(np.isfinite(output_weights)):
            raise NumericalFailureError(
                "The output weights contain NaN or infinity.")
        return output_weights

    def __repr__(self) -> str:
        return "ELMTrainer(weight_range={0}, bias_range={1}, " \
               "random_state={2})".format(self.weight_range, self.bias_range,
                                          self.random_state)
