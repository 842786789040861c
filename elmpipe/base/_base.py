"""Random initialization of the input weights and the bias of the hidden layer."""

# License: BSD 3 clause

from typing import Tuple, Union

import numpy as np


def _uniform_random_input_weights(
        n_features_in: Union[int, np.integer],
        hidden_layer_size: Union[int, np.integer],
        random_state: np.random.RandomState,
        weight_range: Tuple[float, float] = (-1., 1.)) -> np.ndarray:
    """
    Return uniform random input weights in range weight_range.

    Parameters
    ----------
    n_features_in : Union[int, np.integer]
    hidden_layer_size : Union[int, np.integer]
    random_state : numpy.random.RandomState
    weight_range : Tuple[float, float], default = (-1., 1.)
        Lower and upper bound of the uniform distribution.

    Returns
    -------
    uniform_random_input_weights : np.ndarray
       of size (hidden_layer_size, n_features_in)
    """
    low, high = weight_range
    return random_state.uniform(
        low=low, high=high, size=(hidden_layer_size, n_features_in))


def _uniform_random_bias(hidden_layer_size: Union[int, np.integer],
                         random_state: np.random.RandomState,
                         bias_range: Tuple[float, float] = (-1., 1.)) \
        -> np.ndarray:
    """
    Return uniform random bias in range bias_range.

    Parameters
    ----------
    hidden_layer_size : Union[int, np.integer]
    random_state : numpy.random.RandomState
    bias_range : Tuple[float, float], default = (-1., 1.)
        Lower and upper bound of the uniform distribution.

    Returns
    -------
    uniform_random_bias : ndarray of size (hidden_layer_size)
    """
    low, high = bias_range
    return random_state.uniform(low=low, high=high, size=hidden_layer_size)


def _node_inputs(X: np.ndarray, input_weights: np.ndarray,
                 bias: np.ndarray) -> np.ndarray:
    """
    Multiply the inputs with the input weights and add the bias.

    The bias is broadcast over the rows of X.

    Parameters
    ----------
    X : ndarray of size (n_samples, n_features)
    input_weights : ndarray of size (hidden_layer_size, n_features)
    bias : ndarray of size (hidden_layer_size)

    Returns
    -------
    node_inputs : ndarray of size (n_samples, hidden_layer_size)
    """
    with np.errstate(over='ignore', invalid='ignore'):
        return np.matmul(X, input_weights.T) + bias
