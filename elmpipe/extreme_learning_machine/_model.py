"""The :mod:`model` contains the trained, immutable ELMModel."""

# License: BSD 3 clause

from __future__ import annotations

from typing import Any, Union

import numpy as np

from ..base import ActivationFunction, check_activation, _node_inputs
from ..exceptions import InvalidInputError


def _frozen(array: Any, ndim: int, name: str) -> np.ndarray:
    """Return a read-only float64 copy of array with ndim dimensions."""
    array = np.array(array, dtype=np.float64, copy=True)
    if array.ndim != ndim:
        raise InvalidInputError("{0} must be {1}-dimensional, got shape {2}."
                                .format(name, ndim, array.shape))
    array.setflags(write=False)
    return array


class ELMModel:
    """
    Trained Extreme Learning Machine for binary classification.

    An ELMModel holds the random input weights, the random bias and the output
    weights computed by ``ELMTrainer``, together with the activation function
    of the hidden layer. Its parameters are read-only; ``copy`` returns a new
    instance with some of them replaced.

    Parameters
    ----------
    input_weights : ndarray of shape (hidden_nodes, n_features)
    bias : ndarray of shape (hidden_nodes, )
    output_weights : ndarray of shape (hidden_nodes, )
    activation : Union[ActivationFunction, str]

    Examples
    --------
    >>> import numpy as np
    >>> from elmpipe.extreme_learning_machine import ELMModel
    >>> model = ELMModel(input_weights=np.ones((2, 1)), bias=np.zeros(2),
    ...                  output_weights=np.ones(2), activation='sigmoid')
    >>> model.predict_raw([0.])
    1.0
    """

    __slots__ = ('_input_weights', '_bias', '_output_weights', '_activation')

    def __init__(self, input_weights: np.ndarray, bias: np.ndarray,
                 output_weights: np.ndarray,
                 activation: Union[ActivationFunction, str]) -> None:
        """Construct the ELMModel."""
        input_weights = _frozen(input_weights, 2, 'input_weights')
        bias = _frozen(bias, 1, 'bias')
        output_weights = _frozen(output_weights, 1, 'output_weights')
        if input_weights.shape[0] == 0 or input_weights.shape[1] == 0:
            raise InvalidInputError("input_weights must not be empty, got "
                                    "shape {0}.".format(input_weights.shape))
        if bias.shape[0] != input_weights.shape[0] \
                or output_weights.shape[0] != input_weights.shape[0]:
            raise InvalidInputError(
                "input_weights {0}, bias {1} and output_weights {2} disagree "
                "on the number of hidden nodes."
                .format(input_weights.shape, bias.shape, output_weights.shape))
        self._input_weights = input_weights
        self._bias = bias
        self._output_weights = output_weights
        self._activation = check_activation(activation)

    @property
    def input_weights(self) -> np.ndarray:
        """Return the input weights of shape (hidden_nodes, n_features)."""
        return self._input_weights

    @property
    def bias(self) -> np.ndarray:
        """Return the bias of shape (hidden_nodes, )."""
        return self._bias

    @property
    def output_weights(self) -> np.ndarray:
        """Return the output weights beta of shape (hidden_nodes, )."""
        return self._output_weights

    @property
    def activation(self) -> ActivationFunction:
        """Return the activation function of the hidden layer."""
        return self._activation

    @property
    def hidden_nodes(self) -> int:
        """Return the number of hidden nodes L."""
        return int(self._input_weights.shape[0])

    @property
    def n_features(self) -> int:
        """Return the number of features F the model was trained on."""
        return int(self._input_weights.shape[1])

    def copy(self, **overrides: Any) -> ELMModel:
        """
        Return a new ELMModel, optionally with some parameters replaced.

        Parameters
        ----------
        overrides : Any
            Any of ``input_weights``, ``bias``, ``output_weights`` and
            ``activation``.

        Returns
        -------
        model : ELMModel
        """
        params = {'input_weights': self._input_weights, 'bias': self._bias,
                  'output_weights': self._output_weights,
                  'activation': self._activation}
        unknown = set(overrides) - set(params)
        if unknown:
            raise TypeError("Unknown parameters for ELMModel: {0}."
                            .format(sorted(unknown)))
        params.update(overrides)
        return ELMModel(**params)

    def hidden_layer_state(self, X: np.ndarray) -> np.ndarray:
        """
        Compute the hidden layer output matrix H.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        H : ndarray of shape (n_samples, hidden_nodes)
        """
        X = self._check_matrix(X)
        return self._activation(_node_inputs(X, self._input_weights,
                                             self._bias))

    def predict_raw(self, row: np.ndarray) -> float:
        """
        Compute the raw score of a single feature vector.

        Parameters
        ----------
        row : ndarray of shape (n_features, )

        Returns
        -------
        score : float
        """
        row = self._check_row(row)
        with np.errstate(over='ignore', invalid='ignore'):
            node_inputs = np.matmul(self._input_weights, row) + self._bias
        return float(np.dot(self._output_weights,
                            self._activation(node_inputs)))

    def raw_prediction(self, row: np.ndarray) -> np.ndarray:
        """
        Compute the two-class raw prediction (-margin, margin).

        The margin is the raw score shifted by the decision threshold 0.5, so
        that picking the argmax is the same as thresholding the score.

        Parameters
        ----------
        row : ndarray of shape (n_features, )

        Returns
        -------
        raw_prediction : ndarray of shape (2, )
        """
        margin = self.predict_raw(row) - .5
        return np.array([-margin, margin])

    def predict(self, row: np.ndarray) -> int:
        """
        Predict the label of a single feature vector.

        Parameters
        ----------
        row : ndarray of shape (n_features, )

        Returns
        -------
        label : int
            1 if the raw score is >= 0.5, otherwise 0.
        """
        return int(self.predict_raw(row) >= .5)

    def predict_batch(self, X: np.ndarray) -> np.ndarray:
        """
        Compute the raw scores of all rows of X at once.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        scores : ndarray of shape (n_samples, )
        """
        return np.matmul(self.hidden_layer_state(X), self._output_weights)

    def predict_labels(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the labels of all rows of X.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        labels : ndarray of shape (n_samples, ) with values in {0, 1}
        """
        return (self.predict_batch(X) >= .5).astype(int)

    def _check_row(self, row: Any) -> np.ndarray:
        row = np.asarray(row, dtype=np.float64)
        if row.ndim != 1 or row.shape[0] != self.n_features:
            raise InvalidInputError(
                "Expected a feature vector of length {0}, got shape {1}."
                .format(self.n_features, row.shape))
        return row

    def _check_matrix(self, X: Any) -> np.ndarray:
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2 or X.shape[1] != self.n_features:
            raise InvalidInputError(
                "Expected a feature matrix with {0} columns, got shape {1}."
                .format(self.n_features, X.shape))
        return X

    def __sizeof__(self) -> int:
        """
        Return the size of the object in bytes.

        Returns
        -------
        size : int
        Object memory in bytes.
        """
        return object.__sizeof__(self) + self._input_weights.nbytes + \
            self._bias.nbytes + self._output_weights.nbytes

    def __repr__(self) -> str:
        return "ELMModel(hidden_nodes={0}, n_features={1}, activation='{2}')"\
            .format(self.hidden_nodes, self.n_features, self._activation.name)

    def __reduce__(self) -> tuple:
        return ELMModel, (self._input_weights, self._bias,
                          self._output_weights, self._activation)
