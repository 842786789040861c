"""The :mod:`extreme_learning_machine` contains the ELMClassifier."""

# License: BSD 3 clause

from __future__ import annotations

import logging
import sys
from numbers import Integral, Real
from typing import Literal, Optional, Tuple, Union

import numpy as np
from joblib import Parallel, delayed
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.preprocessing import LabelBinarizer
from sklearn.utils import check_array, check_X_y
from sklearn.utils.validation import check_is_fitted

from ..base import ACTIVATIONS
from ..exceptions import InvalidConfigurationError, InvalidInputError
from ._trainer import ELMTrainer


logger = logging.getLogger(__name__)


class ELMClassifier(ClassifierMixin, BaseEstimator):
    """
    Extreme Learning Machine binary classifier.

    The estimator wraps ``ELMTrainer`` and ``ELMModel`` so that they can be
    used as a step of a scikit-learn pipeline. The two classes found in ``y``
    are mapped to the targets 0. and 1., the output weights are fitted in
    closed form and a sample is assigned to the second class if its raw score
    is >= 0.5.

    Parameters
    ----------
    hidden_nodes : int, default=500
        Number of nodes in the hidden layer.
    activation_func : Literal['sigmoid', 'tanh'], default='sigmoid'
        Activation function of the hidden layer.
    frac_test : float, default=0.
        Fraction of a dataset that is held back for testing. Only used by
        ``elmpipe.frame.train_test_split_frame``, ignored by ``fit``.
    weight_range : Tuple[float, float], default=(-1., 1.)
        Bounds of the uniform distribution of the input weights.
    bias_range : Tuple[float, float], default=(-1., 1.)
        Bounds of the uniform distribution of the bias.
    random_state : Union[int, np.random.RandomState, None], default=42
    chunk_size : Optional[int], default=None
        if X.shape[0] > chunk_size, compute the predictions chunk-wise
    n_jobs : Optional[int], default=None
        The number of threads used for chunk-wise predictions. ```-1```
        means using all processors.
    verbose : bool = False
        Verbosity output
    """

    def __init__(self, *,
                 hidden_nodes: int = 500,
                 activation_func: Literal['sigmoid', 'tanh'] = 'sigmoid',
                 frac_test: float = 0.,
                 weight_range: Tuple[float, float] = (-1., 1.),
                 bias_range: Tuple[float, float] = (-1., 1.),
                 random_state: Union[int, np.random.RandomState, None] = 42,
                 chunk_size: Optional[int] = None,
                 n_jobs: Optional[int] = None,
                 verbose: bool = False) -> None:
        """Construct the ELMClassifier."""
        self.hidden_nodes = hidden_nodes
        self.activation_func = activation_func
        self.frac_test = frac_test
        self.weight_range = weight_range
        self.bias_range = bias_range
        self.random_state = random_state
        self.chunk_size = chunk_size
        self.n_jobs = n_jobs
        self.verbose = verbose

    def fit(self, X: np.ndarray, y: np.ndarray) -> ELMClassifier:
        """
        Fit the classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The labels, exactly two distinct values.

        Returns
        -------
        self : Returns a trained ELMClassifier model.
        """
        self._validate_hyperparameters()
        try:
            X, y = check_X_y(X, y, dtype=np.float64)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        encoder = LabelBinarizer().fit(y)
        if len(encoder.classes_) != 2:
            raise InvalidInputError(
                "This is a binary classifier, the number of classes should "
                "be 2, got {0}.".format(len(encoder.classes_)))
        T = encoder.transform(y).ravel().astype(np.float64)

        trainer = ELMTrainer(weight_range=self.weight_range,
                             bias_range=self.bias_range,
                             random_state=self.random_state)
        model = trainer.train(X, T, hidden_nodes=self.hidden_nodes,
                              activation=self.activation_func)

        self.model_ = model
        self.encoder_ = encoder
        self.classes_ = encoder.classes_
        self.n_features_in_ = X.shape[1]
        logger.debug("Fitted on X of shape %s with %d classes %s.",
                     X.shape, len(self.classes_), list(self.classes_))
        if self.verbose:
            logger.info("Fitted %r on %d samples.", model, X.shape[0])
        return self

    def decision_function(self, X: np.ndarray) -> np.ndarray:
        """
        Compute the raw scores using the trained ```ELMClassifier```.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        scores : ndarray of shape (n_samples, )
        """
        check_is_fitted(self, 'model_')
        try:
            X = check_array(X, dtype=np.float64)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        if self.chunk_size is None or self.chunk_size >= X.shape[0]:
            return self.model_.predict_batch(X)

        chunks = range(0, X.shape[0], self.chunk_size)
        scores = Parallel(n_jobs=self.n_jobs, prefer='threads')(
            delayed(self.model_.predict_batch)(X[idx:idx + self.chunk_size])
            for idx in chunks)
        return np.concatenate(scores)

    def predict_raw(self, X: np.ndarray) -> np.ndarray:
        """
        Compute the two-class raw predictions (-margin, margin).

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        raw_predictions : ndarray of shape (n_samples, 2)
        """
        margin = self.decision_function(X) - .5
        return np.column_stack((-margin, margin))

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the classes using the trained ```ELMClassifier```.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The input data.

        Returns
        -------
        y_pred : ndarray of shape (n_samples,)
            The predicted classes.
        """
        scores = self.decision_function(X)
        return self.classes_[(scores >= .5).astype(int)]

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the probability estimated using the trained ```ELMClassifier```.

        The raw score is clipped to [0, 1] and used as probability of the
        second class.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The input data.

        Returns
        -------
        y_pred : ndarray of shape (n_samples, 2)
            The predicted probability estimates.
        """
        predicted_positive = np.clip(self.decision_function(X), 0., 1.)
        return np.column_stack((1. - predicted_positive, predicted_positive))

    def hidden_layer_state(self, X: np.ndarray) -> np.ndarray:
        """
        Return the hidden layer output matrix H for X.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        hidden_layer_state : ndarray of shape (n_samples, hidden_nodes)
        """
        check_is_fitted(self, 'model_')
        return self.model_.hidden_layer_state(X)

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        if isinstance(self.hidden_nodes, bool) \
                or not isinstance(self.hidden_nodes, Integral) \
                or self.hidden_nodes <= 0:
            raise InvalidConfigurationError(
                "hidden_nodes must be a positive integer, got {0}."
                .format(self.hidden_nodes))
        if self.activation_func not in ACTIVATIONS:
            raise InvalidConfigurationError(
                "The activation function '{0}' is not supported. Supported "
                "activations are {1}."
                .format(self.activation_func, sorted(ACTIVATIONS)))
        if not isinstance(self.frac_test, Real) \
                or not 0. <= self.frac_test < 1.:
            raise InvalidConfigurationError(
                "frac_test must be in [0, 1), got {0}."
                .format(self.frac_test))
        if self.chunk_size is not None \
                and (not isinstance(self.chunk_size, Integral)
                     or self.chunk_size <= 0):
            raise InvalidConfigurationError(
                "Invalid value for chunk_size, got {0}."
                .format(self.chunk_size))

    def __sizeof__(self) -> int:
        """
        Return the size of the object in bytes.

        Returns
        -------
        size : int
            Object memory in bytes.
        """
        size = object.__sizeof__(self)
        if hasattr(self, 'model_'):
            size += sys.getsizeof(self.model_)
        return size
