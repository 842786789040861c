"""Adapters between pandas DataFrames and the feature matrices of the ELM."""

# License: BSD 3 clause

from __future__ import annotations

from numbers import Real
from typing import Iterable, Tuple, Union

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from ..exceptions import InvalidConfigurationError, InvalidInputError
from ..extreme_learning_machine import ELMClassifier, ELMModel


def _check_columns(frame: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [column for column in columns if column not in frame.columns]
    if missing:
        raise InvalidInputError("Missing column(s) {0}, available columns "
                                "are {1}.".format(missing,
                                                  list(frame.columns)))


def assemble_features(frame: pd.DataFrame, input_cols: Iterable[str],
                      output_col: str = 'features') -> pd.DataFrame:
    """
    Combine scalar columns into a single column of feature vectors.

    Parameters
    ----------
    frame : pd.DataFrame
    input_cols : Iterable[str]
        The scalar columns, in the order of the vector entries.
    output_col : str, default='features'

    Returns
    -------
    frame : pd.DataFrame
        A copy of frame with the additional column output_col.
    """
    input_cols = list(input_cols)
    if not input_cols:
        raise InvalidInputError("At least one input column is required.")
    _check_columns(frame, input_cols)
    try:
        values = frame[input_cols].to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "Input columns must be numeric: {0}".format(e)) from e
    result = frame.copy()
    result[output_col] = pd.Series(list(values), index=frame.index,
                                   dtype=object)
    return result


def _features_matrix(frame: pd.DataFrame, features_col: str) -> np.ndarray:
    """Stack the feature vectors of all rows into a matrix."""
    _check_columns(frame, [features_col])
    if len(frame) == 0:
        raise InvalidInputError("The dataset does not contain any rows.")
    try:
        vectors = [np.asarray(vector, dtype=np.float64)
                   for vector in frame[features_col]]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "Column '{0}' must hold numeric vectors: {1}"
            .format(features_col, e)) from e
    not_1d = [k for k, vector in enumerate(vectors) if vector.ndim != 1]
    if not_1d:
        raise InvalidInputError(
            "Column '{0}' must hold one-dimensional vectors, rows {1} "
            "differ.".format(features_col, not_1d[:10]))
    n_features = vectors[0].shape[0]
    ragged = [k for k, vector in enumerate(vectors)
              if vector.shape[0] != n_features]
    if ragged:
        raise InvalidInputError(
            "All feature vectors must have length {0}, rows {1} differ."
            .format(n_features, ragged[:10]))
    return np.vstack(vectors)


def extract_features_labels(frame: pd.DataFrame,
                            features_col: str = 'features',
                            label_col: str = 'binaryLabel') \
        -> Tuple[np.ndarray, np.ndarray]:
    """
    Extract the feature matrix and the label vector from a DataFrame.

    The number of features is taken from the vector in the first row, and
    every other row has to report the same length.

    Parameters
    ----------
    frame : pd.DataFrame
    features_col : str, default='features'
        Column holding one feature vector per row.
    label_col : str, default='binaryLabel'

    Returns
    -------
    X : ndarray of shape (n_samples, n_features)
    T : ndarray of shape (n_samples, )
    """
    _check_columns(frame, [features_col, label_col])
    X = _features_matrix(frame, features_col)
    try:
        T = frame[label_col].to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "Column '{0}' must be numeric: {1}".format(label_col, e)) from e
    return X, T


def train_test_split_frame(frame: pd.DataFrame, frac_test: float,
                           random_state: Union[int, np.random.RandomState,
                                               None] = 42) \
        -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split a DataFrame randomly into a training and a test part.

    Parameters
    ----------
    frame : pd.DataFrame
    frac_test : float
        Fraction of rows in the test part, in [0, 1). With 0. all rows are
        used for training and the test part is empty.
    random_state : Union[int, np.random.RandomState, None], default=42

    Returns
    -------
    train : pd.DataFrame
    test : pd.DataFrame
    """
    if isinstance(frac_test, bool) or not isinstance(frac_test, Real) \
            or not 0. <= frac_test < 1.:
        raise InvalidConfigurationError(
            "frac_test must be in [0, 1), got {0}.".format(frac_test))
    if frac_test == 0.:
        return frame.copy(), frame.iloc[0:0].copy()
    try:
        train, test = train_test_split(frame, test_size=frac_test,
                                       random_state=random_state)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e
    return train, test


def transform(model: Union[ELMModel, ELMClassifier], frame: pd.DataFrame,
              features_col: str = 'features',
              prediction_col: str = 'prediction',
              raw_prediction_col: str = 'rawPrediction') -> pd.DataFrame:
    """
    Append the predictions of a trained model to a DataFrame.

    Parameters
    ----------
    model : Union[ELMModel, ELMClassifier]
        A trained ELMModel or a fitted ELMClassifier.
    frame : pd.DataFrame
    features_col : str, default='features'
    prediction_col : str, default='prediction'
        Receives the predicted label of each row.
    raw_prediction_col : str, default='rawPrediction'
        Receives the vector (-margin, margin) of each row.

    Returns
    -------
    frame : pd.DataFrame
        A copy of frame with the two additional columns.
    """
    result = frame.copy()
    if len(frame) == 0:
        _check_columns(frame, [features_col])
        result[raw_prediction_col] = pd.Series(dtype=object)
        result[prediction_col] = pd.Series(dtype=np.float64)
        return result

    X = _features_matrix(frame, features_col)
    if isinstance(model, ELMClassifier):
        raw_predictions = model.predict_raw(X)
        predictions = model.predict(X)
    elif isinstance(model, ELMModel):
        margin = model.predict_batch(X) - .5
        raw_predictions = np.column_stack((-margin, margin))
        predictions = (margin >= 0.).astype(np.float64)
    else:
        raise TypeError("model must be an ELMModel or an ELMClassifier, got "
                        "{0}.".format(type(model)))

    result[raw_prediction_col] = pd.Series(list(raw_predictions),
                                           index=frame.index, dtype=object)
    result[prediction_col] = predictions
    return result
