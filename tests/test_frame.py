"""Testing for the DataFrame adapters (elmpipe.frame)."""
import numpy as np
import pandas as pd
import pytest

from elmpipe.exceptions import InvalidConfigurationError, InvalidInputError
from elmpipe.extreme_learning_machine import ELMClassifier, ELMTrainer
from elmpipe.frame import (assemble_features, extract_features_labels,
                           train_test_split_frame, transform)


rs = np.random.RandomState(42)
frame = pd.DataFrame({
    'acc_Chest_X': rs.normal(size=40),
    'acc_Chest_Y': rs.normal(size=40),
    'acc_Chest_Z': rs.normal(size=40),
})
frame['binaryLabel'] = (frame['acc_Chest_X'] > 0).astype(int)
feature_cols = ['acc_Chest_X', 'acc_Chest_Y', 'acc_Chest_Z']


def test_assemble_features() -> None:
    print('\ntest_assemble_features():')
    assembled = assemble_features(frame, feature_cols)
    assert 'features' in assembled.columns
    assert 'features' not in frame.columns
    assert assembled['features'].iloc[0].shape == (3, )
    np.testing.assert_array_equal(np.vstack(assembled['features']),
                                  frame[feature_cols].to_numpy())


def test_assemble_features_missing_column() -> None:
    with pytest.raises(InvalidInputError):
        assemble_features(frame, ['acc_Chest_X', 'acc_Arm_X'])
    with pytest.raises(InvalidInputError):
        assemble_features(frame, [])


def test_extract_features_labels() -> None:
    print('\ntest_extract_features_labels():')
    X, T = extract_features_labels(assemble_features(frame, feature_cols))
    assert X.shape == (40, 3)
    assert T.shape == (40, )
    assert X.dtype == np.float64
    np.testing.assert_array_equal(T, frame['binaryLabel'].to_numpy())


def test_extract_features_labels_custom_columns() -> None:
    assembled = assemble_features(frame, feature_cols[:2], output_col='f')
    X, T = extract_features_labels(assembled, features_col='f',
                                   label_col='acc_Chest_Z')
    assert X.shape == (40, 2)
    np.testing.assert_array_equal(T, frame['acc_Chest_Z'].to_numpy())


def test_extract_features_labels_ragged() -> None:
    ragged = pd.DataFrame({
        'features': pd.Series([np.zeros(3), np.zeros(3), np.zeros(2)],
                              dtype=object),
        'binaryLabel': [0, 1, 0]})
    with pytest.raises(InvalidInputError):
        extract_features_labels(ragged)


def test_extract_features_labels_matrix_cell() -> None:
    nested = pd.DataFrame({
        'features': pd.Series([np.zeros(4), np.zeros((2, 2))], dtype=object),
        'binaryLabel': [0, 1]})
    with pytest.raises(InvalidInputError):
        extract_features_labels(nested)


def test_extract_features_labels_empty() -> None:
    assembled = assemble_features(frame, feature_cols)
    with pytest.raises(InvalidInputError):
        extract_features_labels(assembled.iloc[0:0])


def test_extract_features_labels_missing_column() -> None:
    with pytest.raises(InvalidInputError):
        extract_features_labels(frame)
    with pytest.raises(InvalidInputError):
        extract_features_labels(assemble_features(frame, feature_cols),
                                label_col='activityLabel')


def test_train_test_split_frame() -> None:
    print('\ntest_train_test_split_frame():')
    train, test = train_test_split_frame(frame, .25)
    assert len(train) == 30
    assert len(test) == 10
    assert set(train.index).isdisjoint(set(test.index))
    train_2, test_2 = train_test_split_frame(frame, .25)
    pd.testing.assert_frame_equal(train, train_2)


def test_train_test_split_frame_no_test() -> None:
    train, test = train_test_split_frame(frame, 0.)
    assert len(train) == 40
    assert len(test) == 0
    assert list(test.columns) == list(frame.columns)


@pytest.mark.parametrize('frac_test', [1., 1.5, -.1, '0.3', None])
def test_train_test_split_frame_invalid(frac_test) -> None:
    with pytest.raises(InvalidConfigurationError):
        train_test_split_frame(frame, frac_test)


def test_transform_model() -> None:
    print('\ntest_transform_model():')
    assembled = assemble_features(frame, feature_cols)
    model = ELMTrainer().train(*extract_features_labels(assembled),
                               hidden_nodes=20, activation='sigmoid')
    result = transform(model, assembled)
    assert 'prediction' not in assembled.columns
    assert 'rawPrediction' in result.columns
    for row in range(len(result)):
        features = result['features'].iloc[row]
        assert result['prediction'].iloc[row] == model.predict(features)
        np.testing.assert_allclose(result['rawPrediction'].iloc[row],
                                   model.raw_prediction(features),
                                   rtol=1e-9, atol=1e-9)


def test_transform_classifier_after_split() -> None:
    print('\ntest_transform_classifier_after_split():')
    assembled = assemble_features(frame, feature_cols)
    train, test = train_test_split_frame(assembled, .25)
    elm = ELMClassifier(hidden_nodes=20).fit(*extract_features_labels(train))
    result = transform(elm, test, prediction_col='p', raw_prediction_col='r')
    np.testing.assert_array_equal(result.index, test.index)
    for index in test.index:
        features = test.loc[index, 'features']
        assert result.loc[index, 'p'] == elm.predict(features.reshape(1, -1))[0]
        np.testing.assert_allclose(
            result.loc[index, 'r'],
            elm.predict_raw(features.reshape(1, -1))[0], rtol=1e-9, atol=1e-9)


def test_transform_empty_frame() -> None:
    assembled = assemble_features(frame, feature_cols)
    model = ELMTrainer().train(*extract_features_labels(assembled),
                               hidden_nodes=5, activation='tanh')
    result = transform(model, assembled.iloc[0:0])
    assert len(result) == 0
    assert {'prediction', 'rawPrediction'}.issubset(result.columns)


def test_transform_invalid_model() -> None:
    with pytest.raises(TypeError):
        transform(object(), assemble_features(frame, feature_cols))
