"""Testing for the ELMClassifier estimator."""
import numpy as np
import pytest
from sklearn.base import clone
from sklearn.datasets import make_blobs, load_iris
from sklearn.exceptions import NotFittedError
from sklearn.model_selection import GridSearchCV, train_test_split
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from elmpipe.exceptions import InvalidConfigurationError, InvalidInputError
from elmpipe.extreme_learning_machine import ELMClassifier, ELMModel


X_blobs, y_blobs = make_blobs(n_samples=200, centers=[[-3., -3.], [3., 3.]],
                              cluster_std=.8, random_state=42)


def test_elm_get_params() -> None:
    print('\ntest_elm_get_params():')
    elm = ELMClassifier(hidden_nodes=20, activation_func='tanh', frac_test=.2)
    elm_params = elm.get_params()
    print(elm_params)
    assert elm_params['hidden_nodes'] == 20
    assert elm_params['activation_func'] == 'tanh'
    assert elm_params['frac_test'] == .2


def test_elm_set_params() -> None:
    elm = ELMClassifier().set_params(hidden_nodes=15, activation_func='tanh')
    assert elm.hidden_nodes == 15
    assert elm.activation_func == 'tanh'


def test_elm_classifier_fit() -> None:
    print('\ntest_elm_classifier_fit():')
    X_train, X_test, y_train, y_test = train_test_split(
        X_blobs, y_blobs, test_size=.25, random_state=42)
    elm = ELMClassifier(hidden_nodes=20).fit(X_train, y_train)
    assert isinstance(elm.model_, ELMModel)
    assert elm.model_.hidden_nodes == 20
    assert elm.n_features_in_ == 2
    np.testing.assert_array_equal(elm.classes_, [0, 1])
    print('score: {0}'.format(elm.score(X_test, y_test)))
    assert elm.score(X_test, y_test) >= .95


def test_elm_classifier_string_labels() -> None:
    y = np.where(y_blobs == 1, 'moving', 'stationary')
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y)
    np.testing.assert_array_equal(elm.classes_, ['moving', 'stationary'])
    y_pred = elm.predict(X_blobs)
    assert set(y_pred).issubset({'moving', 'stationary'})
    assert np.mean(y_pred == y) >= .95


def test_elm_classifier_float_labels() -> None:
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y_blobs.astype(float))
    np.testing.assert_array_equal(elm.classes_, [0., 1.])


def test_elm_classifier_reproducible() -> None:
    elm_1 = ELMClassifier(hidden_nodes=10, random_state=1).fit(X_blobs, y_blobs)
    elm_2 = ELMClassifier(hidden_nodes=10, random_state=1).fit(X_blobs, y_blobs)
    np.testing.assert_array_equal(elm_1.decision_function(X_blobs),
                                  elm_2.decision_function(X_blobs))


def test_decision_function_and_predict() -> None:
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y_blobs)
    scores = elm.decision_function(X_blobs)
    np.testing.assert_array_equal(scores, elm.model_.predict_batch(X_blobs))
    np.testing.assert_array_equal(elm.predict(X_blobs),
                                  elm.classes_[(scores >= .5).astype(int)])


def test_predict_raw() -> None:
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y_blobs)
    raw = elm.predict_raw(X_blobs)
    assert raw.shape == (200, 2)
    np.testing.assert_array_equal(raw[:, 0], -raw[:, 1])
    np.testing.assert_array_equal(elm.classes_[np.argmax(raw, axis=1)],
                                  elm.predict(X_blobs))


def test_predict_proba() -> None:
    print('\ntest_predict_proba():')
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y_blobs)
    proba = elm.predict_proba(X_blobs)
    assert proba.shape == (200, 2)
    assert np.all((proba >= 0.) & (proba <= 1.))
    np.testing.assert_allclose(proba.sum(axis=1), 1.)


def test_chunked_predictions() -> None:
    print('\ntest_chunked_predictions():')
    elm = ELMClassifier(hidden_nodes=20).fit(X_blobs, y_blobs)
    expected = elm.decision_function(X_blobs)
    elm.set_params(chunk_size=7, n_jobs=2)
    np.testing.assert_allclose(elm.decision_function(X_blobs), expected,
                               rtol=1e-9, atol=1e-12)
    np.testing.assert_array_equal(elm.predict(X_blobs),
                                  elm.classes_[(expected >= .5).astype(int)])


def test_hidden_layer_state() -> None:
    elm = ELMClassifier(hidden_nodes=12).fit(X_blobs, y_blobs)
    assert elm.hidden_layer_state(X_blobs).shape == (200, 12)


def test_elm_classifier_not_fitted() -> None:
    with pytest.raises(NotFittedError):
        ELMClassifier(hidden_nodes=50, verbose=True).predict(X_blobs)
    with pytest.raises(NotFittedError):
        ELMClassifier().predict(np.zeros((2, 3)))
    with pytest.raises(NotFittedError):
        ELMClassifier().predict_proba(X_blobs)
    with pytest.raises(NotFittedError):
        ELMClassifier().hidden_layer_state(X_blobs)


def test_elm_classifier_verbose(caplog) -> None:
    with caplog.at_level('INFO', logger='elmpipe'):
        ELMClassifier(hidden_nodes=5, verbose=True).fit(X_blobs, y_blobs)
    assert 'Fitted' in caplog.text


@pytest.mark.parametrize('params', [{'hidden_nodes': 0},
                                    {'hidden_nodes': -5},
                                    {'hidden_nodes': 2.},
                                    {'activation_func': 'relu'},
                                    {'frac_test': 1.},
                                    {'frac_test': -.1},
                                    {'chunk_size': -1},
                                    {'chunk_size': 0},
                                    {'weight_range': (1., 0.)}])
def test_elm_classifier_no_valid_params(params) -> None:
    with pytest.raises(InvalidConfigurationError):
        ELMClassifier(**params).fit(X_blobs, y_blobs)


def test_elm_classifier_not_binary() -> None:
    X, y = load_iris(return_X_y=True)
    with pytest.raises(InvalidInputError):
        ELMClassifier(hidden_nodes=10).fit(X, y)
    with pytest.raises(InvalidInputError):
        ELMClassifier(hidden_nodes=10).fit(X, np.zeros(X.shape[0]))


def test_elm_classifier_invalid_input() -> None:
    with pytest.raises(InvalidInputError):
        ELMClassifier().fit(np.empty((0, 2)), np.empty(0))
    with pytest.raises(InvalidInputError):
        ELMClassifier().fit(X_blobs, y_blobs[:-1])
    elm = ELMClassifier(hidden_nodes=10).fit(X_blobs, y_blobs)
    with pytest.raises(InvalidInputError):
        elm.predict(np.zeros((3, 5)))


def test_failed_fit_keeps_model() -> None:
    elm = ELMClassifier(hidden_nodes=10).fit(X_blobs, y_blobs)
    model = elm.model_
    X, y = load_iris(return_X_y=True)
    with pytest.raises(InvalidInputError):
        elm.fit(X, y)
    assert elm.model_ is model


def test_elm_clone() -> None:
    elm = ELMClassifier(hidden_nodes=10, activation_func='tanh')
    elm.fit(X_blobs, y_blobs)
    cloned = clone(elm)
    assert cloned.get_params() == elm.get_params()
    assert not hasattr(cloned, 'model_')


def test_elm_pipeline() -> None:
    print('\ntest_elm_pipeline():')
    pipeline = make_pipeline(StandardScaler(),
                             ELMClassifier(hidden_nodes=20))
    pipeline.fit(X_blobs * 1e3, y_blobs)
    assert pipeline.score(X_blobs * 1e3, y_blobs) >= .95


def test_elm_grid_search_hidden_nodes() -> None:
    print('\ntest_elm_grid_search_hidden_nodes():')
    param_grid = {'hidden_nodes': [5, 20],
                  'activation_func': ['sigmoid', 'tanh']}
    elm = GridSearchCV(ELMClassifier(), param_grid, n_jobs=2)
    elm.fit(X_blobs, y_blobs)
    print("best_params_: {0}".format(elm.best_params_))
    print("best_score: {0}".format(elm.best_score_))
    assert elm.best_params_['hidden_nodes'] in (5, 20)
    assert elm.best_score_ >= .95


def test_elm_classifier_logs_shapes(caplog) -> None:
    with caplog.at_level('DEBUG', logger='elmpipe'):
        ELMClassifier(hidden_nodes=5).fit(X_blobs, y_blobs)
    assert '(200, 2)' in caplog.text
    assert '2 classes' in caplog.text
