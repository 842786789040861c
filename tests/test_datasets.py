"""Testing for the dataset loaders (elmpipe.datasets)."""
import io

import numpy as np
import pytest

from elmpipe.datasets import MHEALTH_COLUMNS, load_mhealth
from elmpipe.exceptions import InvalidInputError


def _log(labels, n_columns: int = 24) -> str:
    rs = np.random.RandomState(0)
    lines = []
    for label in labels:
        values = rs.normal(size=n_columns - 1)
        lines.append('\t'.join(['{0:.4f}'.format(v) for v in values]
                               + [str(label)]))
    return '\n'.join(lines) + '\n'


def test_mhealth_columns() -> None:
    assert len(MHEALTH_COLUMNS) == 24
    assert MHEALTH_COLUMNS[:3] == ['acc_Chest_X', 'acc_Chest_Y', 'acc_Chest_Z']
    assert MHEALTH_COLUMNS[-1] == 'activityLabel'


def test_load_mhealth(tmp_path) -> None:
    print('\ntest_load_mhealth():')
    path = tmp_path / 'mHealth_subject1.log'
    path.write_text(_log([0, 1, 2, 0, 3, 4, 12]))
    frame = load_mhealth(path)
    assert len(frame) == 5
    np.testing.assert_array_equal(frame['activityLabel'], [1, 2, 3, 4, 12])
    np.testing.assert_array_equal(frame['binaryLabel'], [0, 0, 0, 1, 1])
    np.testing.assert_array_equal(frame['uniqueID'], np.arange(5))
    assert set(MHEALTH_COLUMNS).issubset(frame.columns)


def test_load_mhealth_buffer() -> None:
    frame = load_mhealth(io.StringIO(_log([5, 6])), binary=False)
    assert len(frame) == 2
    assert 'binaryLabel' not in frame.columns


def test_load_mhealth_wrong_columns() -> None:
    with pytest.raises(InvalidInputError):
        load_mhealth(io.StringIO(_log([1, 2], n_columns=10)))


def test_load_mhealth_missing_file(tmp_path) -> None:
    with pytest.raises(InvalidInputError):
        load_mhealth(tmp_path / 'missing.log')


def test_load_mhealth_empty() -> None:
    with pytest.raises(InvalidInputError):
        load_mhealth(io.StringIO(''))
