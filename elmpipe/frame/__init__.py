"""
The :mod:`elmpipe.frame` connects pandas DataFrames to the ELM: it extracts
feature matrices and label vectors, splits datasets and appends predictions.
"""

# License: BSD 3 clause

from ._frame import (assemble_features, extract_features_labels,
                     train_test_split_frame, transform)

__all__ = ('assemble_features',
           'extract_features_labels',
           'train_test_split_frame',
           'transform')
