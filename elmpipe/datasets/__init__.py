"""The :mod:`elmpipe.datasets` includes loaders for the experiment datasets."""

# License: BSD 3 clause

from ._mhealth import MHEALTH_COLUMNS, load_mhealth

__all__ = ('MHEALTH_COLUMNS',
           'load_mhealth')
