"""The :mod:`elmpipe` module implements Extreme Learning Machine classifiers."""

# License: BSD 3 clause

import logging

from ._version import __version__

from . import (base, datasets, exceptions, extreme_learning_machine, frame,
               model_io, util)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ('__version__',
           'base',
           'datasets',
           'exceptions',
           'extreme_learning_machine',
           'frame',
           'model_io',
           'util')
