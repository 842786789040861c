"""
The :mod:`elmpipe.extreme_learning_machine` contains a simple object-oriented
implementation of Extreme Learning Machines [#]_ for binary classification.

``ELMTrainer`` computes the closed-form solution, ``ELMModel`` is the
immutable result and ``ELMClassifier`` plugs both into scikit-learn.

References
----------
    .. [#] Guang-Bin Huang et al., ‘Extreme learning machine: Theory and
           applications’, p. 489-501, 2006, doi: 10.1016/j.neucom.2005.12.126.
"""

# License: BSD 3 clause

from ._model import ELMModel
from ._trainer import ELMTrainer
from ._elm import ELMClassifier

__all__ = ('ELMClassifier',
           'ELMModel',
           'ELMTrainer')
