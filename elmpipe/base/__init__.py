"""
The :mod:`elmpipe.base` contains the activation functions and the random
initialization of the hidden layer of Extreme Learning Machines.
"""

# License: BSD 3 clause

from ._activations import ACTIVATIONS, ActivationFunction, check_activation
from ._base import (_uniform_random_input_weights, _uniform_random_bias,
                    _node_inputs)

__all__ = ('ACTIVATIONS',
           'ActivationFunction',
           'check_activation',
           '_uniform_random_input_weights',
           '_uniform_random_bias',
           '_node_inputs')
