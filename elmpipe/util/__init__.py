"""The :mod:`elmpipe.util` has utilities for running experiments."""

# License: BSD 3 clause

from ._util import argument_parser, configure_logging, new_logger

__all__ = ('argument_parser', 'configure_logging', 'new_logger')
