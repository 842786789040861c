"""The :mod:`elmpipe.util` has utilities for running experiments."""

# License: BSD 3 clause

import argparse
import logging
import os
import sys

from ..base import ACTIVATIONS


argument_parser = argparse.ArgumentParser(
    description='Standard input parser for ELM experiments.')
argument_parser.add_argument('-o', '--out', metavar='outdir', nargs='?',
                             help='output directory', dest='out', type=str)
argument_parser.add_argument('-d', '--data', metavar='datafile',
                             help='MHEALTH subject log', dest='data', type=str)
argument_parser.add_argument('--hidden-nodes', dest='hidden_nodes', type=int,
                             default=100, help='number of hidden nodes')
argument_parser.add_argument('--activation-func', dest='activation_func',
                             choices=sorted(ACTIVATIONS), default='sigmoid',
                             help='activation function of the hidden layer')
argument_parser.add_argument('--frac-test', dest='frac_test', type=float,
                             default=.3, help='fraction of test samples')
argument_parser.add_argument('--random-state', dest='random_state', type=int,
                             default=42, help='seed of the random weights')
argument_parser.add_argument(dest='params', metavar='params', nargs='*',
                             help='optional parameter for scripts')


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records of experiment scripts to stdout."""
    # noinspection PyArgumentList
    logging.basicConfig(
        level=level,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def new_logger(name: str, directory: str = os.getcwd()) -> logging.Logger:
    """Register a new logger for logfiles."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s %(message)s')
    handler = logging.FileHandler(
        os.path.join(directory, '{0}.log'.format(name)))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
