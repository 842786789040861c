"""Flat binary persistence of trained ELMModels."""

# License: BSD 3 clause

import os
import struct
from typing import IO, Union

import numpy as np

from ..base import ACTIVATIONS
from ..exceptions import ModelFormatError
from ..extreme_learning_machine import ELMModel


MAGIC = b'ELMM'
FORMAT_VERSION = 1

# magic, format version, n_features, hidden_nodes, length of activation name
_HEADER = struct.Struct('<4sHIIH')
_FLOAT = np.dtype('<f8')


def dumps_model(model: ELMModel) -> bytes:
    """
    Serialize a trained ELMModel.

    The record starts with a header (magic, format version, n_features,
    hidden_nodes, length of the activation name), followed by the UTF-8
    activation name and the little endian float64 arrays of the input weights
    (row-major), the bias and the output weights.

    Parameters
    ----------
    model : ELMModel

    Returns
    -------
    data : bytes
    """
    name = model.activation.name.encode('utf-8')
    return b''.join((
        _HEADER.pack(MAGIC, FORMAT_VERSION, model.n_features,
                     model.hidden_nodes, len(name)),
        name,
        np.ascontiguousarray(model.input_weights, dtype=_FLOAT).tobytes(),
        np.ascontiguousarray(model.bias, dtype=_FLOAT).tobytes(),
        np.ascontiguousarray(model.output_weights, dtype=_FLOAT).tobytes()))


def loads_model(data: bytes) -> ELMModel:
    """
    Deserialize an ELMModel written by ``dumps_model``.

    Parameters
    ----------
    data : bytes

    Returns
    -------
    model : ELMModel
    """
    if len(data) < _HEADER.size:
        raise ModelFormatError("Truncated header, got {0} bytes."
                               .format(len(data)))
    magic, version, n_features, hidden_nodes, name_length = \
        _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise ModelFormatError("Not an ELM model, magic is {0!r}."
                               .format(magic))
    if version != FORMAT_VERSION:
        raise ModelFormatError("Unsupported format version {0}, expected {1}."
                               .format(version, FORMAT_VERSION))
    if n_features == 0 or hidden_nodes == 0:
        raise ModelFormatError("Empty model with {0} features and {1} hidden "
                               "nodes.".format(n_features, hidden_nodes))

    offset = _HEADER.size
    try:
        name = data[offset:offset + name_length].decode('utf-8')
    except UnicodeDecodeError as e:
        raise ModelFormatError("Invalid activation name.") from e
    if len(name.encode('utf-8')) != name_length or name not in ACTIVATIONS:
        raise ModelFormatError("Unknown activation function '{0}'."
                               .format(name))
    offset += name_length

    n_values = hidden_nodes * n_features + 2 * hidden_nodes
    if len(data) != offset + n_values * _FLOAT.itemsize:
        raise ModelFormatError(
            "Expected {0} bytes of parameters, got {1}."
            .format(n_values * _FLOAT.itemsize, len(data) - offset))
    values = np.frombuffer(data, dtype=_FLOAT, count=n_values, offset=offset)
    n_weights = hidden_nodes * n_features
    return ELMModel(
        input_weights=values[:n_weights].reshape(hidden_nodes, n_features),
        bias=values[n_weights:n_weights + hidden_nodes],
        output_weights=values[n_weights + hidden_nodes:],
        activation=name)


def dump_model(model: ELMModel, file: Union[str, os.PathLike, IO]) -> None:
    """
    Write a trained ELMModel to a path or a binary file object.

    Parameters
    ----------
    model : ELMModel
    file : Union[str, os.PathLike, IO]
    """
    data = dumps_model(model)
    if hasattr(file, 'write'):
        file.write(data)
    else:
        with open(file, 'wb') as f:
            f.write(data)


def load_model(file: Union[str, os.PathLike, IO]) -> ELMModel:
    """
    Read an ELMModel from a path or a binary file object.

    Parameters
    ----------
    file : Union[str, os.PathLike, IO]

    Returns
    -------
    model : ELMModel
    """
    if hasattr(file, 'read'):
        return loads_model(file.read())
    with open(file, 'rb') as f:
        return loads_model(f.read())
