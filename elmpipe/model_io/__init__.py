"""The :mod:`elmpipe.model_io` stores trained ELMModels as flat binary records."""

# License: BSD 3 clause

from ._model_io import (FORMAT_VERSION, MAGIC, dump_model, dumps_model,
                        load_model, loads_model)

__all__ = ('FORMAT_VERSION',
           'MAGIC',
           'dump_model',
           'dumps_model',
           'load_model',
           'loads_model')
