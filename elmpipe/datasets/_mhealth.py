"""Loader for the MHEALTH activity recognition logs."""

# License: BSD 3 clause

import logging
import os
from typing import IO, List, Union

import numpy as np
import pandas as pd

from ..exceptions import InvalidInputError


logger = logging.getLogger(__name__)


MHEALTH_COLUMNS: List[str] = [
    'acc_Chest_X', 'acc_Chest_Y', 'acc_Chest_Z',
    'ecg_1', 'ecg_2',
    'acc_Ankle_X', 'acc_Ankle_Y', 'acc_Ankle_Z',
    'gyro_Ankle_X', 'gyro_Ankle_Y', 'gyro_Ankle_Z',
    'mag_Ankle_X', 'mag_Ankle_Y', 'mag_Ankle_Z',
    'acc_Arm_X', 'acc_Arm_Y', 'acc_Arm_Z',
    'gyro_Arm_X', 'gyro_Arm_Y', 'gyro_Arm_Z',
    'mag_Arm_X', 'mag_Arm_Y', 'mag_Arm_Z',
    'activityLabel']

# activities 1 to 3 (standing, sitting, lying down) are the negative class
STATIONARY_ACTIVITIES = (1, 3)


def load_mhealth(filepath_or_buffer: Union[str, os.PathLike, IO], *,
                 binary: bool = True) -> pd.DataFrame:
    """
    Load one subject log of the MHEALTH dataset [#]_.

    Each line of a log holds 23 whitespace-separated sensor readings and the
    activity label. Rows of the null class (label 0) are dropped.

    Parameters
    ----------
    filepath_or_buffer : Union[str, os.PathLike, IO]
        Path or open file of a ``mHealth_subject<k>.log`` file.
    binary : bool, default=True
        Add the column ``binaryLabel``, which is 0 for the stationary
        activities 1 to 3 and 1 for all other activities.

    Returns
    -------
    frame : pd.DataFrame
        The sensor readings, ``activityLabel``, ``uniqueID`` and, if
        requested, ``binaryLabel``.

    References
    ----------
    .. [#] O. Banos et al., ‘mHealthDroid: a novel framework for agile
           development of mobile health applications’, Proceedings of the
           6th International Work-conference on Ambient Assisted Living and
           Active Ageing, 2014.
    """
    try:
        frame = pd.read_csv(filepath_or_buffer, sep=r'\s+', header=None,
                            dtype=np.float64)
    except FileNotFoundError as e:
        raise InvalidInputError(
            "MHEALTH log not found: {0}".format(filepath_or_buffer)) from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError,
            ValueError) as e:
        raise InvalidInputError(
            "Could not parse MHEALTH log: {0}".format(e)) from e

    if frame.shape[1] != len(MHEALTH_COLUMNS):
        raise InvalidInputError(
            "Expected {0} columns in a MHEALTH log, got {1}."
            .format(len(MHEALTH_COLUMNS), frame.shape[1]))
    frame.columns = MHEALTH_COLUMNS
    frame['activityLabel'] = frame['activityLabel'].astype(int)

    frame = frame[frame['activityLabel'] > 0].reset_index(drop=True)
    if binary:
        low, high = STATIONARY_ACTIVITIES
        frame['binaryLabel'] = np.where(
            frame['activityLabel'].between(low, high), 0, 1)
    frame['uniqueID'] = np.arange(len(frame))
    logger.info("Loaded %d labelled samples.", len(frame))
    return frame
