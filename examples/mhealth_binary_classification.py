#!/bin/python

"""
Binary activity classification on a MHEALTH subject log with an ELM.

Stationary activities (standing, sitting, lying down) are separated from all
other activities using the chest and arm accelerometers.

Usage:
    python mhealth_binary_classification.py -d mHealth_subject1.log \
        --hidden-nodes 100 --activation-func sigmoid --frac-test .3
"""

import os
import logging

import pandas as pd

from sklearn.metrics import accuracy_score, confusion_matrix
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from elmpipe.datasets import load_mhealth
from elmpipe.extreme_learning_machine import ELMClassifier
from elmpipe.frame import (assemble_features, extract_features_labels,
                           train_test_split_frame, transform)
from elmpipe.model_io import dump_model
from elmpipe.util import argument_parser, configure_logging, new_logger

feature_cols = ['acc_Chest_X', 'acc_Chest_Y', 'acc_Chest_Z',
                'acc_Arm_X', 'acc_Arm_Y', 'acc_Arm_Z']


def main(args):
    directory = args.out or os.getcwd()
    logger = new_logger('mhealth_binary_classification', directory=directory)

    data = assemble_features(load_mhealth(args.data), feature_cols)
    logger.info('Loaded {0} records'.format(len(data)))

    cls = ELMClassifier(hidden_nodes=args.hidden_nodes,
                        activation_func=args.activation_func,
                        frac_test=args.frac_test,
                        random_state=args.random_state)
    train, test = train_test_split_frame(
        data, cls.frac_test, random_state=args.random_state)

    X_train, y_train = extract_features_labels(train)
    pipeline = make_pipeline(StandardScaler(), cls).fit(X_train, y_train)
    logger.info('Training accuracy: {0}'.format(
        accuracy_score(y_train, pipeline.predict(X_train))))

    if len(test) > 0:
        X_test, y_test = extract_features_labels(test)
        y_pred = pipeline.predict(X_test)
        logger.info('Test accuracy: {0}'.format(accuracy_score(y_test, y_pred)))
        logger.info('Confusion matrix:\n{0}'.format(
            confusion_matrix(y_test, y_pred)))

        scaled = pd.DataFrame({'uniqueID': test['uniqueID'].to_numpy(),
                               'binaryLabel': y_test,
                               'features': pd.Series(
                                   list(pipeline[0].transform(X_test)),
                                   dtype=object)})
        predictions = transform(pipeline[-1], scaled)
        logger.info('Predictions:\n{0}'.format(
            predictions[['uniqueID', 'binaryLabel', 'prediction']].head()))

    dump_model(pipeline[-1].model_, os.path.join(directory, 'mhealth_elm.bin'))


if __name__ == '__main__':
    configure_logging(logging.INFO)
    main(argument_parser.parse_args())
