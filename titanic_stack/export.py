"""
Prediction export in the submission format: ``PassengerId,Survived``.
"""

import os

import numpy as np
import pandas as pd

from .config import SUBMISSION_PATTERN


def predict_all(models, X_test):
    """Predicted labels of every model, one column per model, in test order"""
    return pd.DataFrame(
        {name: np.asarray(model.predict(X_test)).astype(int) for name, model in models.items()},
        index=X_test.index
    )


def make_submission(passenger_ids, labels):
    """Build and validate a two-column submission frame"""
    passenger_ids = np.asarray(passenger_ids)
    labels = np.asarray(labels)
    if len(passenger_ids) != len(labels):
        raise ValueError(
            f"{len(labels)} predictions for {len(passenger_ids)} test passengers"
        )
    if not np.isin(labels, [0, 1]).all():
        raise ValueError(f"Survived must be 0 or 1, got {sorted(set(labels.tolist()))}")

    return pd.DataFrame({
        'PassengerId': passenger_ids.astype(int),
        'Survived': labels.astype(int)
    })


def write_submission(passenger_ids, labels, path):
    submission = make_submission(passenger_ids, labels)
    submission.to_csv(path, index=False)
    return submission


def export_predictions(predictions, out_dir):
    """
    Write one submission file per prediction column.

    ``predictions`` is the frame from ``predict_all``, indexed by
    PassengerId. Returns a dict of model name to written path.
    """
    os.makedirs(out_dir, exist_ok=True)

    paths = {}
    for name in predictions.columns:
        path = os.path.join(out_dir, SUBMISSION_PATTERN.format(name=name))
        write_submission(predictions.index, predictions[name], path)
        paths[name] = path
    return paths
