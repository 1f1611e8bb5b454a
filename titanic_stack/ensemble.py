"""
Second-stage models built on top of the trained base classifiers.
"""

import numpy as np
import pandas as pd

from .config import AVERAGED_NAME, META_KIND, STACKED_NAME
from .training import check_labels, predict_labels


def base_probabilities(base_models, X):
    """One column of survival probabilities per base model"""
    return pd.DataFrame(
        {name: model.predict_proba(X) for name, model in base_models.items()},
        index=X.index
    )


class StackingEnsemble:
    """
    Meta classifier over the base models' predicted probabilities.

    The meta features are the base models' in-sample predictions on the
    very rows they were fitted on, not out-of-fold predictions. Cross-
    validated scores of the stacked model are therefore optimistic.
    """

    def __init__(self, trainer, meta_kind=META_KIND, name=STACKED_NAME):
        self.trainer = trainer
        self.meta_kind = meta_kind
        self.name = name
        self.base_models = {}
        self.meta_model = None

    def fit(self, base_models, X, y):
        """Train the meta classifier on the base models' training predictions"""
        if not base_models:
            raise ValueError("Stacking needs at least one trained base model")
        check_labels(y)

        if self.trainer.verbose:
            print(f"🚀 Training stacked {self.meta_kind} over {len(base_models)} base models...")

        self.base_models = dict(base_models)
        meta_features = base_probabilities(self.base_models, X)
        self.meta_model = self.trainer.train_one(self.meta_kind, meta_features, y)
        return self

    def meta_features(self, X):
        return base_probabilities(self.base_models, X)

    def predict_proba(self, X):
        return self.meta_model.predict_proba(self.meta_features(X))

    def predict(self, X):
        return self.meta_model.predict(self.meta_features(X))


class AveragingEnsemble:
    """Unweighted mean of the base models' survival probabilities"""

    def __init__(self, base_models, name=AVERAGED_NAME):
        if not base_models:
            raise ValueError("Averaging needs at least one trained base model")
        self.base_models = dict(base_models)
        self.name = name

    def predict_proba(self, X):
        return base_probabilities(self.base_models, X).mean(axis=1).to_numpy()

    def predict(self, X):
        return predict_labels(self.predict_proba(X))
