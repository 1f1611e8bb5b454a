"""
Hyperparameter selection by repeated cross-validation, and the fitted models
it produces.
"""

import numpy as np
from sklearn.model_selection import GridSearchCV, ParameterGrid, RepeatedStratifiedKFold

from .config import DECISION_THRESHOLD, METRIC, METRICS, N_JOBS, N_REPEATS, N_SPLITS, RANDOM_STATE
from .errors import InsufficientDataError, TrainingFailure
from .models import CLASSIFIERS, get_kind


class TrainedModel:
    """
    A classifier refitted on the whole training set with its selected
    hyperparameters.

    ``cv_scores`` holds the score of the selected configuration on every
    resample, which is what the model comparison summarises.
    """

    def __init__(self, name, estimator, best_params, cv_score, cv_scores, metric):
        self.name = name
        self.estimator = estimator
        self.best_params = dict(best_params)
        self.cv_score = float(cv_score)
        self.cv_scores = np.asarray(cv_scores, dtype=float)
        self.metric = metric

    def predict_proba(self, X):
        """Probability of survival for every row of X"""
        positive = list(self.estimator.classes_).index(1)
        return self.estimator.predict_proba(X)[:, positive]

    def predict(self, X):
        return np.asarray(self.estimator.predict(X)).astype(int)

    def __repr__(self):
        return (f"TrainedModel({self.name!r}, {self.metric}={self.cv_score:.4f}, "
                f"params={self.best_params})")


def check_labels(y):
    """Raise if y does not hold both classes"""
    classes = np.unique(np.asarray(y))
    if len(classes) < 2:
        raise InsufficientDataError(
            f"Need two label classes to train, found {classes.tolist()}"
        )


class ModelTrainer:
    """
    Grid search each classifier kind over repeated stratified k-fold
    cross-validation, then refit the winner on every training row.
    """

    def __init__(self, metric=METRIC, n_splits=N_SPLITS, n_repeats=N_REPEATS,
                 n_jobs=N_JOBS, random_state=RANDOM_STATE, classifiers=None,
                 verbose=True):
        if metric not in METRICS:
            raise ValueError(f"metric must be one of {METRICS}, got {metric!r}")
        if n_splits < 2 or n_repeats < 1:
            raise ValueError(
                f"need at least 2 folds and 1 repeat, got {n_splits} and {n_repeats}"
            )
        self.metric = metric
        self.n_splits = n_splits
        self.n_repeats = n_repeats
        self.n_jobs = n_jobs
        self.random_state = random_state
        self.classifiers = CLASSIFIERS if classifiers is None else classifiers
        self.verbose = verbose

    def _cv(self):
        return RepeatedStratifiedKFold(
            n_splits=self.n_splits,
            n_repeats=self.n_repeats,
            random_state=self.random_state
        )

    def train_one(self, name, X, y):
        """Select and fit one classifier kind"""
        check_labels(y)
        kind = get_kind(name, self.classifiers)
        cv = self._cv()

        if self.verbose:
            n_points = len(ParameterGrid(kind.param_grid))
            print(f"🔧 Tuning {name}: {n_points} grid points x {cv.get_n_splits()} resamples...")

        search = GridSearchCV(
            kind.factory(self.random_state),
            kind.param_grid,
            scoring=self.metric,
            cv=cv,
            n_jobs=self.n_jobs,
            refit=True,
            error_score='raise'
        )
        try:
            search.fit(X, y)
        except Exception as exc:
            raise TrainingFailure(name, f"{type(exc).__name__}: {exc}") from exc

        if np.isnan(search.best_score_):
            raise TrainingFailure(name, f"no grid point produced a finite {self.metric}")

        best = search.best_index_
        cv_scores = [
            search.cv_results_[f'split{i}_test_score'][best]
            for i in range(cv.get_n_splits())
        ]
        model = TrainedModel(
            name,
            search.best_estimator_,
            search.best_params_,
            search.best_score_,
            cv_scores,
            self.metric
        )

        if self.verbose:
            print(f"✅ {name}: {self.metric} = {model.cv_score:.4f} with {model.best_params}")

        return model

    def train_all(self, X, y, names=None):
        """
        Train every requested kind.

        Returns ``(models, failures)``. A kind that fails is reported in
        ``failures`` and left out of ``models``; the others still train.
        """
        check_labels(y)
        names = list(self.classifiers) if names is None else list(names)

        models = {}
        failures = {}
        for name in names:
            try:
                models[name] = self.train_one(name, X, y)
            except TrainingFailure as exc:
                failures[name] = exc
                if self.verbose:
                    print(f"❌ {exc}")

        return models, failures


def predict_labels(probabilities, threshold=DECISION_THRESHOLD):
    return (np.asarray(probabilities) >= threshold).astype(int)
