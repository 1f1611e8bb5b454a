"""
Classifier kinds available to the trainer.

Each kind is a scikit-learn compatible estimator factory plus the grid its
hyperparameters are selected from. Anything exposing ``fit``,
``predict_proba`` and ``predict`` can be registered.
"""

from collections import namedtuple

import lightgbm as lgb
import xgboost as xgb
from sklearn.discriminant_analysis import (LinearDiscriminantAnalysis,
                                           QuadraticDiscriminantAnalysis)
from sklearn.ensemble import (AdaBoostClassifier, BaggingClassifier,
                              GradientBoostingClassifier, RandomForestClassifier)
from sklearn.linear_model import LogisticRegression
from sklearn.neighbors import KNeighborsClassifier
from sklearn.neural_network import MLPClassifier
from sklearn.svm import SVC
from sklearn.tree import DecisionTreeClassifier

ClassifierKind = namedtuple('ClassifierKind', ['name', 'factory', 'param_grid'])


def _glm(random_state):
    return LogisticRegression(max_iter=1000, random_state=random_state)


def _nnet(random_state):
    return MLPClassifier(max_iter=2000, random_state=random_state)


def _rf(random_state):
    return RandomForestClassifier(n_estimators=300, random_state=random_state)


def _gbm(random_state):
    return GradientBoostingClassifier(random_state=random_state)


def _xgb(random_state):
    return xgb.XGBClassifier(
        random_state=random_state,
        eval_metric='logloss',
        n_jobs=1
    )


def _lgb(random_state):
    return lgb.LGBMClassifier(
        random_state=random_state,
        verbose=-1,
        n_jobs=1
    )


def _svm_linear(random_state):
    return SVC(kernel='linear', probability=True, random_state=random_state)


def _svm_rbf(random_state):
    return SVC(kernel='rbf', probability=True, random_state=random_state)


def _lda(random_state):
    return LinearDiscriminantAnalysis()


def _qda(random_state):
    return QuadraticDiscriminantAnalysis()


def _knn(random_state):
    return KNeighborsClassifier()


def _treebag(random_state):
    return BaggingClassifier(
        estimator=DecisionTreeClassifier(random_state=random_state),
        random_state=random_state
    )


def _ada(random_state):
    return AdaBoostClassifier(random_state=random_state)


CLASSIFIERS = {kind.name: kind for kind in [
    ClassifierKind('glm', _glm, {'C': [0.01, 0.1, 1.0, 10.0]}),
    ClassifierKind('nnet', _nnet, {
        'hidden_layer_sizes': [(1,), (3,), (5,)],
        'alpha': [0.1, 0.01, 0.001],
    }),
    ClassifierKind('rf', _rf, {
        'max_features': [0.25, 0.5, 0.75, 1.0],
        'min_samples_leaf': [1, 5],
    }),
    ClassifierKind('gbm', _gbm, {
        'n_estimators': [50, 100, 150],
        'max_depth': [1, 2, 3],
        'learning_rate': [0.1],
    }),
    ClassifierKind('xgb', _xgb, {
        'n_estimators': [100, 300],
        'max_depth': [2, 4],
        'learning_rate': [0.05, 0.1],
    }),
    ClassifierKind('lgb', _lgb, {
        'n_estimators': [100, 300],
        'num_leaves': [4, 8],
        'learning_rate': [0.05],
    }),
    ClassifierKind('svm_linear', _svm_linear, {'C': [0.25, 0.5, 1.0]}),
    ClassifierKind('svm_rbf', _svm_rbf, {
        'C': [0.25, 0.5, 1.0, 2.0],
        'gamma': ['scale', 0.1, 1.0],
    }),
    ClassifierKind('lda', _lda, {'solver': ['svd', 'lsqr']}),
    ClassifierKind('qda', _qda, {'reg_param': [0.0, 0.1, 0.5]}),
    ClassifierKind('knn', _knn, {'n_neighbors': [5, 7, 9, 11, 13, 15, 17, 19, 21]}),
    ClassifierKind('treebag', _treebag, {'n_estimators': [25, 50, 100]}),
    ClassifierKind('ada', _ada, {
        'n_estimators': [50, 100],
        'learning_rate': [0.5, 1.0],
    }),
]}


def get_kind(name, classifiers=None):
    """Look up a classifier kind by name"""
    classifiers = CLASSIFIERS if classifiers is None else classifiers
    try:
        return classifiers[name]
    except KeyError:
        raise ValueError(
            f"Unknown classifier kind {name!r}; choose from {sorted(classifiers)}"
        ) from None
