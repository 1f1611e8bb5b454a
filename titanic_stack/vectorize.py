"""
Map engineered passenger records onto fixed numeric feature vectors.
"""

import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

from .config import AGE_SCALE, FEATURE_COLUMNS, PCLASS_LEVELS, SEX_LEVELS
from .errors import EncodingError


def _check_levels(values, levels, name, ids):
    bad = ~values.isin(levels).fillna(False)
    if bad.any():
        found = sorted(set(values[bad].astype('object').fillna('<NA>').tolist()), key=str)
        raise EncodingError(
            f"Unexpected {name} value(s) {found} for PassengerId {ids[bad].tolist()}"
        )


def _plus_minus(condition):
    """+1 where condition holds, -1 elsewhere"""
    return condition.astype(float) * 2.0 - 1.0


class FeatureVectorizer(BaseEstimator, TransformerMixin):
    """
    Fixed encoding of age, sex and passenger class.

    ``age`` is ``ImputedAge / 40 - 1``, ``sex`` is -1 for female and +1 for
    male, and the class dummies are +1/-1 with third class as the baseline.
    Nothing is learned in ``fit``: the constants are identical for every
    table this is applied to.
    """

    def fit(self, X, y=None):
        return self

    def transform(self, X):
        ids = X['PassengerId'].reset_index(drop=True)
        sex = X['Sex'].reset_index(drop=True)
        pclass = X['Pclass'].reset_index(drop=True)
        age = X['ImputedAge'].reset_index(drop=True)

        _check_levels(sex, SEX_LEVELS, 'Sex', ids)
        _check_levels(pclass, PCLASS_LEVELS, 'Pclass', ids)
        if age.isna().any():
            raise EncodingError(
                f"PassengerId {ids[age.isna()].tolist()} have no imputed age"
            )

        vectors = pd.DataFrame({
            'age': age.astype(float).to_numpy() / AGE_SCALE - 1.0,
            'sex': _plus_minus((sex == SEX_LEVELS[1]).to_numpy(dtype=bool)),
            'isFirstClass': _plus_minus((pclass == 1).to_numpy(dtype=bool)),
            'isSecondClass': _plus_minus((pclass == 2).to_numpy(dtype=bool)),
        }, index=pd.Index(ids.astype(int).to_numpy(), name='PassengerId'))

        return vectors[FEATURE_COLUMNS]


def split_vectors(engineered):
    """
    Vectorize the engineered table and split it by origin.

    Returns ``(X_train, y_train, X_test)``; every frame is indexed by
    PassengerId and keeps the original row order.
    """
    vectorizer = FeatureVectorizer()
    is_train = (engineered['Origin'] == 'train').to_numpy(dtype=bool)

    X_train = vectorizer.transform(engineered[is_train])
    X_test = vectorizer.transform(engineered[~is_train])
    y_train = pd.Series(
        engineered.loc[is_train, 'Survived'].astype(int).to_numpy(),
        index=X_train.index,
        name='Survived',
    )
    return X_train, y_train, X_test
