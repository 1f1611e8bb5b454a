"""
Record loading: read the train and test sources into one typed table.
"""

import pandas as pd

from .errors import LoadError

# Nullable dtypes: a missing value is pd.NA, never a sentinel number
SCHEMA = {
    'PassengerId': 'Int64',
    'Survived': 'Int64',
    'Pclass': 'Int64',
    'Name': 'string',
    'Sex': 'string',
    'Age': 'Float64',
    'SibSp': 'Int64',
    'Parch': 'Int64',
    'Ticket': 'string',
    'Fare': 'Float64',
    'Cabin': 'string',
    'Embarked': 'string',
}

TEST_COLUMNS = [col for col in SCHEMA if col != 'Survived']
TRAIN_COLUMNS = list(SCHEMA)
REQUIRED_FIELDS = ['PassengerId', 'Pclass', 'Sex', 'Name', 'SibSp', 'Parch', 'Ticket']


def _read_csv(path):
    try:
        return pd.read_csv(path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise LoadError(f"Cannot read {path}: {exc}") from exc


def _coerce(df, columns, origin):
    """Check the columns of one source and cast them to the schema"""
    missing_cols = [col for col in columns if col not in df.columns]
    if missing_cols:
        raise LoadError(f"{origin} source is missing column(s) {missing_cols}")

    typed = pd.DataFrame(index=df.index)
    for col in columns:
        try:
            typed[col] = df[col].astype(SCHEMA[col])
        except (TypeError, ValueError) as exc:
            raise LoadError(f"{origin} column {col!r} is not {SCHEMA[col]}: {exc}") from exc

    for col in REQUIRED_FIELDS:
        absent = typed[col].isna()
        if absent.any():
            rows = [int(i) for i in absent[absent].index]
            ids = typed.loc[absent, 'PassengerId'].tolist()
            raise LoadError(
                f"{origin} rows {rows} (PassengerId {ids}) have no {col}"
            )

    return typed


def combine_records(train, test):
    """
    Combine raw train and test frames into one ordered, typed table.

    Train rows come first, then test rows, each in source order. The
    ``Origin`` column tags every row; test rows carry ``Survived = <NA>``.
    """
    train_typed = _coerce(train, TRAIN_COLUMNS, 'train')
    test_typed = _coerce(test, TEST_COLUMNS, 'test')

    bad_label = ~train_typed['Survived'].isin([0, 1]).fillna(False)
    if bad_label.any():
        ids = train_typed.loc[bad_label, 'PassengerId'].tolist()
        raise LoadError(f"train PassengerId {ids} have no 0/1 Survived label")

    train_typed['Origin'] = 'train'
    test_typed['Survived'] = pd.array([pd.NA] * len(test_typed), dtype='Int64')
    test_typed['Origin'] = 'test'

    full = pd.concat([train_typed, test_typed[TRAIN_COLUMNS + ['Origin']]], ignore_index=True)
    full['Origin'] = full['Origin'].astype('string')

    duplicated = full['PassengerId'].duplicated(keep=False)
    if duplicated.any():
        ids = sorted(set(full.loc[duplicated, 'PassengerId'].tolist()))
        raise LoadError(f"PassengerId values collide: {ids}")

    return full


def load_records(train_path, test_path):
    """Read the train and test CSV sources into one combined table"""
    return combine_records(_read_csv(train_path), _read_csv(test_path))
