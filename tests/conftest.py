import numpy as np
import pandas as pd
import pytest

from titanic_stack.features import engineer_features
from titanic_stack.loader import combine_records
from titanic_stack.models import CLASSIFIERS
from titanic_stack.vectorize import split_vectors

COLUMNS = ['PassengerId', 'Survived', 'Pclass', 'Name', 'Sex', 'Age',
           'SibSp', 'Parch', 'Ticket', 'Fare', 'Cabin', 'Embarked']

TRAIN_ROWS = [
    (1, 0, 3, "Braund, Mr. Owen Harris", "male", 22.0, 1, 0, "A/5 21171", 7.25, np.nan, "S"),
    (2, 1, 1, "Cumings, Mrs. John Bradley (Florence Briggs Thayer)", "female", 38.0, 1, 0, "PC 17599", 71.2833, "C85", "C"),
    (3, 1, 3, "Heikkinen, Miss. Laina", "female", 26.0, 0, 0, "STON/O2. 3101282", 7.925, np.nan, "S"),
    (4, 1, 1, "Futrelle, Mrs. Jacques Heath (Lily May Peel)", "female", 35.0, 1, 0, "113803", 53.1, "C123", "S"),
    (5, 0, 3, "Allen, Mr. William Henry", "male", 35.0, 0, 0, "373450", 8.05, np.nan, "S"),
    (6, 0, 3, "Moran, Mr. James", "male", np.nan, 0, 0, "330877", 8.4583, np.nan, "Q"),
    (7, 0, 1, "McCarthy, Mr. Timothy J", "male", 54.0, 0, 0, "17463", 51.8625, "E46", "S"),
    (8, 0, 3, "Palsson, Master. Gosta Leonard", "male", 2.0, 3, 1, "349909", 21.075, np.nan, "S"),
    (9, 1, 2, "Smith, Dr. John", "male", 45.0, 0, 0, "248738", 13.0, "F G73", "S"),
    (10, 0, 3, "Rice, Master. Eugene", "male", 6.0, 4, 1, "382652", 29.125, np.nan, "Q"),
]

TEST_ROWS = [
    (892, 3, "Kelly, Mr. James", "male", 34.5, 0, 0, "330911", 7.8292, np.nan, "Q"),
    (893, 3, "Wilkes, Mrs. James (Ellen Needs)", "female", 47.0, 1, 0, "363272", 7.0, np.nan, "S"),
    (894, 1, "Futrelle, Mr. Jacques Heath", "male", 37.0, 1, 0, "113803", 53.1, "C123", "S"),
    (895, 3, "Peter, Master. Michael J", "male", np.nan, 1, 1, "2668", 22.3583, np.nan, "C"),
]


def raw_frames():
    """Raw train and test frames shaped the way pandas reads the CSVs"""
    train = pd.DataFrame(TRAIN_ROWS, columns=COLUMNS)
    test = pd.DataFrame(TEST_ROWS, columns=[c for c in COLUMNS if c != 'Survived'])
    return train, test


def make_passengers(n_train=60, n_test=15):
    """
    Deterministic synthetic passengers.

    Females and children mostly survive. Only "Mr" rows travelling alone
    and "Miss" rows have missing ages, so every title keeps known ages.
    """
    rows = []
    for i in range(n_train + n_test):
        female = i % 5 in (0, 2)
        pclass = 1 + (i // 2) % 3
        sibsp = i % 3
        parch = (i // 3) % 2
        if female:
            age = 4.0 + (i * 11) % 55
            title = 'Mrs' if sibsp == 1 else 'Miss'
            survived = 0 if (pclass == 3 and i % 4 == 0) else 1
        else:
            age = 2.0 + (i * 7) % 60
            title = 'Master' if age < 12 else 'Mr'
            survived = 1 if (age < 12 or (pclass == 1 and i % 4 == 1)) else 0
        if i % 9 == 0 and title in ('Mr', 'Miss'):
            age = np.nan
        rows.append({
            'PassengerId': i + 1,
            'Survived': survived,
            'Pclass': pclass,
            'Name': f"Family{i // 4}, {title}. Given{i}",
            'Sex': 'female' if female else 'male',
            'Age': age,
            'SibSp': sibsp,
            'Parch': parch,
            'Ticket': f"T{i // 2}",
            'Fare': 10.0 * (4 - pclass) + i % 5,
            'Cabin': f"{'ABCDEFG'[i % 7]}{10 + i}" if pclass == 1 else np.nan,
            'Embarked': 'SCQ'[i % 3],
        })
    frame = pd.DataFrame(rows, columns=COLUMNS)
    train = frame.iloc[:n_train].reset_index(drop=True)
    test = frame.iloc[n_train:].drop(columns='Survived').reset_index(drop=True)
    return train, test


# Reduced grids keep the cross-validation tests fast
SMALL_CLASSIFIERS = {
    'glm': CLASSIFIERS['glm']._replace(param_grid={'C': [0.1, 1.0]}),
    'lda': CLASSIFIERS['lda'],
}


@pytest.fixture
def records():
    return combine_records(*raw_frames())


@pytest.fixture
def engineered(records):
    return engineer_features(records)


@pytest.fixture
def synthetic():
    return make_passengers()


@pytest.fixture
def vectors(synthetic):
    return split_vectors(engineer_features(combine_records(*synthetic)))


@pytest.fixture
def small_classifiers():
    return dict(SMALL_CLASSIFIERS)
