"""
Feature engineering for the combined Titanic passenger table.

Age medians and ticket groups are computed over whatever population the
transformer is fitted on. The pipeline fits on the full train+test table,
so test rows shape the imputation and grouping; this is kept on purpose so
runs are reproducible against earlier results.
"""

from sklearn.base import BaseEstimator, TransformerMixin

from .config import RARE_TITLE, TITLE_MERGES, TITLES
from .errors import ImputationError


def extract_title(names):
    """Raw honorific: text after the first ", " up to the next "." """
    return names.str.extract(r'^.*?, (.*?)\.', expand=False)


def normalize_titles(raw_titles, sibsp):
    """
    Fold raw titles into the closed set in ``TITLES``.

    The merge table runs in order as exact-string replacements, then "Mr"
    becomes "Bach" for anyone whose SibSp is not exactly 1. Titles still
    outside the set (including unparseable names) fold into "Hon".
    """
    titles = raw_titles.astype('string').fillna('')
    for old, new in TITLE_MERGES:
        titles = titles.mask(titles == old, new)

    bachelor = (titles == 'Mr') & (sibsp != 1).fillna(False)
    titles = titles.mask(bachelor, 'Bach')
    return titles.where(titles.isin(TITLES), RARE_TITLE)


def extract_surname(names):
    return names.str.split(',', n=1).str[0]


def extract_deck(cabins):
    """Deck letter from the cabin's leading alphabetic run"""
    return cabins.str.extract(r'^([A-Za-z])', expand=False)


def extract_cabin_number(cabins):
    numbers = cabins.astype('string').str.extract(r'([0-9]+)', expand=False)
    return numbers.astype('Int64')


def title_age_medians(titles, ages):
    """Median known age per normalized title"""
    return ages.groupby(titles).median()


class TitanicFeatureEngineering(BaseEstimator, TransformerMixin):
    """
    Derive titles, surnames, cabin, age, family and ticket-group features
    """

    def fit(self, X, y=None):
        """Learn the per-title median ages"""
        titles = normalize_titles(extract_title(X['Name']), X['SibSp'])
        self.age_medians_ = title_age_medians(titles, X['Age'])

        # No global fallback: a title without a single known age is fatal
        no_exemplars = self.age_medians_.isna()
        if no_exemplars.any():
            title = no_exemplars[no_exemplars].index[0]
            ids = X.loc[(titles == title).to_numpy(dtype=bool), 'PassengerId'].tolist()
            raise ImputationError(title, ids)
        return self

    def transform(self, X):
        """Return a new table with the derived columns appended"""
        X_copy = X.copy()

        X_copy = self._extract_name_features(X_copy)
        X_copy = self._extract_cabin_features(X_copy)
        X_copy = self._impute_age(X_copy)
        X_copy = self._extract_family_features(X_copy)
        X_copy = self._extract_ticket_features(X_copy)

        return X_copy

    def _extract_name_features(self, X):
        X['Title'] = normalize_titles(extract_title(X['Name']), X['SibSp'])
        X['Surname'] = extract_surname(X['Name'])
        return X

    def _extract_cabin_features(self, X):
        X['Deck'] = extract_deck(X['Cabin'])
        X['CabinNumber'] = extract_cabin_number(X['Cabin'])
        return X

    def _impute_age(self, X):
        """Fill missing ages with the median of the passenger's title"""
        # Titles missing from the fitted population have no median either
        fill = X['Title'].map(self.age_medians_).astype('Float64')
        unresolved = X['Age'].isna() & fill.isna()
        if unresolved.any():
            title = X.loc[unresolved, 'Title'].iloc[0]
            ids = X.loc[unresolved & (X['Title'] == title), 'PassengerId'].tolist()
            raise ImputationError(title, ids)

        X['ImputedAge'] = X['Age'].fillna(fill)
        return X

    def _extract_family_features(self, X):
        X['FamilySize'] = X['SibSp'] + X['Parch'] + 1
        return X

    def _extract_ticket_features(self, X):
        """Ticket group size and summed survival of the group"""
        # Test rows contribute 0 so their unknown labels never leak in
        corrected = X['Survived'].where(X['Origin'] == 'train', 0).fillna(0)

        ticket_counts = X['Ticket'].value_counts()
        X['TicketGroupSize'] = X['Ticket'].map(ticket_counts).astype('Int64')
        X['TicketGroupSurvivalSignal'] = (
            corrected.groupby(X['Ticket']).transform('sum').astype('Int64')
        )
        return X


def engineer_features(records):
    """Fit and apply the feature engineering over the full combined table"""
    return TitanicFeatureEngineering().fit_transform(records)
