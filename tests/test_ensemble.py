import numpy as np
import pytest
from sklearn.linear_model import LogisticRegression

from titanic_stack.ensemble import AveragingEnsemble, StackingEnsemble, base_probabilities
from titanic_stack.training import ModelTrainer


@pytest.fixture
def trained(vectors, small_classifiers):
    X_train, y_train, X_test = vectors
    trainer = ModelTrainer(n_splits=3, n_repeats=1, n_jobs=1,
                           classifiers=small_classifiers, verbose=False)
    models, failures = trainer.train_all(X_train, y_train)
    assert not failures
    return trainer, models


def test_base_probabilities(vectors, trained):
    X_train, _, _ = vectors
    _, models = trained

    probabilities = base_probabilities(models, X_train)

    assert list(probabilities.columns) == ['glm', 'lda']
    assert (probabilities.index == X_train.index).all()
    np.testing.assert_allclose(probabilities['lda'], models['lda'].predict_proba(X_train))


def test_stacking_uses_in_sample_predictions(vectors, trained):
    X_train, y_train, X_test = vectors
    trainer, models = trained

    stacker = StackingEnsemble(trainer, meta_kind='glm').fit(models, X_train, y_train)

    meta_features = stacker.meta_features(X_train)
    np.testing.assert_allclose(meta_features['glm'], models['glm'].predict_proba(X_train))

    # meta model refit on the in-sample base predictions of every training row
    C = stacker.meta_model.best_params['C']
    reference = LogisticRegression(max_iter=1000, C=C).fit(meta_features, y_train)
    np.testing.assert_allclose(stacker.meta_model.estimator.coef_, reference.coef_)

    labels = stacker.predict(X_test)
    proba = stacker.predict_proba(X_test)
    assert len(labels) == len(X_test)
    assert set(labels) <= {0, 1}
    assert ((proba >= 0) & (proba <= 1)).all()


def test_stacking_needs_base_models(vectors, trained):
    X_train, y_train, _ = vectors
    trainer, _ = trained
    with pytest.raises(ValueError):
        StackingEnsemble(trainer, meta_kind='glm').fit({}, X_train, y_train)


def test_averaging(vectors, trained):
    _, _, X_test = vectors
    _, models = trained

    averaged = AveragingEnsemble(models)
    expected = (models['glm'].predict_proba(X_test) + models['lda'].predict_proba(X_test)) / 2

    np.testing.assert_allclose(averaged.predict_proba(X_test), expected)
    assert averaged.predict(X_test).tolist() == (expected >= 0.5).astype(int).tolist()
    assert averaged.name == 'average'


def test_averaging_needs_base_models():
    with pytest.raises(ValueError):
        AveragingEnsemble({})
