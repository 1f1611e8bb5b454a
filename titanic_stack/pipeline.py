"""
End-to-end batch run: load, engineer, vectorize, train, ensemble, export.
"""

import os
from collections import namedtuple

from .config import (COMPARISON_FILE, META_KIND, METRIC, N_JOBS, N_REPEATS, N_SPLITS,
                     OUTPUT_DIR, RANDOM_STATE, STACKED_NAME)
from .ensemble import AveragingEnsemble, StackingEnsemble
from .errors import TrainingFailure
from .evaluation import compare_models
from .export import export_predictions, predict_all
from .features import engineer_features
from .loader import load_records
from .training import ModelTrainer
from .vectorize import split_vectors

PipelineResult = namedtuple('PipelineResult', [
    'engineered', 'models', 'failures', 'ensembles', 'comparison', 'predictions', 'paths',
])


def run_pipeline(train_path, test_path, out_dir=OUTPUT_DIR, model_names=None,
                 metric=METRIC, n_splits=N_SPLITS, n_repeats=N_REPEATS,
                 meta_kind=META_KIND, n_jobs=N_JOBS, random_state=RANDOM_STATE,
                 classifiers=None, verbose=True):
    """Main execution pipeline"""
    if verbose:
        print("🚢 TITANIC SURVIVAL PREDICTION - STACKED MODELS")
        print("=" * 60)
        print("📁 Loading datasets...")

    records = load_records(train_path, test_path)
    n_train = int((records['Origin'] == 'train').sum())
    if verbose:
        print(f"Training set: {n_train} rows")
        print(f"Test set: {len(records) - n_train} rows")
        print("\n🔧 Engineering features over the combined population...")

    engineered = engineer_features(records)
    X_train, y_train, X_test = split_vectors(engineered)

    if verbose:
        print(f"Title counts:\n{engineered['Title'].value_counts()}")
        print(f"Features: {list(X_train.columns)}")
        print(f"\n🎯 Selecting models by {metric} over {n_splits}-fold CV x {n_repeats} repeats")

    trainer = ModelTrainer(
        metric=metric,
        n_splits=n_splits,
        n_repeats=n_repeats,
        n_jobs=n_jobs,
        random_state=random_state,
        classifiers=classifiers,
        verbose=verbose
    )
    models, failures = trainer.train_all(X_train, y_train, model_names)

    ensembles = {}
    if models:
        averaged = AveragingEnsemble(models)
        ensembles[averaged.name] = averaged
        try:
            stacker = StackingEnsemble(trainer, meta_kind=meta_kind).fit(models, X_train, y_train)
            ensembles[stacker.name] = stacker
        except TrainingFailure as exc:
            failures[STACKED_NAME] = exc
            if verbose:
                print(f"❌ Stacking skipped: {exc}")

    comparison = compare_models(models)
    if verbose and len(comparison):
        print("\n📊 Cross-validated comparison:")
        print(comparison.to_string(index=False))

    if verbose:
        print("\n🔮 Making final predictions...")
    predictions = predict_all({**models, **ensembles}, X_test)
    paths = export_predictions(predictions, out_dir)
    comparison.to_csv(os.path.join(out_dir, COMPARISON_FILE), index=False)

    if verbose:
        print(f"\n🏆 Wrote {len(paths)} submission files to {out_dir}")
        for name, path in paths.items():
            print(f"  {name}: {path} (predicted survival rate {predictions[name].mean():.3f})")
        if failures:
            print(f"Omitted after failure: {sorted(failures)}")

    return PipelineResult(engineered, models, failures, ensembles, comparison, predictions, paths)
