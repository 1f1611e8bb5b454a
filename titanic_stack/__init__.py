"""
Titanic survival prediction: feature engineering, repeated cross-validated
model selection over many classifier kinds, and stacked ensembles.
"""

from .ensemble import AveragingEnsemble, StackingEnsemble
from .errors import (EncodingError, ImputationError, InsufficientDataError, LoadError,
                     TitanicStackError, TrainingFailure)
from .evaluation import compare_models
from .export import export_predictions, predict_all, write_submission
from .features import TitanicFeatureEngineering, engineer_features
from .loader import combine_records, load_records
from .pipeline import run_pipeline
from .training import ModelTrainer, TrainedModel
from .vectorize import FeatureVectorizer, split_vectors

__version__ = "0.1.0"
