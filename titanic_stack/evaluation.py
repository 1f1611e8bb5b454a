"""
Compare the resampled scores of the selected configurations.
"""

import numpy as np
import pandas as pd
from scipy import stats

COMPARISON_COLUMNS = ['model', 'metric', 'mean', 'std', 'min', 'max', 'ci_low', 'ci_high', 'n_resamples']


def score_interval(scores, confidence=0.95):
    """Student-t confidence interval for the mean of the resampled scores"""
    scores = np.asarray(scores, dtype=float)
    mean = scores.mean()
    if len(scores) < 2 or np.allclose(scores, mean):
        return mean, mean
    low, high = stats.t.interval(confidence, len(scores) - 1, loc=mean, scale=stats.sem(scores))
    return float(low), float(high)


def compare_models(models, confidence=0.95):
    """
    Summarise each model's cross-validated scores, best first.

    ``models`` maps names to TrainedModel instances; the result has one row
    per model.
    """
    rows = []
    for name, model in models.items():
        scores = model.cv_scores
        ci_low, ci_high = score_interval(scores, confidence)
        rows.append({
            'model': name,
            'metric': model.metric,
            'mean': float(scores.mean()),
            'std': float(scores.std(ddof=1)) if len(scores) > 1 else 0.0,
            'min': float(scores.min()),
            'max': float(scores.max()),
            'ci_low': ci_low,
            'ci_high': ci_high,
            'n_resamples': len(scores),
        })

    comparison = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
    return comparison.sort_values('mean', ascending=False, kind='mergesort').reset_index(drop=True)
