"""
Command line entry point: ``python -m titanic_stack`` or ``titanic-stack``.
"""

import argparse
import sys
import warnings

from . import config
from .errors import TitanicStackError
from .models import CLASSIFIERS
from .pipeline import run_pipeline


def at_least(minimum):
    """argparse type: an integer no smaller than minimum"""
    def parse(value):
        number = int(value)
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number
    return parse


def build_parser():
    parser = argparse.ArgumentParser(
        prog='titanic-stack',
        description="Titanic survival: feature engineering, tuned classifiers and a stacked ensemble."
    )
    parser.add_argument("--train", default=config.TRAIN_PATH, help="Path to train.csv")
    parser.add_argument("--test", default=config.TEST_PATH, help="Path to test.csv")
    parser.add_argument("--out-dir", default=config.OUTPUT_DIR, help="Directory for submission files")
    parser.add_argument("--metric", choices=config.METRICS, default=config.METRIC,
                        help="Cross-validated score used to select hyperparameters")
    parser.add_argument("--models", nargs="+", choices=sorted(CLASSIFIERS), default=None,
                        help="Classifier kinds to train (default: all)")
    parser.add_argument("--meta", choices=sorted(CLASSIFIERS), default=config.META_KIND,
                        help="Classifier kind of the stacked meta model")
    parser.add_argument("--folds", type=at_least(2), default=None, help="Number of CV folds")
    parser.add_argument("--repeats", type=at_least(1), default=None, help="Number of CV repeats")
    parser.add_argument("--jobs", type=int, default=config.N_JOBS, help="Parallel jobs (-1 = all cores)")
    parser.add_argument("--seed", type=int, default=config.RANDOM_STATE, help="Random seed")
    parser.add_argument("--quick", action="store_true", default=config.QUICK_MODE,
                        help="Quick mode: fewer folds and repeats")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    warnings.filterwarnings('ignore')

    n_splits = config.QUICK_N_SPLITS if args.quick else config.N_SPLITS
    n_repeats = config.QUICK_N_REPEATS if args.quick else config.N_REPEATS

    try:
        run_pipeline(
            args.train,
            args.test,
            out_dir=args.out_dir,
            model_names=args.models,
            metric=args.metric,
            n_splits=args.folds or n_splits,
            n_repeats=args.repeats or n_repeats,
            meta_kind=args.meta,
            n_jobs=args.jobs,
            random_state=args.seed,
            verbose=not args.quiet
        )
    except TitanicStackError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
