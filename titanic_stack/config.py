"""
Configuration constants for the Titanic stacking pipeline.

Everything here is a fixed design constant; the command line overrides the
run settings (paths, metric, resampling, models) but never the encoding
constants, so train and test rows are always transformed identically.
"""

# Set random seed for reproducibility
RANDOM_STATE = 42

# --- File paths ---
TRAIN_PATH = "train.csv"
TEST_PATH = "test.csv"
OUTPUT_DIR = "submissions"
SUBMISSION_PATTERN = "submission_{name}.csv"
COMPARISON_FILE = "model_comparison.csv"

# --- Cross-validation ---
N_SPLITS = 10
N_REPEATS = 5
METRIC = "roc_auc"  # Options: "roc_auc", "accuracy"
METRICS = ("roc_auc", "accuracy")
N_JOBS = -1  # -1 means use all available cores

# Quick mode trades selection quality for speed during development
QUICK_MODE = False
QUICK_N_SPLITS = 3
QUICK_N_REPEATS = 1

# --- Models ---
META_KIND = "xgb"
STACKED_NAME = "stacked"
AVERAGED_NAME = "average"
DECISION_THRESHOLD = 0.5

# --- Titles ---
TITLES = ("Mr", "Mrs", "Miss", "Master", "Hon", "Bach")
RARE_TITLE = "Hon"

# Exact-string replacements, applied in order: later rows see the output of
# earlier ones (Dona -> Lady -> Hon).
TITLE_MERGES = (
    ("Mlle", "Miss"),
    ("Ms", "Miss"),
    ("Mme", "Mrs"),
    ("Dona", "Lady"),
    ("the Countess", "Lady"),
    ("Jonkheer", "Sir"),
    ("Don", "Sir"),
    ("Lady", "Hon"),
    ("Sir", "Hon"),
    ("Capt", "Hon"),
    ("Col", "Hon"),
    ("Major", "Hon"),
    ("Dr", "Hon"),
    ("Rev", "Hon"),
)

# --- Feature vector ---
AGE_SCALE = 40.0
SEX_LEVELS = ("female", "male")  # lexical order: female=-1, male=+1
PCLASS_LEVELS = (1, 2, 3)
FEATURE_COLUMNS = ["age", "sex", "isFirstClass", "isSecondClass"]
