"""
Exception hierarchy for the Titanic stacking pipeline.

Every error is fatal for the step that raised it and is never retried;
messages name the offending PassengerId(s), Title or classifier kind.
"""


class TitanicStackError(Exception):
    """Base class for all pipeline errors"""


class LoadError(TitanicStackError):
    """A source file is malformed or a required field is missing"""


class ImputationError(TitanicStackError):
    """A Title has no passenger with a known age to impute from"""

    def __init__(self, title, passenger_ids):
        self.title = title
        self.passenger_ids = list(passenger_ids)
        super().__init__(
            f"No known ages for title {title!r}; cannot impute "
            f"PassengerId(s) {self.passenger_ids}"
        )


class EncodingError(TitanicStackError):
    """A category value falls outside its fixed encoding"""


class TrainingFailure(TitanicStackError):
    """A classifier kind failed to fit"""

    def __init__(self, kind, reason):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Classifier {kind!r} failed to train: {reason}")


class InsufficientDataError(TitanicStackError):
    """Fewer than two label classes are present"""
