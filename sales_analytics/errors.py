class SalesAnalysisError(ValueError):
    """Base class for errors raised before a seller report is built."""


class InvalidInputError(SalesAnalysisError):
    """The dataset is missing, or one of its collections is not a non-empty list."""


class InvalidOptionsError(SalesAnalysisError):
    """The options are not a mapping, or a strategy function is missing or not callable."""
