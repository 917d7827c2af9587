# emoji_predictor/errors.py
# Exceptions raised outside the query path (data loading, configuration).
# Queries themselves never raise on bad text, they return an empty list.


class EmojiPredictorError(Exception):
    """Base class for errors raised by this package."""


class KnowledgeBaseError(EmojiPredictorError):
    """Corpus data could not be read or failed validation."""


class ConfigError(EmojiPredictorError):
    """Unknown configuration option or a value of the wrong type."""
