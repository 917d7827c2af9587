# emoji_predictor/context/normalizer.py


def normalize_query(s: str) -> str:
    """Lowercase and trim surrounding whitespace. None/empty -> ""."""
    if not s:
        return ""
    return s.lower().strip()
