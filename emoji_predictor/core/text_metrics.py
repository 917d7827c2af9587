# text_metrics.py
# String similarity measures used by the matcher:
# - Levenshtein edit distance (unit cost insert/delete/substitute) with an
#   optional early-exit cutoff, for typo-tolerant keyword matching
# - bag-of-words cosine similarity, for scoring keywords against a sentence

from __future__ import annotations

from collections import Counter
from typing import Optional

import numpy as np


def levenshtein(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Edit distance between `a` and `b`, keeping a single DP row over the
    shorter string.

    With max_dist set, any distance above it is reported as max_dist + 1,
    and the scan stops once a whole row is past the limit. Length
    pre-filtering is left to the caller.
    """
    if a == b:
        return 0
    if len(b) > len(a):
        a, b = b, a
    cap = None if max_dist is None else max_dist + 1

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        diag, row[0] = row[0], i
        for j, cb in enumerate(b, 1):
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, diag + (ca != cb))
            diag = above
        if cap is not None and min(row) >= cap:
            return cap

    return row[-1] if cap is None else min(row[-1], cap)


def cosine_similarity(text1: str, text2: str) -> float:
    """
    Bag-of-words cosine similarity of two texts.
    Both are lowercased and split on whitespace; term-frequency vectors are
    built over the union vocabulary. 0.0 when either side has no tokens.
    """
    counts1 = Counter(text1.lower().split())
    counts2 = Counter(text2.lower().split())
    vocab = sorted(set(counts1) | set(counts2))
    if not vocab:
        return 0.0

    v1 = np.array([counts1[w] for w in vocab], dtype=np.float64)
    v2 = np.array([counts2[w] for w in vocab], dtype=np.float64)
    n1 = np.linalg.norm(v1)
    n2 = np.linalg.norm(v2)
    if n1 == 0 or n2 == 0:
        return 0.0
    return float(np.dot(v1, v2) / (n1 * n2))
