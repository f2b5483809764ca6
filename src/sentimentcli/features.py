# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, HashingVectorizer

PUNCT_RE = re.compile(r"[^\w\s]|_", flags=re.UNICODE)
SPACE_RE = re.compile(r"\s+")
TOKEN_PATTERN = r"(?u)\b\w+\b"

DEFAULT_HASH_BITS = 14
NGRAM_RANGE = (1, 2)
# Negations carry most of the signal in short reviews.
KEPT_NEGATIONS = frozenset({"no", "nor", "not", "never", "nothing", "none", "cannot"})
STOP_WORDS = frozenset(ENGLISH_STOP_WORDS - KEPT_NEGATIONS)


def _safe_text(value: object) -> str:
    return str(value or "")


def normalize_text(value: object) -> str:
    """Lower-case, drop diacritics and punctuation, keep digits."""
    text = unicodedata.normalize("NFKD", _safe_text(value))
    text = "".join(char for char in text if not unicodedata.combining(char))
    text = PUNCT_RE.sub(" ", text.lower())
    return SPACE_RE.sub(" ", text).strip()


def build_featurizer(hash_bits: int = DEFAULT_HASH_BITS) -> HashingVectorizer:
    return HashingVectorizer(
        preprocessor=normalize_text,
        token_pattern=TOKEN_PATTERN,
        stop_words=sorted(STOP_WORDS),
        ngram_range=NGRAM_RANGE,
        n_features=2**hash_bits,
        alternate_sign=False,
        norm="l2",
    )


def tokenize(text: str) -> list[str]:
    return [token for token in re.findall(TOKEN_PATTERN, normalize_text(text)) if token not in STOP_WORDS]
