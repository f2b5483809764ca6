# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import joblib

from ..config import metadata_path_for
from ..errors import ModelNotFoundError
from ..schemas import SentimentPrediction

DEFAULT_THRESHOLD = 0.5


class SentimentPredictor:
    def __init__(self, *, model_path: Path) -> None:
        self.model_path = Path(model_path)
        self.metadata_path = metadata_path_for(self.model_path)
        self.model: Any = None
        self.metadata: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        if not self.model_path.exists():
            raise ModelNotFoundError(f"Model not found at {self.model_path}. Train first.")
        self.model = joblib.load(self.model_path)
        if self.metadata_path.exists():
            try:
                payload = json.loads(self.metadata_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                payload = {}
            if isinstance(payload, dict):
                self.metadata = payload

    @property
    def threshold(self) -> float:
        try:
            return float(self.metadata.get("threshold", DEFAULT_THRESHOLD))
        except (TypeError, ValueError):
            return DEFAULT_THRESHOLD

    @property
    def model_version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    def predict_many(self, texts: Iterable[str]) -> list[SentimentPrediction]:
        batch = [str(text) for text in texts]
        if not batch:
            return []
        probs = self.model.predict_proba(batch)[:, 1].tolist()
        scores = self.model.decision_function(batch).tolist()
        threshold = self.threshold
        return [
            SentimentPrediction(text=text, predicted=prob >= threshold, probability=float(prob), score=float(score))
            for text, prob, score in zip(batch, probs, scores)
        ]

    def predict(self, text: str) -> SentimentPrediction:
        return self.predict_many([text])[0]


_CACHE: dict[tuple[Path, int], SentimentPredictor] = {}


def load_predictor(model_path: Path) -> SentimentPredictor:
    """Return a predictor for ``model_path``, reused until the file changes."""
    resolved = Path(model_path).resolve()
    if not resolved.exists():
        raise ModelNotFoundError(f"Model not found at {model_path}. Train first.")
    key = (resolved, resolved.stat().st_mtime_ns)
    cached = _CACHE.get(key)
    if cached is not None:
        return cached
    predictor = SentimentPredictor(model_path=resolved)
    for stale in [item for item in _CACHE if item[0] == resolved]:
        del _CACHE[stale]
    _CACHE[key] = predictor
    return predictor


def clear_cache() -> None:
    _CACHE.clear()
