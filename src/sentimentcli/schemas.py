# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class SentimentSample:
    label: bool
    text: str


@dataclass(slots=True)
class SentimentPrediction:
    text: str
    predicted: bool
    probability: float
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "predicted": bool(self.predicted),
            "probability": float(self.probability),
            "score": float(self.score),
        }


@dataclass(slots=True)
class BinaryMetrics:
    accuracy: float = 0.0
    auc: float = 0.0
    f1: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    rows: int = 0
    positives: int = 0
    negatives: int = 0
    detailed: bool = False

    def as_dict(self) -> dict[str, float]:
        return {
            "accuracy": self.accuracy,
            "auc": self.auc,
            "f1": self.f1,
            "precision": self.precision,
            "recall": self.recall,
            "rows": float(self.rows),
            "positives": float(self.positives),
            "negatives": float(self.negatives),
        }


@dataclass(slots=True)
class TrainingReport:
    metrics: BinaryMetrics
    model_path: Path
    metadata: dict[str, Any] = field(default_factory=dict)
