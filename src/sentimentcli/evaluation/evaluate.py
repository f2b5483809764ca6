# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from sklearn.metrics import accuracy_score, f1_score, precision_score, recall_score, roc_auc_score

from ..inference.predictor import SentimentPredictor
from ..schemas import BinaryMetrics
from ..training.dataset import load_samples


def _safe_auc(y_true: list[int], y_prob: list[float]) -> float:
    try:
        value = float(roc_auc_score(y_true, y_prob))
    except ValueError:
        return 0.0
    if value != value:  # NaN
        return 0.0
    return value


def evaluate_binary(y_true: Sequence[bool], y_prob: Sequence[float], *, threshold: float = 0.5) -> BinaryMetrics:
    """Score probabilities against boolean labels.

    With a single class in ``y_true`` only accuracy and the class counts are
    filled in and ``detailed`` stays false.
    """
    truth = [1 if bool(value) else 0 for value in y_true]
    probs = [float(value) for value in y_prob]
    if len(truth) != len(probs):
        raise ValueError(f"Got {len(truth)} labels for {len(probs)} probabilities")
    positives = sum(truth)
    negatives = len(truth) - positives
    if not truth:
        return BinaryMetrics()

    y_pred = [1 if score >= threshold else 0 for score in probs]
    accuracy = float(accuracy_score(truth, y_pred))
    if positives == 0 or negatives == 0:
        return BinaryMetrics(accuracy=accuracy, rows=len(truth), positives=positives, negatives=negatives)

    return BinaryMetrics(
        accuracy=accuracy,
        auc=_safe_auc(truth, probs),
        f1=float(f1_score(truth, y_pred, zero_division=0)),
        precision=float(precision_score(truth, y_pred, zero_division=0)),
        recall=float(recall_score(truth, y_pred, zero_division=0)),
        rows=len(truth),
        positives=positives,
        negatives=negatives,
        detailed=True,
    )


def evaluate_saved_model(*, model_path: Path, data_path: Path, threshold: float | None = None) -> BinaryMetrics:
    predictor = SentimentPredictor(model_path=model_path)
    samples = load_samples(data_path)
    results = predictor.predict_many([sample.text for sample in samples])
    return evaluate_binary(
        [sample.label for sample in samples],
        [result.probability for result in results],
        threshold=predictor.threshold if threshold is None else threshold,
    )
