# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import joblib
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from ..config import Settings
from ..console import SentimentConsole
from ..errors import InvalidDatasetError
from ..evaluation.evaluate import evaluate_binary
from ..features import DEFAULT_HASH_BITS, NGRAM_RANGE, build_featurizer
from ..schemas import TrainingReport
from .dataset import load_samples, split_dataset, to_dataframe


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def build_model(*, hash_bits: int = DEFAULT_HASH_BITS, seed: int = 1) -> Pipeline:
    # liblinear's dual solver runs coordinate ascent on the dual problem.
    return Pipeline(
        steps=[
            ("features", build_featurizer(hash_bits)),
            ("clf", LogisticRegression(solver="liblinear", dual=True, max_iter=1000, random_state=seed)),
        ]
    )


def _save_model(model: Pipeline, metadata: dict[str, Any], settings: Settings) -> None:
    settings.model_path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(model, settings.model_path)
    settings.metadata_path.write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def train_evaluate_and_save(settings: Settings, console: SentimentConsole | None = None) -> TrainingReport:
    df = to_dataframe(load_samples(settings.data_path))
    train_df, test_df = split_dataset(df, test_fraction=settings.test_fraction, seed=settings.seed)
    if train_df["label"].nunique() < 2:
        raise InvalidDatasetError(
            f"Training split from {settings.data_path} needs both positive and negative examples"
        )

    model = build_model(hash_bits=settings.hash_bits, seed=settings.seed)
    model.fit(train_df["text"].tolist(), train_df["label"].astype(int).tolist())

    test_probs = model.predict_proba(test_df["text"].tolist())[:, 1].tolist() if len(test_df) else []
    metrics = evaluate_binary(test_df["label"].tolist(), test_probs, threshold=settings.threshold)

    if console is not None:
        if metrics.detailed:
            console.metrics_table(metrics, title="Evaluation metrics (on test set)")
        else:
            console.class_counts(metrics)

    metadata = {
        "model_version": _timestamp_key(),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "data_path": str(settings.data_path),
        "rows_total": int(len(df)),
        "train_rows": int(len(train_df)),
        "test_rows": int(len(test_df)),
        "labels_positive": int(df["label"].sum()),
        "labels_negative": int((~df["label"].astype(bool)).sum()),
        "hash_bits": int(settings.hash_bits),
        "ngram_range": list(NGRAM_RANGE),
        "seed": int(settings.seed),
        "threshold": float(settings.threshold),
        "metrics": metrics.as_dict(),
        "metrics_detailed": metrics.detailed,
    }
    _save_model(model, metadata, settings)

    if console is not None:
        console.success(f"Model trained and saved to {settings.model_path}")
    return TrainingReport(metrics=metrics, model_path=settings.model_path, metadata=metadata)

