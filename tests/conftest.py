# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from sentimentcli.config import Settings
from sentimentcli.inference.predictor import clear_cache
from sentimentcli.training.trainer import train_evaluate_and_save

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SENTIMENT_DATA_PATH",
        "SENTIMENT_MODEL_PATH",
        "SENTIMENT_SEED",
        "SENTIMENT_TEST_FRACTION",
        "SENTIMENT_HASH_BITS",
        "SENTIMENT_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def data_csv(tmp_path: Path) -> Path:
    target = tmp_path / "data" / "sentiment-labelled.csv"
    target.parent.mkdir(parents=True)
    shutil.copy(DATA_DIR / "sentiment-labelled.csv", target)
    return target


@pytest.fixture
def predict_file(tmp_path: Path) -> Path:
    target = tmp_path / "predict-sample.txt"
    shutil.copy(DATA_DIR / "predict-sample.txt", target)
    return target


@pytest.fixture
def settings(tmp_path: Path, data_csv: Path) -> Settings:
    return Settings(data_path=data_csv, model_path=tmp_path / "models" / "model.joblib")


@pytest.fixture
def trained(settings: Settings) -> Settings:
    train_evaluate_and_save(settings)
    return settings
