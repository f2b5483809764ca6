# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import math
import os

import pytest

from sentimentcli.errors import ModelNotFoundError
from sentimentcli.inference.predictor import _CACHE, SentimentPredictor, clear_cache, load_predictor


def test_predict_fields_are_consistent(trained):
    predictor = SentimentPredictor(model_path=trained.model_path)
    result = predictor.predict("The staff were friendly and the food was great")
    assert 0.0 <= result.probability <= 1.0
    assert result.predicted == (result.probability >= 0.5)
    assert result.probability == pytest.approx(1.0 / (1.0 + math.exp(-result.score)))
    assert result.to_dict().keys() == {"text", "predicted", "probability", "score"}


def test_positive_text_scores_above_negative(trained):
    predictor = SentimentPredictor(model_path=trained.model_path)
    good, bad = predictor.predict_many(["great amazing excellent love", "terrible worst awful horrible"])
    assert good.probability > bad.probability
    assert good.score > bad.score


def test_predict_many_keeps_order(trained):
    predictor = SentimentPredictor(model_path=trained.model_path)
    texts = ["one", "two words", "three more words"]
    assert [result.text for result in predictor.predict_many(texts)] == texts
    assert predictor.predict_many([]) == []


def test_metadata_loaded(trained):
    predictor = SentimentPredictor(model_path=trained.model_path)
    assert predictor.threshold == 0.5
    assert predictor.model_version != "unknown"


def test_missing_model(tmp_path):
    with pytest.raises(ModelNotFoundError, match="Train first"):
        SentimentPredictor(model_path=tmp_path / "model.joblib")
    with pytest.raises(ModelNotFoundError):
        load_predictor(tmp_path / "model.joblib")


def test_load_predictor_caches(trained):
    first = load_predictor(trained.model_path)
    assert load_predictor(trained.model_path) is first
    clear_cache()
    assert load_predictor(trained.model_path) is not first


def test_load_predictor_replaces_entry_when_model_changes(trained):
    first = load_predictor(trained.model_path)
    stat = trained.model_path.stat()
    os.utime(trained.model_path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))
    second = load_predictor(trained.model_path)
    assert second is not first
    assert [key for key in _CACHE if key[0] == trained.model_path.resolve()] == [
        (trained.model_path.resolve(), trained.model_path.stat().st_mtime_ns)
    ]
