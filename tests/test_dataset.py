# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from sentimentcli.errors import DataNotFoundError, InvalidDatasetError
from sentimentcli.schemas import SentimentSample
from sentimentcli.training.dataset import (
    load_samples,
    parse_label,
    read_predict_file,
    split_dataset,
    to_dataframe,
)


@pytest.mark.parametrize("raw", ["true", "TRUE", " 1 ", "yes", "Positive", "1.0"])
def test_parse_label_true(raw):
    assert parse_label(raw) is True


@pytest.mark.parametrize("raw", ["false", "0", "No", "negative"])
def test_parse_label_false(raw):
    assert parse_label(raw) is False


def test_parse_label_rejects_unknown():
    with pytest.raises(InvalidDatasetError):
        parse_label("maybe")


def test_load_samples_reads_by_position(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text('Sentiment,Review\ntrue,"Great, really great"\nfalse,awful\n0,\n', encoding="utf-8")
    samples = load_samples(path)
    assert samples == [
        SentimentSample(label=True, text="Great, really great"),
        SentimentSample(label=False, text="awful"),
    ]


def test_load_samples_reports_bad_row(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("Label,Text\ntrue,fine\nsure,bad label\n", encoding="utf-8")
    with pytest.raises(InvalidDatasetError, match=r"data.csv:3"):
        load_samples(path)


def test_load_samples_missing_file(tmp_path):
    with pytest.raises(DataNotFoundError, match="Training data not found"):
        load_samples(tmp_path / "nope.csv")


def test_load_samples_needs_two_columns(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("Label\ntrue\n", encoding="utf-8")
    with pytest.raises(InvalidDatasetError):
        load_samples(path)


def test_load_samples_empty_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(InvalidDatasetError):
        load_samples(path)


def test_shipped_dataset_loads(data_csv):
    samples = load_samples(data_csv)
    assert len(samples) == 100
    assert sum(sample.label for sample in samples) == 50


def test_split_is_seeded_and_stratified(data_csv):
    df = to_dataframe(load_samples(data_csv))
    train, test = split_dataset(df, test_fraction=0.2, seed=1)
    again_train, again_test = split_dataset(df, test_fraction=0.2, seed=1)
    assert len(train) == 80
    assert len(test) == 20
    assert test["label"].sum() == 10
    assert train["text"].tolist() == again_train["text"].tolist()
    assert test["text"].tolist() == again_test["text"].tolist()


def test_split_tiny_dataset_falls_back_to_random():
    df = to_dataframe(
        [
            SentimentSample(label=True, text="good"),
            SentimentSample(label=False, text="bad"),
            SentimentSample(label=True, text="nice"),
        ]
    )
    train, test = split_dataset(df, test_fraction=0.2, seed=1)
    assert len(train) + len(test) == 3
    assert len(test) == 1


def test_read_predict_file_skips_blank_lines(predict_file):
    texts = read_predict_file(predict_file)
    assert len(texts) == 5
    assert texts[0] == "I love this product, it works great!"
    assert all(text == text.strip() and text for text in texts)


def test_read_predict_file_missing(tmp_path):
    with pytest.raises(DataNotFoundError, match="Predict file not found"):
        read_predict_file(tmp_path / "missing.txt")
