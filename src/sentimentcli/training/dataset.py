# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pandas as pd
from sklearn.model_selection import train_test_split

from ..errors import DataNotFoundError, InvalidDatasetError
from ..schemas import SentimentSample

TRUE_LABELS = {"true", "1", "yes", "positive", "pos"}
FALSE_LABELS = {"false", "0", "no", "negative", "neg"}


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def parse_label(value: object) -> bool:
    if isinstance(value, bool):
        return value
    lowered = _safe_text(value).strip().lower()
    if lowered.endswith(".0"):
        lowered = lowered[:-2]
    if lowered in TRUE_LABELS:
        return True
    if lowered in FALSE_LABELS:
        return False
    raise InvalidDatasetError(f"Unrecognised label: {value!r}")


def load_samples(path: Path) -> list[SentimentSample]:
    """Read a ``label,text`` CSV with a header row.

    Columns are taken by position so the header names do not matter.
    """
    if not path.exists():
        raise DataNotFoundError(f"Training data not found at {path}")
    try:
        frame = pd.read_csv(path, header=0, sep=",", dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as exc:
        raise InvalidDatasetError(f"Training data at {path} is empty") from exc
    except pd.errors.ParserError as exc:
        raise InvalidDatasetError(f"Could not parse {path}: {exc}") from exc
    if frame.shape[1] < 2:
        raise InvalidDatasetError(f"Expected at least two columns (label, text) in {path}")

    rows: list[SentimentSample] = []
    for line_no, (raw_label, raw_text) in enumerate(zip(frame.iloc[:, 0], frame.iloc[:, 1]), start=2):
        text = _safe_text(raw_text).strip()
        if not text:
            continue
        try:
            label = parse_label(raw_label)
        except InvalidDatasetError as exc:
            raise InvalidDatasetError(f"{path}:{line_no}: {exc}") from exc
        rows.append(SentimentSample(label=label, text=text))
    if not rows:
        raise InvalidDatasetError(f"No labeled rows found in {path}")
    return rows


def to_dataframe(rows: list[SentimentSample]) -> pd.DataFrame:
    data = [{"label": bool(row.label), "text": row.text} for row in rows]
    return pd.DataFrame(data, columns=["label", "text"])


def split_dataset(df: pd.DataFrame, *, test_fraction: float = 0.2, seed: int = 1) -> tuple[pd.DataFrame, pd.DataFrame]:
    if len(df) < 2:
        return df.copy(), df.iloc[0:0].copy()
    counts = df["label"].value_counts()
    stratify = df["label"] if len(counts) >= 2 and int(counts.min()) >= 2 else None
    try:
        train, test = train_test_split(df, test_size=test_fraction, random_state=seed, stratify=stratify)
    except ValueError:
        # Too few rows per class for the requested test size.
        train, test = train_test_split(df, test_size=test_fraction, random_state=seed, stratify=None)
    return train.reset_index(drop=True), test.reset_index(drop=True)


def read_predict_file(path: Path) -> list[str]:
    if not path.exists():
        raise DataNotFoundError(f"Predict file not found: {path}")
    texts: list[str] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line:
            texts.append(line)
    return texts
