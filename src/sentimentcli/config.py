# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from .env import get_env, get_float_env, get_int_env

DEFAULT_DATA_PATH = Path("data") / "sentiment-labelled.csv"
DEFAULT_MODEL_PATH = Path("model.joblib")
MAX_SEED = 2**32 - 1


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    model_path: Path = DEFAULT_MODEL_PATH
    seed: int = 1
    test_fraction: float = 0.2
    hash_bits: int = 14
    threshold: float = 0.5

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``SENTIMENT_*`` environment variables.

        Out-of-range numbers are clamped rather than rejected.
        """
        data_path = Path(get_env("SENTIMENT_DATA_PATH", str(DEFAULT_DATA_PATH)) or DEFAULT_DATA_PATH)
        model_path = Path(get_env("SENTIMENT_MODEL_PATH", str(DEFAULT_MODEL_PATH)) or DEFAULT_MODEL_PATH)
        seed = min(max(get_int_env("SENTIMENT_SEED", 1), 0), MAX_SEED)
        test_fraction = min(max(get_float_env("SENTIMENT_TEST_FRACTION", 0.2), 0.05), 0.5)
        hash_bits = min(max(get_int_env("SENTIMENT_HASH_BITS", 14), 8), 24)
        threshold = min(max(get_float_env("SENTIMENT_THRESHOLD", 0.5), 0.0), 1.0)
        return cls(
            data_path=data_path,
            model_path=model_path,
            seed=seed,
            test_fraction=test_fraction,
            hash_bits=hash_bits,
            threshold=threshold,
        )

    def with_paths(self, *, data_path: str | Path | None = None, model_path: str | Path | None = None) -> "Settings":
        updated = self
        if data_path is not None:
            updated = replace(updated, data_path=Path(data_path))
        if model_path is not None:
            updated = replace(updated, model_path=Path(model_path))
        return updated

    @property
    def metadata_path(self) -> Path:
        return metadata_path_for(self.model_path)


def metadata_path_for(model_path: Path) -> Path:
    return model_path.with_name(f"{model_path.stem}.metadata.json")
