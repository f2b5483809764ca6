# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Sentiment classifier demo package."""

from .inference.predictor import SentimentPredictor, load_predictor
from .schemas import SentimentPrediction, SentimentSample

__all__ = ["SentimentSample", "SentimentPrediction", "SentimentPredictor", "load_predictor"]
