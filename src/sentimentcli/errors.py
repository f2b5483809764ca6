# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations


class SentimentError(RuntimeError):
    """Base class for errors reported to the command line user."""

    exit_code = 1


class DataNotFoundError(SentimentError, FileNotFoundError):
    pass


class ModelNotFoundError(SentimentError, FileNotFoundError):
    pass


class InvalidDatasetError(SentimentError, ValueError):
    pass


class UsageError(SentimentError):
    exit_code = 2
