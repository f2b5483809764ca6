# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_DATA_PATH, Settings
from .console import SentimentConsole
from .env import get_bool_env
from .errors import DataNotFoundError, SentimentError, UsageError
from .evaluation.evaluate import evaluate_saved_model
from .inference.predictor import load_predictor
from .schemas import SentimentPrediction
from .training.dataset import read_predict_file
from .training.trainer import train_evaluate_and_save

SAMPLE_TEXTS = (
    "I love this product, it works great!",
    "This is the worst experience I've had.",
    "Not bad, could be better.",
)

EPILOG = """examples:
  sentiment-cli --train
  sentiment-cli --predict "I love it" "Terrible support"
  sentiment-cli --predict-file data/predict-sample.txt --format json
  sentiment-cli            # train if no model, then run sample predictions

--train, --evaluate or --predict-file with no texts to score exit after that
step; the sample predictions only run when no flag is given.
"""

VALUE_FLAGS = ("--data", "--model", "--format", "--predict-file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentiment-cli",
        description="Train a binary sentiment classifier and score free text with it.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--train", action="store_true", help="force training and evaluation")
    parser.add_argument("--data", default=None, help=f"labeled CSV (default: {DEFAULT_DATA_PATH})")
    parser.add_argument("--model", default=None, help="model file (default: model.joblib)")
    parser.add_argument(
        "--format",
        default="text",
        type=str.lower,
        choices=("text", "json"),
        help="prediction output format",
    )
    parser.add_argument("--predict", nargs="+", action="extend", metavar="TEXT", help="texts to score")
    parser.add_argument("--predict-file", default=None, metavar="PATH", help="score one text per line of PATH")
    parser.add_argument("--interactive", action="store_true", help="prompt for a text to score")
    parser.add_argument("--evaluate", action="store_true", help="score the saved model against the data file")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("texts", nargs="*", metavar="TEXT", help="extra texts to score")
    return parser


def protect_dash_texts(argv: Sequence[str]) -> list[str]:
    """Keep texts such as ``-awful`` from being read as flags.

    Only tokens starting with ``--`` (and ``-h``) are options; a single-dash
    token is glued to a preceding value flag or ``--predict``, else passed
    as ``--predict=``.
    """
    out: list[str] = []
    for token in argv:
        if token.startswith("-") and not token.startswith("--") and token not in ("-", "-h"):
            if out and out[-1] in (*VALUE_FLAGS, "--predict"):
                out[-1] = f"{out[-1]}={token}"
            else:
                out.append(f"--predict={token}")
            continue
        out.append(token)
    return out


def _prompt_text(console: SentimentConsole) -> str:
    try:
        text = console.prompt("Enter text to predict: ").strip()
    except EOFError:
        text = ""
    if not text:
        raise UsageError("No text supplied.")
    return text


def _emit(console: SentimentConsole, results: list[SentimentPrediction], *, fmt: str) -> None:
    if fmt == "json":
        console.json([result.to_dict() for result in results])
    else:
        console.predictions(results)


def _run_default(settings: Settings, console: SentimentConsole, *, fmt: str) -> int:
    if not settings.model_path.exists():
        if not settings.data_path.exists():
            raise DataNotFoundError(
                f"Sample data not found at {settings.data_path}. "
                f"Add {DEFAULT_DATA_PATH} or use --predict-file after adding a model."
            )
        console.info("No model found, training and evaluating a new model...")
        train_evaluate_and_save(settings, console)
    else:
        console.info("Model found, loading and running sample predictions...")

    predictor = load_predictor(settings.model_path)
    console.banner("Sample predictions")
    _emit(console, predictor.predict_many(SAMPLE_TEXTS), fmt=fmt)
    return 0


def run(args: argparse.Namespace, settings: Settings, console: SentimentConsole) -> int:
    if args.train:
        train_evaluate_and_save(settings, console)

    texts: list[str] = list(args.predict or []) + list(args.texts or [])
    if args.predict_file:
        texts.extend(read_predict_file(Path(args.predict_file)))
    if args.interactive:
        texts.append(_prompt_text(console))

    if args.evaluate:
        metrics = evaluate_saved_model(model_path=settings.model_path, data_path=settings.data_path)
        if metrics.detailed:
            console.metrics_table(metrics, title=f"Evaluation metrics (on {settings.data_path})")
        else:
            console.class_counts(metrics)

    if not texts:
        if args.train or args.evaluate or args.predict_file:
            if args.predict_file:
                console.warn(f"No texts found in {args.predict_file}")
                _emit(console, [], fmt=args.format)
            return 0
        return _run_default(settings, console, fmt=args.format)

    predictor = load_predictor(settings.model_path)
    _emit(console, predictor.predict_many(texts), fmt=args.format)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(protect_dash_texts(sys.argv[1:] if argv is None else argv))
    settings = Settings.from_env().with_paths(data_path=args.data, model_path=args.model)
    console = SentimentConsole(
        enabled=not (args.no_color or get_bool_env("SENTIMENT_NO_COLOR", False)),
        status_file=sys.stderr if args.format == "json" else None,
    )
    try:
        return run(args, settings, console)
    except SentimentError as exc:
        console.error(str(exc))
        return exc.exit_code
