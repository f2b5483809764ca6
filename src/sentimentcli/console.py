# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Iterable, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import BinaryMetrics, SentimentPrediction


@dataclass
class SentimentConsole:
    """Console output for the CLI.

    Status lines go to ``status_file`` (stdout unless JSON output was asked
    for) while predictions and JSON always go to ``out_file``.
    """

    enabled: bool = True
    out_file: TextIO | None = None
    status_file: TextIO | None = None

    def __post_init__(self) -> None:
        out = self.out_file or sys.stdout
        status = self.status_file or out
        self._out = Console(file=out, color_system="auto" if self.enabled else None, soft_wrap=True, highlight=False)
        if status is out:
            self._status = self._out
        else:
            self._status = Console(file=status, color_system="auto" if self.enabled else None, soft_wrap=True, highlight=False)

    def banner(self, title: str) -> None:
        self._status.print(Panel.fit(escape(title), border_style="cyan"))

    def prompt(self, text: str) -> str:
        return self._status.input(escape(text))

    def info(self, text: str) -> None:
        self._status.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")

    def warn(self, text: str) -> None:
        self._status.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")

    def error(self, text: str) -> None:
        self._status.print(f"[bold red]ERROR[/bold red] {escape(text)}")

    def success(self, text: str) -> None:
        self._status.print(f"[bold green]OK[/bold green] {escape(text)}")

    def metrics_table(self, metrics: BinaryMetrics, *, title: str) -> None:
        table = Table(title=title, show_lines=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for name, value in (
            ("Accuracy", metrics.accuracy),
            ("AUC", metrics.auc),
            ("F1 Score", metrics.f1),
            ("Precision", metrics.precision),
            ("Recall", metrics.recall),
        ):
            table.add_row(name, f"{value:.2%}")
        self._status.print(table)

    def class_counts(self, metrics: BinaryMetrics) -> None:
        self.warn("Skipping detailed evaluation because test set does not contain both classes.")
        self.info(f"Test set size: {metrics.rows}  Positives: {metrics.positives}  Negatives: {metrics.negatives}")
        if metrics.rows:
            self.info(f"Simple accuracy: {metrics.accuracy:.2%}")

    def prediction(self, result: SentimentPrediction) -> None:
        colour = "green" if result.predicted else "red"
        self._out.print(f"Text: {escape(result.text)}")
        self._out.print(
            f"  Predicted: [{colour}]{result.predicted}[/{colour}]"
            f"  Probability: {result.probability:.1%}"
            f"  Score: {result.score:.4f}\n"
        )

    def predictions(self, results: Iterable[SentimentPrediction]) -> None:
        for result in results:
            self.prediction(result)

    def json(self, payload: Any) -> None:
        # Written raw so rich never wraps or highlights the document.
        self._out.file.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
        self._out.file.flush()
