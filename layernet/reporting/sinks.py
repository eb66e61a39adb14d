"""Observers recording forward-pass outputs."""

from __future__ import annotations

import json
from pathlib import Path

from ..core.types import Array, Sample
from .artifacts import git_sha


class JsonlSink:
    """Append-only JSONL writer, one record per forward pass."""

    def __init__(
        self,
        path: str | Path,
        *,
        seed: int | None = None,
        sha: str | None = None,
    ) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("")
        self.seed = seed
        self.sha = sha or git_sha()

    def on_step(self, step: int, sample: Sample, output: Array) -> None:
        record = {
            "step": int(step),
            "seed": self.seed,
            "sha": self.sha,
            "output": [float(v) for v in output],
        }
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record) + "\n")

    __call__ = on_step


class OutputCapture:
    """Keep forward-pass outputs in memory."""

    def __init__(self) -> None:
        self.outputs: list[Array] = []

    def on_step(self, step: int, sample: Sample, output: Array) -> None:
        self.outputs.append(output.copy())

    def __len__(self) -> int:
        return len(self.outputs)


__all__ = ["JsonlSink", "OutputCapture"]
