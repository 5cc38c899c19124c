"""Run history export: GenerationStats sequences as pandas tables."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from loguru import logger
import pandas as pd

from binevo.evolution.engine.metrics import GenerationStats

__all__ = ["HISTORY_COLUMNS", "history_to_dataframe", "save_history", "load_history"]

HISTORY_COLUMNS = list(GenerationStats.model_fields.keys())


def history_to_dataframe(history: Iterable[GenerationStats]) -> pd.DataFrame:
    """One row per generation, indexed by generation number."""
    rows = [stats.model_dump() for stats in history]
    df = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    return df.set_index("generation", drop=False)


def save_history(history: Iterable[GenerationStats], path: str | Path) -> Path:
    """Write the history as CSV or JSON (chosen by file extension)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = history_to_dataframe(history)

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".json":
        df.to_json(path, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported history format: {path.suffix!r} (use .csv or .json)")

    logger.info("[history] Saved {} generations to {}", len(df), path)
    return path


def load_history(path: str | Path) -> list[GenerationStats]:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records")
    else:
        raise ValueError(f"Unsupported history format: {path.suffix!r} (use .csv or .json)")
    return [
        GenerationStats(**{**record, "generation": int(record["generation"])})
        for record in df.to_dict(orient="records")
    ]
