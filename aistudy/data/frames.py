# aistudy/data/frames.py
from __future__ import annotations
import pandas as pd
import numpy as np

COLUMNS = ["Subject", "Label", "Score"]


def _scores_of(value):
    """Yield (label, raw score) pairs from one gradeRecord entry."""
    if isinstance(value, dict):
        if isinstance(value.get("scores"), list):
            for i, s in enumerate(value["scores"]):
                if isinstance(s, dict):
                    yield str(s.get("label") or s.get("name") or i + 1), s.get("score", s.get("value"))
                else:
                    yield str(i + 1), s
        else:
            for k, v in value.items():
                yield str(k), v
    elif isinstance(value, (list, tuple)):
        for i, s in enumerate(value):
            yield str(i + 1), s
    else:
        yield "1", value


def grades_frame(record: dict | None) -> pd.DataFrame:
    rows = []
    for subject, value in (record or {}).items():
        for label, score in _scores_of(value):
            rows.append({"Subject": str(subject), "Label": label, "Score": score})
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["Score"] = pd.to_numeric(df["Score"], errors="coerce")
    return df.dropna(subset=["Score"]).reset_index(drop=True)


def average_by_subject(df: pd.DataFrame) -> list[tuple[str, float]]:
    if df is None or df.empty: return []
    g = df.groupby("Subject", sort=True)["Score"].mean()
    return [(str(k), float(round(v, 2))) for k, v in g.items()]


def overall_average(df: pd.DataFrame) -> float:
    if df is None or df.empty: return np.nan
    per_subject = df.groupby("Subject")["Score"].mean()
    return float(round(per_subject.mean(), 2))


def append_score(record: dict | None, subject: str, score: float) -> dict:
    """Return a copy of ``record`` with ``score`` added under ``subject``.

    The entry keeps its shape: a list grows, a ``{"scores": [...]}`` dict
    grows its list, any other dict gets the next free numeric label.
    """
    rec = dict(record or {})
    entry = rec.get(subject)
    if isinstance(entry, dict) and isinstance(entry.get("scores"), list):
        rec[subject] = {**entry, "scores": [*entry["scores"], score]}
    elif isinstance(entry, dict):
        n = len(entry) + 1
        while str(n) in entry: n += 1
        rec[subject] = {**entry, str(n): score}
    elif isinstance(entry, (list, tuple)):
        rec[subject] = [*entry, score]
    elif entry is None:
        rec[subject] = {"scores": [score]}
    else:
        rec[subject] = {"scores": [entry, score]}
    return rec
