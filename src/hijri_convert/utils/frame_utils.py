from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import pandas as pd

from hijri_convert.types.result_types import ConversionResultTD, Direction
from hijri_convert.utils.date_utils import (
    DEFAULT_FORMAT,
    convert_gregorian_to_hijri,
    convert_hijri_to_gregorian,
)

logger = logging.getLogger(__name__)

_CONVERTERS: Dict[str, Callable[[str, str], ConversionResultTD]] = {
    "gregorian_to_hijri": convert_gregorian_to_hijri,
    "hijri_to_gregorian": convert_hijri_to_gregorian,
}

_SUFFIX = {
    "gregorian_to_hijri": "_hijri",
    "hijri_to_gregorian": "_gregorian",
}


def _converter(direction: str) -> Callable[[str, str], ConversionResultTD]:
    try:
        return _CONVERTERS[direction]
    except KeyError:
        raise ValueError(
            f"Unknown direction {direction!r}; expected one of {sorted(_CONVERTERS)}"
        ) from None


def _as_text(value) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)


def convert_date_column(
    df: pd.DataFrame,
    column: str,
    direction: Direction = "gregorian_to_hijri",
    fmt: str = DEFAULT_FORMAT,
    target: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a copy of `df` with `column` converted into `target`
    (default "<column>_hijri" / "<column>_gregorian").

    Rows that are missing, malformed or out of domain get "".
    """
    convert = _converter(direction)
    if column not in df.columns:
        raise KeyError(column)
    target = target or f"{column}{_SUFFIX[direction]}"

    def _one(value) -> str:
        text = _as_text(value)
        return "" if text is None else convert(text, fmt)["date"]

    out = df.copy()
    out[target] = [_one(v) for v in df[column].tolist()]
    converted = int((out[target] != "").sum())
    logger.debug("🧮 convert_date_column: %s → %s  %s/%s rows converted",
                 column, target, converted, len(out))
    return out


def summarize_conversions(
    df: pd.DataFrame,
    column: str,
    direction: Direction = "gregorian_to_hijri",
    fmt: str = DEFAULT_FORMAT,
) -> pd.DataFrame:
    """One row per input value with the result kind, converted date and reason."""
    convert = _converter(direction)
    if column not in df.columns:
        raise KeyError(column)

    rows = []
    for value in df[column].tolist():
        text = _as_text(value)
        if text is None:
            rows.append({"input": "", "kind": "invalid", "date": "", "reason": "Missing value."})
            continue
        res = convert(text, fmt)
        rows.append({"input": text, "kind": res["kind"], "date": res["date"], "reason": res["reason"]})
    return pd.DataFrame(rows, columns=["input", "kind", "date", "reason"])
