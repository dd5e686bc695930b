"""JSON request schema: the contract between the panel and the host handlers."""

import json
import math
from dataclasses import dataclass, field
from typing import Any

from silencecut.errors import InputParseError, InvalidInput
from silencecut.models import SilenceMarker

DEFAULT_THRESHOLD_DB = -40.0
DEFAULT_MIN_DURATION_MS = 500
DEFAULT_PADDING_MS = 100


@dataclass
class AnalyzeParams:
    """Parameters of an analyze request."""

    threshold_db: float = DEFAULT_THRESHOLD_DB
    min_duration_ms: int = DEFAULT_MIN_DURATION_MS
    padding_ms: int = DEFAULT_PADDING_MS

    def to_dict(self) -> dict:
        return {
            "threshold": self.threshold_db,
            "minDuration": self.min_duration_ms,
            "padding": self.padding_ms,
        }


@dataclass
class CutParams:
    """Parameters of a cut request."""

    markers: list[SilenceMarker] = field(default_factory=list)
    padding_ms: int = DEFAULT_PADDING_MS

    def to_dict(self) -> dict:
        return {
            "markers": [{"start": m.start, "end": m.end} for m in self.markers],
            "padding": self.padding_ms,
        }


def _parse_object(payload: Any) -> dict:
    if not isinstance(payload, str):
        raise InputParseError(
            f"Invalid parameter type: expected string, got {type(payload).__name__}"
        )
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise InputParseError(f"Failed to parse parameters: {e}") from e
    if not isinstance(data, dict):
        raise InputParseError("Failed to parse parameters: expected a JSON object")
    return data


def _number(data: dict, key: str, default: float | None = None) -> float:
    """Read a numeric field; numeric strings are accepted (slider values)."""
    if key not in data or data[key] is None:
        if default is None:
            raise InputParseError(f"Missing required field '{key}'")
        return default
    value = data[key]
    if isinstance(value, bool):
        raise InvalidInput(f"'{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"'{key}' must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"'{key}' must be finite, got {value!r}")
    return number


def load_analyze_params(payload: str) -> AnalyzeParams:
    """Parse and validate an ``analyzeSilence`` payload."""
    data = _parse_object(payload)

    params = AnalyzeParams(
        threshold_db=_number(data, "threshold", DEFAULT_THRESHOLD_DB),
        min_duration_ms=int(_number(data, "minDuration", DEFAULT_MIN_DURATION_MS)),
        padding_ms=int(_number(data, "padding", DEFAULT_PADDING_MS)),
    )

    if params.threshold_db > 0:
        raise InvalidInput(f"Threshold must be at most 0 dB, got {params.threshold_db}")
    if params.min_duration_ms < 0:
        raise InvalidInput(f"Minimum duration must not be negative, got {params.min_duration_ms}")
    if params.padding_ms < 0:
        raise InvalidInput(f"Padding must not be negative, got {params.padding_ms}")
    return params


def load_cut_params(payload: str) -> CutParams:
    """Parse and validate a ``cutSilence`` payload."""
    data = _parse_object(payload)

    raw_markers = data.get("markers")
    if not isinstance(raw_markers, list):
        raise InputParseError("Cut request must contain a 'markers' list")

    markers: list[SilenceMarker] = []
    for i, raw in enumerate(raw_markers):
        if not isinstance(raw, dict):
            raise InputParseError(f"Marker {i} is not an object")
        start = _number(raw, "start")
        end = _number(raw, "end")
        if start < 0:
            raise InvalidInput(f"Marker {i} starts before 0: {start}")
        markers.append(SilenceMarker(start=start, end=end))

    padding_ms = int(_number(data, "padding", DEFAULT_PADDING_MS))
    if padding_ms < 0:
        raise InvalidInput(f"Padding must not be negative, got {padding_ms}")

    return CutParams(markers=markers, padding_ms=padding_ms)
