"""Headless panel controller.

Holds the three range controls, the status text and the session carrying the
last analysis between the Analyze and Cut actions. A front end (the web UI)
only renders ``state()`` and forwards button presses.
"""

import json
import logging
import math
import threading
from dataclasses import dataclass

from silencecut.models import AnalysisResult
from silencecut.params import (
    DEFAULT_MIN_DURATION_MS,
    DEFAULT_PADDING_MS,
    DEFAULT_THRESHOLD_DB,
    AnalyzeParams,
    CutParams,
)
from silencecut.rpc import Channel, call_expression

logger = logging.getLogger(__name__)

READY_MESSAGE = "Ready to analyze. Select a sequence in the editor."


@dataclass
class RangeControl:
    """A slider: value clamped to [minimum, maximum] and snapped to step."""

    label: str
    unit: str
    minimum: float
    maximum: float
    step: float
    value: float

    def set(self, value: float) -> float:
        value = min(max(float(value), self.minimum), self.maximum)
        steps = round((value - self.minimum) / self.step)
        self.value = min(self.minimum + steps * self.step, self.maximum)
        return self.value

    @property
    def display(self) -> str:
        return f"{self.value:g} {self.unit}"

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "unit": self.unit,
            "min": self.minimum,
            "max": self.maximum,
            "step": self.step,
            "value": self.value,
            "display": self.display,
        }


@dataclass
class Session:
    """State shared by the two actions for as long as the panel is open."""

    last_result: AnalysisResult | None = None


class Panel:
    def __init__(self, channel: Channel):
        self.channel = channel
        self.session = Session()
        self.controls = {
            "threshold": RangeControl("Threshold", "dB", -80, 0, 1, DEFAULT_THRESHOLD_DB),
            "minDuration": RangeControl("Minimum duration", "ms", 100, 5000, 50, DEFAULT_MIN_DURATION_MS),
            "padding": RangeControl("Padding", "ms", 0, 1000, 10, DEFAULT_PADDING_MS),
        }
        self.status = READY_MESSAGE
        # Requests may arrive on several server threads; actions run one at a time.
        self._lock = threading.Lock()

    @property
    def cut_enabled(self) -> bool:
        return self.session.last_result is not None

    def set_controls(self, values: dict) -> None:
        """Apply every value or none of them."""
        parsed: dict[str, float] = {}
        for name, value in values.items():
            if name not in self.controls:
                raise KeyError(f"Unknown control: {name}")
            number = float(value)
            if not math.isfinite(number):
                raise ValueError(f"{name} must be finite, got {value!r}")
            parsed[name] = number

        with self._lock:
            for name, number in parsed.items():
                self.controls[name].set(number)

    def _request(self, method: str, payload: dict) -> dict | None:
        """Send a request; on failure set the status and return None."""
        response = self.channel.evaluate(call_expression(method, json.dumps(payload)))
        try:
            data = json.loads(response)
        except json.JSONDecodeError as e:
            self.status = f"Error parsing results: {e}"
            return None
        if not isinstance(data, dict):
            self.status = f"Unexpected result: {response}"
            return None
        if "error" in data:
            self.status = f"Error: {data['error']}"
            return None
        return data

    def analyze(self) -> None:
        """Analyze button: replaces the session result only on success."""
        with self._lock:
            self._analyze()

    def cut(self) -> None:
        """Cut button: applies the last analysis, then clears it."""
        with self._lock:
            self._cut()

    def _analyze(self) -> None:
        self.status = "Analyzing audio... Please wait."
        params = AnalyzeParams(
            threshold_db=self.controls["threshold"].value,
            min_duration_ms=int(self.controls["minDuration"].value),
            padding_ms=int(self.controls["padding"].value),
        )
        data = self._request("analyzeSilence", params.to_dict())
        if data is None:
            return

        self.session.last_result = AnalysisResult.from_dict(data)
        self.status = "Analysis complete."

    def _cut(self) -> None:
        result = self.session.last_result
        if result is None:
            self.status = "No analysis results available. Please analyze first."
            return

        self.status = "Cutting silences... Please wait."
        params = CutParams(markers=result.markers, padding_ms=int(self.controls["padding"].value))
        data = self._request("cutSilence", params.to_dict())
        if data is None:
            return

        # The markers refer to timecodes the cuts have just shifted.
        self.session.last_result = None
        self.status = f"Successfully cut {data.get('cutCount', 0)} silent sections."

    def state(self) -> dict:
        result = self.session.last_result
        state = {
            "status": self.status,
            "controls": {name: c.to_dict() for name, c in self.controls.items()},
            "cut_enabled": self.cut_enabled,
            "results": None,
        }
        if result is not None:
            state["results"] = {
                "silence_count": f"Silences found: {result.count}",
                "total_duration": f"Total silence duration: {result.total_duration_ms / 1000:.2f} sec",
                "analysis": result.to_dict(),
            }
        return state
