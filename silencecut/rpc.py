"""Command channel between the panel and the host handlers.

The panel addresses the host with call expressions such as
``analyzeSilence("{\\"threshold\\": -40}")``. Instead of evaluating that text,
the channel parses the method name and its single JSON-string argument and
looks the method up in a fixed table.
"""

import json
import logging
import random
import re
from typing import Callable

from silencecut import engine
from silencecut.host import Host

logger = logging.getLogger(__name__)

_CALL_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*\((.*)\)\s*;?\s*$", re.DOTALL)


def call_expression(method: str, payload: str) -> str:
    """Build the call text for ``method`` with ``payload`` as its argument."""
    return f"{method}({json.dumps(payload)})"


class Channel:
    """Dispatches panel requests to the handlers for one host."""

    def __init__(self, host: Host, rng: random.Random | None = None):
        self.host = host
        self.rng = rng
        self.methods: dict[str, Callable[[str], str]] = {
            "analyzeSilence": lambda payload: engine.analyze_silence(self.host, payload, rng=self.rng),
            "cutSilence": lambda payload: engine.cut_silence(self.host, payload),
        }

    def call(self, method: str, payload: str) -> str:
        handler = self.methods.get(method)
        if handler is None:
            return json.dumps({"error": f"Unknown function: {method}"})
        return handler(payload)

    def evaluate(self, expression: str) -> str:
        """Run a call expression and return the handler's JSON response."""
        logger.debug(f"Evaluating: {expression[:200]}")
        match = _CALL_RE.match(expression)
        if match is None:
            return json.dumps({"error": "Malformed call expression"})

        method, argument = match.group(1), match.group(2).strip()
        try:
            payload = json.loads(argument) if argument else None
        except json.JSONDecodeError as e:
            return json.dumps({"error": f"Malformed call argument: {e}"})
        if not isinstance(payload, str):
            return json.dumps({
                "error": f"Invalid parameter type: expected string, got {type(payload).__name__}"
            })
        return self.call(method, payload)
