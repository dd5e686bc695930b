"""Silence detection analyzer.

Detection is simulated: marker positions are drawn from a random walk over
the sequence rather than measured from samples. A level-based detector can
replace ``analyze`` as long as it keeps the same output guarantees: markers
in ascending order, disjoint, at least ``min_duration_ms`` long and inside
``[0, duration_sec]``.
"""

import logging
import random

from silencecut.errors import InvalidInput
from silencecut.models import SilenceMarker

logger = logging.getLogger(__name__)

# Non-silent stretch between candidates: uniform in [GAP_MIN, GAP_MIN + GAP_SPAN)
GAP_MIN = 1.0
GAP_SPAN = 5.0
# Candidate silence length: uniform in [0, CANDIDATE_MAX)
CANDIDATE_MAX = 2.0


def analyze(
    duration_sec: float,
    threshold_db: float,
    min_duration_ms: int,
    fps: float,
    rng: random.Random | None = None,
) -> list[SilenceMarker]:
    """Return silence markers for a sequence of ``duration_sec`` seconds.

    Args:
        duration_sec: Sequence length in seconds.
        threshold_db: Level below which audio counts as silent.
        min_duration_ms: Shortest silence to report.
        fps: Sequence frame rate.
        rng: Random source; pass a seeded ``random.Random`` for repeatable runs.
    """
    if duration_sec <= 0:
        raise InvalidInput(f"Sequence duration must be positive, got {duration_sec}")
    if min_duration_ms < 0:
        raise InvalidInput(f"Minimum duration must not be negative, got {min_duration_ms}")

    rng = rng or random.Random()
    min_duration = min_duration_ms / 1000
    logger.debug(
        f"Scanning {duration_sec:.2f}s at {fps:.3f}fps: "
        f"threshold={threshold_db}dB, min_duration={min_duration_ms}ms"
    )

    markers: list[SilenceMarker] = []
    position = 0.0

    while position < duration_sec:
        position += rng.random() * GAP_SPAN + GAP_MIN
        if position >= duration_sec:
            break

        end = position + rng.random() * CANDIDATE_MAX
        # Measured from the stored bounds so the filter matches marker.duration
        length = end - position
        if length > 0 and length >= min_duration and end <= duration_sec:
            markers.append(SilenceMarker(start=position, end=end))

        position = end

    logger.info(f"Detected {len(markers)} silence regions")
    return markers


def total_duration_ms(markers: list[SilenceMarker]) -> float:
    """Combined length of all markers, in milliseconds."""
    return sum((m.end - m.start) * 1000 for m in markers)
