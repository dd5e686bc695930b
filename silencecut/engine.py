"""Request handlers: JSON in, JSON out, errors reported in-band.

These are the two entry points the panel calls on the host. Neither raises:
any failure comes back as ``{"error": message}``.
"""

import json
import logging
import random

from silencecut.analyzers.silence import analyze, total_duration_ms
from silencecut.editors.cut import apply_cuts
from silencecut.errors import NoActiveSequence, NoAudioTracks, SilenceCutError
from silencecut.host import Host
from silencecut.models import AnalysisResult
from silencecut.params import load_analyze_params, load_cut_params

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"error": message})


def run_analysis(host: Host, payload: str, rng: random.Random | None = None) -> AnalysisResult:
    """Validate the request, inspect the active sequence and detect silence."""
    params = load_analyze_params(payload)

    sequence = host.active_sequence()
    if sequence is None:
        raise NoActiveSequence()
    if sequence.audio_track_count == 0:
        raise NoAudioTracks()

    logger.info(
        f"Analyzing '{sequence.name}': {sequence.duration:.2f}s at {sequence.fps:.3f}fps, "
        f"{sequence.audio_track_count} audio track(s)"
    )
    markers = analyze(
        sequence.duration,
        params.threshold_db,
        params.min_duration_ms,
        sequence.fps,
        rng=rng,
    )
    return AnalysisResult(
        markers=markers,
        total_duration_ms=total_duration_ms(markers),
        sequence_duration=sequence.duration,
        fps=sequence.fps,
    )


def analyze_silence(host: Host, payload: str, rng: random.Random | None = None) -> str:
    """Handle ``analyzeSilence``: returns an analysis result or an error as JSON."""
    logger.debug(f"analyzeSilence called with: {payload!r}")
    try:
        result = run_analysis(host, payload, rng=rng)
    except SilenceCutError as e:
        logger.warning(f"analyzeSilence rejected: {e}")
        return _error(str(e))
    except Exception as e:
        logger.exception("analyzeSilence failed")
        return _error(f"Error analyzing silence: {e}")
    return json.dumps(result.to_dict())


def cut_silence(host: Host, payload: str) -> str:
    """Handle ``cutSilence``: returns ``{success, cutCount}`` or an error as JSON."""
    logger.debug(f"cutSilence called with: {payload!r}")
    try:
        params = load_cut_params(payload)
        result = apply_cuts(host, params.markers, params.padding_ms)
    except SilenceCutError as e:
        logger.warning(f"cutSilence rejected: {e}")
        return _error(str(e))
    except Exception as e:
        logger.exception("cutSilence failed")
        return _error(f"Error during cutting: {e}")
    return json.dumps(result.to_dict())
