"""Silence-cut editor: turns markers into ripple deletes on the host."""

import logging

from silencecut.errors import HostOperationFailed, NoActiveSequence
from silencecut.host import Host
from silencecut.models import CutResult, SilenceMarker, TimeRange

logger = logging.getLogger(__name__)

UNDO_LABEL = "Cut Silence"


def plan_cuts(markers: list[SilenceMarker], padding_ms: int) -> list[TimeRange]:
    """Shrink each marker by ``padding_ms`` at both ends and order for cutting.

    Markers that padding consumes entirely are dropped. Overlapping ranges are
    merged. The result is sorted by descending start, so each ripple delete
    only shifts content after ranges that have already been removed.
    """
    padding = padding_ms / 1000

    ranges: list[TimeRange] = []
    for m in markers:
        start = m.start + padding
        end = m.end - padding
        if start >= end:
            logger.warning(
                f"Skipping silence {m.start:.3f}-{m.end:.3f}: "
                f"{padding_ms}ms padding leaves nothing to cut"
            )
            continue
        ranges.append(TimeRange(start=start, end=end))

    ranges.sort(key=lambda r: r.start)
    merged: list[TimeRange] = []
    for r in ranges:
        if merged and r.start < merged[-1].end:
            merged[-1] = TimeRange(start=merged[-1].start, end=max(merged[-1].end, r.end))
        else:
            merged.append(r)

    if len(merged) < len(ranges):
        logger.info(f"Merged {len(ranges)} overlapping ranges into {len(merged)}")

    merged.reverse()
    return merged


def apply_cuts(host: Host, markers: list[SilenceMarker], padding_ms: int) -> CutResult:
    """Ripple-delete every planned range inside a single undo group.

    A cut the host rejects is logged and skipped; the count in the result
    covers only the cuts that went through.
    """
    if host.active_sequence() is None:
        raise NoActiveSequence()

    ranges = plan_cuts(markers, padding_ms)
    if not ranges:
        return CutResult(success=True, cut_count=0)

    cut_count = 0
    with host.undo_group(UNDO_LABEL):
        for i, r in enumerate(ranges):
            logger.debug(f"Processing cut {i}: {r.start:.3f} to {r.end:.3f}")
            try:
                host.set_in_point(r.start)
                host.set_out_point(r.end)
                host.ripple_delete()
            except HostOperationFailed as e:
                logger.warning(f"Error cutting section {i} ({r.start:.3f}-{r.end:.3f}): {e}")
                continue
            cut_count += 1

    logger.info(f"Cut {cut_count} of {len(ranges)} silent sections")
    return CutResult(success=True, cut_count=cut_count)
