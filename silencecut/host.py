"""Host editor boundary.

The editor itself is an external collaborator. ``Host`` is the narrow surface
the handlers need from it; ``MemoryHost`` simulates a single sequence in
memory so the panel can be driven without the editor running.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager

from silencecut.errors import HostOperationFailed, HostUnavailable
from silencecut.models import SequenceInfo, TimeRange

logger = logging.getLogger(__name__)


class Host(ABC):
    """Operations the panel may request from the editor."""

    @abstractmethod
    def active_sequence(self) -> SequenceInfo | None:
        """Return the active sequence, or None when no timeline is selected.

        Raises HostUnavailable when there is no project at all.
        """

    @abstractmethod
    def begin_undo_group(self, label: str) -> None: ...

    @abstractmethod
    def end_undo_group(self) -> None: ...

    @abstractmethod
    def set_in_point(self, seconds: float) -> None: ...

    @abstractmethod
    def set_out_point(self, seconds: float) -> None: ...

    @abstractmethod
    def ripple_delete(self) -> None:
        """Remove the in/out range and close the gap."""

    @contextmanager
    def undo_group(self, label: str):
        """Group every edit made inside the block into one undoable step."""
        self.begin_undo_group(label)
        try:
            yield self
        finally:
            self.end_undo_group()


class MemoryHost(Host):
    """In-memory stand-in for the editor, holding one sequence.

    Ripple deletes shorten ``sequence.duration``; each closed undo group can be
    reverted with :meth:`undo`.
    """

    def __init__(self, sequence: SequenceInfo | None = None, project_open: bool = True):
        self.sequence = sequence
        self.project_open = project_open
        self.deleted: list[TimeRange] = []
        self._in: float | None = None
        self._out: float | None = None
        self._group: tuple[str, float, int] | None = None
        self._undo_stack: list[tuple[str, float, int]] = []

    def active_sequence(self) -> SequenceInfo | None:
        if not self.project_open:
            raise HostUnavailable("Could not access the project.")
        return self.sequence

    def begin_undo_group(self, label: str) -> None:
        if self._group is not None:
            raise HostOperationFailed(f"Undo group '{self._group[0]}' is still open")
        self._group = (label, self._require_sequence().duration, len(self.deleted))

    def end_undo_group(self) -> None:
        if self._group is None:
            raise HostOperationFailed("No undo group is open")
        self._undo_stack.append(self._group)
        self._group = None

    def undo(self) -> str:
        """Revert the most recent undo group and return its label."""
        if not self._undo_stack:
            raise HostOperationFailed("Nothing to undo")
        label, duration, deleted_count = self._undo_stack.pop()
        self._require_sequence().duration = duration
        del self.deleted[deleted_count:]
        logger.info(f"Undid '{label}'")
        return label

    def set_in_point(self, seconds: float) -> None:
        self._check_time(seconds)
        self._in = seconds

    def set_out_point(self, seconds: float) -> None:
        self._check_time(seconds)
        self._out = seconds

    def ripple_delete(self) -> None:
        sequence = self._require_sequence()
        if self._in is None or self._out is None:
            raise HostOperationFailed("In and out points must be set before a ripple delete")
        if self._out <= self._in:
            raise HostOperationFailed(f"Empty range {self._in:.3f}-{self._out:.3f}")

        sequence.duration -= self._out - self._in
        self.deleted.append(TimeRange(start=self._in, end=self._out))
        logger.debug(f"Ripple deleted {self._in:.3f}-{self._out:.3f}, now {sequence.duration:.3f}s")
        self._in = self._out = None

    def _require_sequence(self) -> SequenceInfo:
        if self.active_sequence() is None:
            raise HostOperationFailed("No active sequence")
        return self.sequence

    def _check_time(self, seconds: float) -> None:
        duration = self._require_sequence().duration
        if seconds < 0 or seconds > duration:
            raise HostOperationFailed(
                f"Time {seconds:.3f}s is outside the sequence (0-{duration:.3f}s)"
            )
