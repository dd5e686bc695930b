"""Tests for the in-memory host."""

import pytest

from silencecut.errors import HostOperationFailed, HostUnavailable
from silencecut.host import MemoryHost
from silencecut.models import SequenceInfo, TimeRange


class TestSequenceInfo:
    def test_counts_only_tracks_with_clips(self, sequence):
        assert sequence.audio_track_count == 1

    def test_no_tracks(self):
        assert SequenceInfo(name="Empty", duration=10.0, fps=24.0).audio_track_count == 0


class TestActiveSequence:
    def test_returns_sequence(self, host, sequence):
        assert host.active_sequence() is sequence

    def test_no_sequence(self):
        assert MemoryHost(None).active_sequence() is None

    def test_no_project(self, sequence):
        with pytest.raises(HostUnavailable, match="Could not access the project"):
            MemoryHost(sequence, project_open=False).active_sequence()


class TestRippleDelete:
    def test_removes_range(self, host, sequence):
        host.set_in_point(5.0)
        host.set_out_point(7.5)
        host.ripple_delete()
        assert sequence.duration == pytest.approx(57.5)
        assert host.deleted == [TimeRange(5.0, 7.5)]

    def test_requires_points(self, host):
        with pytest.raises(HostOperationFailed, match="must be set"):
            host.ripple_delete()

    def test_points_cleared_after_delete(self, host):
        host.set_in_point(1.0)
        host.set_out_point(2.0)
        host.ripple_delete()
        with pytest.raises(HostOperationFailed, match="must be set"):
            host.ripple_delete()

    def test_empty_range(self, host):
        host.set_in_point(4.0)
        host.set_out_point(4.0)
        with pytest.raises(HostOperationFailed, match="Empty range"):
            host.ripple_delete()

    @pytest.mark.parametrize("seconds", [-0.1, 60.5])
    def test_point_outside_sequence(self, host, seconds):
        with pytest.raises(HostOperationFailed, match="outside the sequence"):
            host.set_in_point(seconds)

    def test_without_sequence(self):
        with pytest.raises(HostOperationFailed, match="No active sequence"):
            MemoryHost(None).set_in_point(1.0)


class TestUndoGroups:
    def test_context_manager_closes_group_on_error(self, host):
        with pytest.raises(RuntimeError):
            with host.undo_group("Edit"):
                raise RuntimeError("boom")
        # A new group can be opened, so the previous one was closed
        host.begin_undo_group("Next")
        host.end_undo_group()

    def test_nested_group_rejected(self, host):
        host.begin_undo_group("Outer")
        with pytest.raises(HostOperationFailed, match="still open"):
            host.begin_undo_group("Inner")

    def test_end_without_begin(self, host):
        with pytest.raises(HostOperationFailed, match="No undo group"):
            host.end_undo_group()

    def test_undo_restores_only_last_group(self, host, sequence):
        with host.undo_group("First"):
            host.set_in_point(1.0)
            host.set_out_point(2.0)
            host.ripple_delete()
        with host.undo_group("Second"):
            host.set_in_point(10.0)
            host.set_out_point(14.0)
            host.ripple_delete()

        assert host.undo() == "Second"
        assert sequence.duration == pytest.approx(59.0)
        assert host.deleted == [TimeRange(1.0, 2.0)]
