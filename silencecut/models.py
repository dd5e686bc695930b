"""Shared data types used across SilenceCut."""

from dataclasses import dataclass, field


@dataclass
class TimeRange:
    """A start/end time pair in seconds."""

    start: float
    end: float


@dataclass
class SilenceMarker:
    """A detected interval of low-level audio, in seconds."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "duration": self.duration}


@dataclass
class AnalysisResult:
    """Outcome of one analyze request."""

    markers: list[SilenceMarker]
    total_duration_ms: float
    sequence_duration: float
    fps: float

    @property
    def count(self) -> int:
        return len(self.markers)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "totalDuration": self.total_duration_ms,
            "markers": [m.to_dict() for m in self.markers],
            "sequenceDuration": self.sequence_duration,
            "fps": self.fps,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        return cls(
            markers=[
                SilenceMarker(start=float(m["start"]), end=float(m["end"]))
                for m in data.get("markers", [])
            ],
            total_duration_ms=float(data.get("totalDuration", 0.0)),
            sequence_duration=float(data.get("sequenceDuration", 0.0)),
            fps=float(data.get("fps", 0.0)),
        )


@dataclass
class CutResult:
    """Outcome of one cut request."""

    success: bool
    cut_count: int = 0

    def to_dict(self) -> dict:
        return {"success": self.success, "cutCount": self.cut_count}


@dataclass
class SequenceInfo:
    """What the host reports about its active sequence."""

    name: str
    duration: float
    fps: float
    audio_clip_counts: list[int] = field(default_factory=list)

    @property
    def audio_track_count(self) -> int:
        """Number of audio tracks holding at least one clip."""
        return sum(1 for n in self.audio_clip_counts if n > 0)
