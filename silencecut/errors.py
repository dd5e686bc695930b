"""Error taxonomy shared by the analyzer, cut planner and host boundary.

Every error here is reported to the panel as ``{"error": message}``; none of
them is allowed to escape a request handler.
"""


class SilenceCutError(Exception):
    """Base class for all errors surfaced to the panel."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputParseError(SilenceCutError):
    """The request payload is not valid JSON or lacks a required field."""


class InvalidInput(SilenceCutError):
    """A parameter is present but out of range."""


class HostUnavailable(SilenceCutError):
    """The host has no open project."""


class NoActiveSequence(HostUnavailable):
    """The host has a project but no timeline is selected."""

    def __init__(self, message: str = "No active sequence. Please select a sequence."):
        super().__init__(message)


class NoAudioTracks(SilenceCutError):
    """The active sequence carries no audio clips."""

    def __init__(self, message: str = "No audio tracks found in the sequence."):
        super().__init__(message)


class HostOperationFailed(SilenceCutError):
    """A single edit was rejected by the host."""
