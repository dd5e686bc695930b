"""Shared test fixtures."""

import random

import pytest

from silencecut.host import MemoryHost
from silencecut.models import SequenceInfo


@pytest.fixture
def sequence() -> SequenceInfo:
    return SequenceInfo(name="Interview", duration=60.0, fps=30.0, audio_clip_counts=[2, 0])


@pytest.fixture
def host(sequence: SequenceInfo) -> MemoryHost:
    return MemoryHost(sequence)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
