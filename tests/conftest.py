"""Shared fixtures for dependency export tests."""

import io
import os

import pytest

# Absolute POSIX paths are used throughout
if os.name == "nt":
    collect_ignore_glob = ["test_*.py"]

# A path that is not valid UTF-8, as os.fsdecode presents it
NON_UTF8_NAME = os.fsdecode(b"bad\xff.typ")


class FlushCountingBytesIO(io.BytesIO):
    """BytesIO that records how often it was flushed."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class RecordingIterator:
    """One-shot iterator that records how many items were taken."""

    def __init__(self, items):
        self._items = iter(items)
        self.taken = 0

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self._items)
        self.taken += 1
        return item


@pytest.fixture
def dest():
    return FlushCountingBytesIO()


@pytest.fixture
def project_deps():
    return ["/proj/src/main.typ", "/proj/assets/logo.png"]
