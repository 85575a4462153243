import random
from pathlib import Path

import pytest

from shared.config import PrismConfig
from shared.logger import PrismLogger
from prism.analyzers.fuzzy import FuzzyFingerprintAdapter
from prism.core.engine import PrismEngine


class RecordingHasher:
    """Fuzzy-hash double that records its inputs and returns a fixed digest."""

    def __init__(self, result="3:abc:def", score=42):
        self.result = result
        self.score = score
        self.hashed = []
        self.compared = []

    def hash(self, data):
        self.hashed.append(data)
        return self.result

    def compare(self, left, right):
        self.compared.append((left, right))
        return self.score


class FailingHasher:
    """Fuzzy-hash double whose every call raises."""

    def __init__(self, exc=None):
        self.exc = exc or RuntimeError("boom")

    def hash(self, data):
        raise self.exc

    def compare(self, left, right):
        raise self.exc


@pytest.fixture()
def sample_bytes() -> bytes:
    """32 KiB of reproducible pseudo-random content."""
    return random.Random(1234).randbytes(32768)


@pytest.fixture()
def quiet_logger() -> PrismLogger:
    log = PrismLogger("test", log_level="DEBUG", console_output=False)
    yield log
    for handler in list(log.underlying.handlers):
        handler.close()
        log.underlying.removeHandler(handler)


@pytest.fixture()
def config() -> PrismConfig:
    return PrismConfig()


@pytest.fixture()
def engine(config, quiet_logger) -> PrismEngine:
    return PrismEngine(config, logger=quiet_logger)


@pytest.fixture()
def recording_hasher() -> RecordingHasher:
    return RecordingHasher()


@pytest.fixture()
def failing_adapter() -> FuzzyFingerprintAdapter:
    return FuzzyFingerprintAdapter(FailingHasher())


@pytest.fixture()
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path
