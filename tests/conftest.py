#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
import time

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Fixed clock for since() tests, an arbitrary instant in 2024
NOW_NS = 1_700_000_000 * 1_000_000_000


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def text_sink() -> io.StringIO:
    """In-memory text sink for render() tests."""
    return io.StringIO()


@pytest.fixture
def failing_sink():
    """Sink whose write() fails like a closed pipe."""

    class FailingSink:
        def write(self, s: str) -> int:
            raise OSError("sink closed")

    return FailingSink()


@pytest.fixture
def frozen_clock(monkeypatch) -> int:
    """Freeze time.time_ns() at NOW_NS and return it."""
    monkeypatch.setattr(time, "time_ns", lambda: NOW_NS)
    return NOW_NS
