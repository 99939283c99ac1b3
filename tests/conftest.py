"""Shared test fixtures for srtparse."""

import pytest


def pytest_collection_modifyitems(items):
    """Auto-mark tests without integration or slow markers as unit tests."""
    for item in items:
        markers = {marker.name for marker in item.iter_markers()}
        if 'integration' not in markers and 'slow' not in markers:
            item.add_marker(pytest.mark.unit)


SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:03,500\n"
    "Hello, world!\n"
    "\n"
    "2\n"
    "00:00:04,000 --> 00:00:06,000\n"
    "This is a test.\n"
    "Second line.\n"
    "\n"
)


@pytest.fixture
def sample_srt():
    return SAMPLE_SRT


@pytest.fixture
def sample_srt_file(tmp_path):
    """Create a sample SRT file for testing."""
    path = tmp_path / 'test.srt'
    path.write_text(SAMPLE_SRT, encoding='utf-8')
    return path


@pytest.fixture
def broken_srt_file(tmp_path):
    """An SRT file whose second block skips an index."""
    content = (
        "1\n"
        "00:00:01,000 --> 00:00:02,000\n"
        "First\n"
        "\n"
        "3\n"
        "00:00:03,000 --> 00:00:04,000\n"
        "Third\n"
    )
    path = tmp_path / 'broken.srt'
    path.write_text(content, encoding='utf-8')
    return path
