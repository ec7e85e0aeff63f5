import pytest

from fontcatalog.pipeline import FontProcessor
from fontcatalog.reader import open_font

from helpers import build_font


@pytest.fixture
def processor():
    return FontProcessor()


@pytest.fixture
def acme_font():
    return build_font()


@pytest.fixture
def open_handle():
    """Open font bytes as a ParsedFontHandle, closing every handle at teardown."""
    handles = []

    def _open(data):
        handle = open_font(data)
        handles.append(handle)
        return handle

    yield _open
    for handle in handles:
        handle.close()
