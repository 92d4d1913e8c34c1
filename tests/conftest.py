"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romanji import styles
from romanji.converter import RomanjiConverter
from romanji.schema import WordMetadata


@pytest.fixture(autouse=True)
def clear_style_cache():
    """Styles are cached per process; start every test from a clean cache."""
    styles.clear_cache()
    yield
    styles.clear_cache()

@pytest.fixture
def converter():
    """Converter configured with the default modified Hepburn style."""
    return RomanjiConverter.from_style('hepburn_modified')

@pytest.fixture
def word():
    """Factory for word metadata."""
    def make(pos: str = "", pronunciation: str = "") -> WordMetadata:
        return WordMetadata(pos=pos, pronunciation=pronunciation)
    return make

@pytest.fixture
def user_styles_dir(tmp_path, monkeypatch):
    """Temporary user style directory searched before the packaged styles."""
    from romanji import config
    monkeypatch.setattr(config, 'ROMANJI_STYLES_DIR', str(tmp_path))
    return tmp_path
