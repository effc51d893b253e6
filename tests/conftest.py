import pytest
from PIL import ImageFont


class Collected(list):
    def warn(self, message):
        self.append(message)


@pytest.fixture
def font():
    def make(size=48):
        return ImageFont.load_default(size=size)
    return make


@pytest.fixture
def warnings_seen():
    return Collected()


@pytest.fixture
def bundled_font_loader(monkeypatch):
    """Make repeat mode load Pillow's bundled font regardless of the path given."""
    monkeypatch.setattr("textmark.tiling.load_font", lambda path, size: ImageFont.load_default(size=size))
