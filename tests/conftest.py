"""
Pytest configuration and fixtures for jpegquality tests.
"""
import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="jpegquality_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_jpeg(temp_dir):
    """Factory saving a JPEG through libjpeg at the requested quality."""
    def _make(name: str = "image.jpg", quality: int = 75, mode: str = "RGB",
              size=(64, 48)) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        color = "blue" if mode == "RGB" else 128
        Image.new(mode, size, color=color).save(path, "JPEG", quality=quality)
        return path
    return _make


@pytest.fixture
def sample_jpeg(make_jpeg) -> Path:
    """A JPEG saved at quality 73."""
    return make_jpeg("sample.jpg", quality=73, size=(180, 120))


@pytest.fixture
def png_image(temp_dir) -> Path:
    """Create a PNG image."""
    image_path = temp_dir / "transparent.png"
    img = Image.new("RGBA", (40, 40), color=(255, 0, 0, 128))
    img.save(image_path, "PNG")
    return image_path


@pytest.fixture
def fake_jpeg(temp_dir) -> Path:
    """A PNG stored under a .jpg name."""
    image_path = temp_dir / "fake.jpg"
    Image.new("RGB", (40, 40), color="red").save(image_path, "PNG")
    return image_path


@pytest.fixture
def empty_dir(temp_dir) -> Path:
    """Create an empty directory."""
    empty = temp_dir / "empty"
    empty.mkdir()
    return empty


@pytest.fixture
def mpo_jpeg(temp_dir) -> Path:
    """A two-frame multi-picture JPEG saved at quality 73."""
    image_path = temp_dir / "camera.jpg"
    first = Image.new("RGB", (64, 48), color="blue")
    second = Image.new("RGB", (64, 48), color="red")
    first.save(image_path, "MPO", save_all=True, append_images=[second], quality=73)
    return image_path


@pytest.fixture
def oversized_jpeg(sample_jpeg, temp_dir) -> Path:
    """Quality-73 JPEG whose SOF0 header declares 15000x15000 pixels."""
    data = bytearray(sample_jpeg.read_bytes())
    sof = data.index(b"\xff\xc0")
    data[sof + 5:sof + 9] = (15000).to_bytes(2, "big") * 2
    image_path = temp_dir / "panorama.jpg"
    image_path.write_bytes(bytes(data))
    return image_path
