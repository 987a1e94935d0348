import pytest

from bmp_factory import build_bmp


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    # outputs are named relative to the argument, keep them inside tmp_path
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_bmp(workdir):

    def _write(name: str, data: bytes) -> str:
        path = workdir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return name

    return _write


@pytest.fixture
def small_bmp():
    return build_bmp(2, 1, bytes([10, 20, 30, 40, 50, 60]))
