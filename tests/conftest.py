import pytest
from types import SimpleNamespace

from hostinfo.runtime.mode import ProcessDescriptor

CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
FIREFOX_UBUNTU_UA = "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


class FakeSystem:
    """OperatingSystem stand-in with fixed values."""

    def __init__(self, cpu_count: int = 8, total_memory: int = 16 * 1024**3):
        self._cpu_count = cpu_count
        self._total_memory = total_memory

    def cpus(self) -> list:
        return [SimpleNamespace(index=i) for i in range(self._cpu_count)]

    def total_memory(self) -> int:
        return self._total_memory


@pytest.fixture
def fake_system():
    return FakeSystem()


@pytest.fixture
def process_scope(fake_system):
    """A standalone-process host: linux on x64 with 8 CPUs and 16 GB."""
    return {"process": ProcessDescriptor(platform="linux", arch="x64", system=fake_system)}


@pytest.fixture
def browser_scope():
    """A Chromium host exposing hardwareConcurrency and performance.memory."""
    navigator = SimpleNamespace(userAgent=CHROME_WINDOWS_UA, hardwareConcurrency=4)
    performance = SimpleNamespace(memory=SimpleNamespace(jsHeapSizeLimit=4 * 1024**3))
    return {"window": object(), "navigator": navigator, "performance": performance}


@pytest.fixture(autouse=True)
def isolated_app_home(tmp_path, monkeypatch):
    """Keep log files written by the CLI out of the real home directory."""
    monkeypatch.setenv("HOSTINFO_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("HOSTINFO_LOG_LEVEL", raising=False)
    yield tmp_path / "home"
