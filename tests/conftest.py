import platformdirs
import pytest
import requests

from adoptapi.releases.interfaces import (
    ReleaseProvider,
    UpstreamAsset,
    UpstreamRelease,
)

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Mock requests.* or Session.request."
)


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


def pytest_configure(config):
    """Register the markers used across the suite."""
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "core_releases: release pipeline tests")
    config.addinivalue_line("markers", "user_interface: command-line tests")


@pytest.fixture(autouse=True)
def _isolate_test_environment(tmp_path_factory, monkeypatch):
    """
    Point configuration lookups at a temporary directory and clear tokens from the environment.
    """
    config_dir = tmp_path_factory.mktemp("adoptapi-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setattr(
        platformdirs, "user_config_dir", lambda *_args, **_kwargs: str(config_dir)
    )


def pytest_runtest_setup():
    """
    Prevent real network requests during tests by replacing HTTP entry points with blocking callables.
    """
    requests.get = _block_network
    requests.post = _block_network
    requests.head = _block_network
    requests.Session.request = _block_network


def make_asset(name, url=None, size=100):
    """Build an UpstreamAsset with a download URL derived from its name."""
    return UpstreamAsset(
        name=name,
        download_url=url or f"https://github.com/AdoptOpenJDK/releases/download/{name}",
        size=size,
    )


def make_release(tag_name, *asset_names, published_at="2020-01-01T00:00:00Z"):
    """Build an UpstreamRelease from a tag and asset filenames."""
    return UpstreamRelease(
        tag_name=tag_name,
        published_at=published_at,
        assets=tuple(make_asset(name) for name in asset_names),
    )


@pytest.fixture
def upstream_releases():
    """
    Three releases spanning the filename conventions, oldest first.

    - jdk8u172-b11: legacy names (hotspot x64 linux, openj9 x64 linux) plus a checksum file
    - jdk8u181-b13: current names (jdk/jre x64 linux hotspot, jdk x64 windows hotspot)
    - jdk8u192-b12: current names (jdk x64 linux openj9, jdk s390x linux hotspot)
    """
    return [
        make_release(
            "jdk8u172-b11",
            "OpenJDK8U_x64_Linux_201805171215.tar.gz",
            "OpenJDK8U_x64_Linux_201805171215.tar.gz.sha256.txt",
            "OpenJDK8U-OPENJ9_x64_Linux_201805171215.tar.gz",
            published_at="2018-05-17T12:15:00Z",
        ),
        make_release(
            "jdk8u181-b13",
            "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
            "OpenJDK8U-jre_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
            "OpenJDK8U_x64_windows_hotspot_2018-09-28-10-42.zip",
            "OpenJDK8U_x64_windows_hotspot_2018-09-28-10-42.zip.sha256.txt",
            published_at="2018-09-28T10:42:00Z",
        ),
        make_release(
            "jdk8u192-b12",
            "OpenJDK8U_x64_linux_openj9_2018-10-30-13-02.tar.gz",
            "OpenJDK8U_s390x_linux_hotspot_2018-10-30-13-02.tar.gz",
            published_at="2018-10-30T13:02:00Z",
        ),
    ]


class StaticReleaseProvider(ReleaseProvider):
    """ReleaseProvider returning fixed releases, or raising a fixed error."""

    def __init__(self, releases=None, error=None):
        self.releases = list(releases or [])
        self.error = error
        self.calls = []

    def fetch_releases(self, version, build_type):
        self.calls.append((version, build_type))
        if self.error is not None:
            raise self.error
        return list(self.releases)


class FakeClock:
    """Callable clock for ReleaseCache; advance it by assigning `now`."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now
