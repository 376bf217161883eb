"""Tests for the release query filters."""

import pytest
from conftest import make_release

from adoptapi.releases.filters import (
    apply_query,
    filter_on_binary_property,
    filter_release,
    release_sort_key,
)
from adoptapi.releases.interfaces import ReleaseQuery
from adoptapi.releases.normalizer import normalize_releases

pytestmark = [pytest.mark.unit, pytest.mark.core_releases]


@pytest.fixture
def releases(upstream_releases):
    return normalize_releases(upstream_releases)


def _names(releases):
    return [release.release_name for release in releases]


class TestBinaryPropertyFilter:
    def test_absent_value_is_noop(self, releases):
        filtered = filter_on_binary_property(releases, "os", None)
        assert filtered == releases
        assert filtered is not releases

    def test_case_insensitive_match(self, releases):
        filtered = filter_on_binary_property(releases, "os", "Linux")

        assert _names(filtered) == ["jdk8u172-b11", "jdk8u181-b13", "jdk8u192-b12"]
        assert all(b.os == "linux" for r in filtered for b in r.binaries)
        assert len(filtered[1].binaries) == 2

    def test_release_without_matches_is_removed(self, releases):
        filtered = filter_on_binary_property(releases, "architecture", "s390x")

        assert _names(filtered) == ["jdk8u192-b12"]
        assert [b.binary_name for b in filtered[0].binaries] == [
            "OpenJDK8U_s390x_linux_hotspot_2018-10-30-13-02.tar.gz"
        ]

    def test_other_releases_keep_matching_binaries(self, releases):
        filtered = filter_on_binary_property(releases, "openjdk_impl", "OPENJ9")

        assert _names(filtered) == ["jdk8u172-b11", "jdk8u192-b12"]
        assert all(len(r.binaries) == 1 for r in filtered)

    def test_no_match_anywhere(self, releases):
        assert filter_on_binary_property(releases, "os", "aix") == []

    def test_filtering_twice_is_idempotent(self, releases):
        once = filter_on_binary_property(releases, "os", "linux")
        twice = filter_on_binary_property(once, "os", "linux")
        assert twice == once

    def test_input_is_not_modified(self, releases):
        before = [len(r.binaries) for r in releases]
        filter_on_binary_property(releases, "os", "windows")
        assert [len(r.binaries) for r in releases] == before


class TestReleaseFilter:
    def test_absent_returns_everything(self, releases):
        assert filter_release(releases, None) == releases

    def test_latest_returns_newest(self, releases):
        latest = filter_release(releases, "latest")
        assert _names(latest) == ["jdk8u192-b12"]

    def test_latest_ignores_list_order(self, releases):
        assert _names(filter_release(list(reversed(releases)), "latest")) == [
            "jdk8u192-b12"
        ]

    def test_latest_considers_only_candidates(self, releases):
        windows = filter_on_binary_property(releases, "os", "windows")
        assert _names(filter_release(windows, "latest")) == ["jdk8u181-b13"]

    def test_latest_of_nothing(self):
        assert filter_release([], "latest") == []

    def test_latest_tie_breaks_on_largest_name(self):
        tied = normalize_releases(
            [
                make_release(
                    "jdk8u181-b13",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2018-09-28T10:42:00Z",
                ),
                make_release(
                    "jdk8u181-b14",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2018-09-28T10:42:00Z",
                ),
                make_release(
                    "jdk8u181-b12",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2018-09-28T10:42:00Z",
                ),
            ]
        )
        assert _names(filter_release(tied, "latest")) == ["jdk8u181-b14"]

    def test_latest_compares_instants_across_offsets(self):
        candidates = normalize_releases(
            [
                make_release(
                    "utc-late",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2018-09-28T10:00:00Z",
                ),
                make_release(
                    "offset-early",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2018-09-28T11:00:00+02:00",
                ),
            ]
        )
        assert _names(filter_release(candidates, "latest")) == ["utc-late"]

    def test_unparseable_timestamp_sorts_first(self):
        candidates = normalize_releases(
            [
                make_release(
                    "no-date",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at=None,
                ),
                make_release(
                    "dated",
                    "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz",
                    published_at="2001-01-01T00:00:00Z",
                ),
            ]
        )
        assert _names(filter_release(candidates, "latest")) == ["dated"]
        assert release_sort_key(candidates[0]) < release_sort_key(candidates[1])

    def test_name_match_is_case_insensitive(self, releases):
        assert _names(filter_release(releases, "JDK8U181-B13")) == ["jdk8u181-b13"]

    def test_name_match_is_exact(self, releases):
        assert filter_release(releases, "jdk8u181") == []

    def test_latest_keyword_is_lowercase_only(self, releases):
        assert filter_release(releases, "Latest") == []

    def test_always_returns_list(self, releases):
        assert isinstance(filter_release(releases, "latest"), list)
        assert isinstance(filter_release(releases, "jdk8u181-b13"), list)


class TestApplyQuery:
    def test_empty_query_keeps_everything(self, releases):
        assert apply_query(releases, ReleaseQuery()) == releases

    def test_full_query_selects_single_binary(self, releases):
        query = ReleaseQuery(
            openjdk_impl="hotspot",
            os="linux",
            arch="x64",
            binary_type="jdk",
            release="latest",
        )

        filtered = apply_query(releases, query)

        assert _names(filtered) == ["jdk8u181-b13"]
        assert [b.binary_name for b in filtered[0].binaries] == [
            "OpenJDK8U_x64_linux_hotspot_2018-09-28-10-42.tar.gz"
        ]

    def test_binary_type_filter(self, releases):
        filtered = apply_query(releases, ReleaseQuery(binary_type="JRE"))

        assert _names(filtered) == ["jdk8u181-b13"]
        assert [b.binary_type for b in filtered[0].binaries] == ["jre"]

    def test_release_filter_runs_after_property_filters(self, releases):
        """"latest" picks among releases that survived the property filters."""
        filtered = apply_query(releases, ReleaseQuery(arch="x64", release="latest"))
        assert _names(filtered) == ["jdk8u192-b12"]

        filtered = apply_query(
            releases, ReleaseQuery(openjdk_impl="hotspot", arch="x64", release="latest")
        )
        assert _names(filtered) == ["jdk8u181-b13"]
