"""
Tests for the package set builder — dedup, ordering, filtering.
"""

from collections import Counter

from sitebundle.adapters.mock import MockProbe
from sitebundle.core.models.site import PackageRef, ResolvedPackage, Site
from sitebundle.core.services.package_set import build_package_set, collect_refs


class TestCollectRefs:
    def test_dedup_same_mode(self):
        sites = [
            Site(name="a", packages=["theme", "source"]),
            Site(name="b", packages=["source", "analytics"]),
        ]
        assert collect_refs(sites) == [
            PackageRef(name="theme", mode="default"),
            PackageRef(name="source", mode="default"),
            PackageRef(name="analytics", mode="default"),
        ]

    def test_same_name_different_mode_kept(self):
        sites = [
            Site(name="a", mode="default", packages=["theme"]),
            Site(name="b", mode="amp", packages=["theme"]),
        ]
        assert collect_refs(sites) == [
            PackageRef(name="theme", mode="default"),
            PackageRef(name="theme", mode="amp"),
        ]

    def test_empty(self):
        assert collect_refs([]) == []
        assert collect_refs([Site(name="a")]) == []


class TestBuildPackageSet:
    def test_resolves_each_pair_once(self):
        probe = MockProbe(entries=["theme/src/server"])
        sites = [Site(name=f"s{i}", packages=["theme"]) for i in range(3)]

        packages = build_package_set(sites, "server", probe)

        assert packages == [
            ResolvedPackage(name="theme", mode="default", path="theme/src/server"),
        ]
        assert Counter(probe.call_log)["theme/src/server"] == 1

    def test_filters_packages_without_entry_point(self):
        probe = MockProbe(
            entries=["a/src/index", "c/src/client"],
            installed=["a", "b", "c"],
        )
        sites = [Site(name="s", packages=["a", "b", "c"])]

        packages = build_package_set(sites, "client", probe)

        assert [p.name for p in packages] == ["a", "c"]

    def test_output_order_is_first_seen_order(self):
        names = [f"pkg{i}" for i in range(20)]
        probe = MockProbe(entries=[f"{n}/src/index" for n in names])
        sites = [
            Site(name="one", packages=names[:12]),
            Site(name="two", packages=names[8:]),
        ]

        packages = build_package_set(sites, "server", probe, max_workers=4)

        assert [p.name for p in packages] == names

    def test_length_matches_distinct_resolvable_pairs(self):
        probe = MockProbe(entries=["theme/src/index", "theme/src/amp/server"])
        sites = [
            Site(name="a", mode="default", packages=["theme", "missing"]),
            Site(name="b", mode="amp", packages=["theme"]),
            Site(name="c", mode="amp", packages=["theme"]),
        ]

        packages = build_package_set(sites, "server", probe)

        assert packages == [
            ResolvedPackage(name="theme", mode="default", path="theme/src/index"),
            ResolvedPackage(name="theme", mode="amp", path="theme/src/amp/server"),
        ]

    def test_no_packages(self):
        probe = MockProbe()
        assert build_package_set([Site(name="empty")], "client", probe) == []
        assert probe.call_count == 0
