from pathlib import Path

from kubegather.core.locator import BundleLocator
from kubegather.core.models import BundleRoot, ParsedResource
from kubegather.resources.catalog import Machine
from kubegather.resources.extractor import ResourceExtractor


def test_namespace_path_get(bundle_top):
    root = BundleLocator().locate(bundle_top)
    ns = root.namespace("openshift-machine-api")
    assert str(ns.path).endswith("/quay-io-openshift-release-sha256/namespaces/openshift-machine-api")
    assert not ns.is_cluster_scoped


def test_cluster_scoped_path_get(bundle_top):
    root = BundleLocator().locate(bundle_top)
    cluster = root.cluster_scoped()
    assert str(cluster.path).endswith("/quay-io-openshift-release-sha256/cluster-scoped-resources")
    assert cluster.is_cluster_scoped


def test_scope_paths_share_the_root():
    root = BundleRoot(path=Path("/bundle"))
    assert root.namespace("a").root is root
    assert root.cluster_scoped().root is root


def test_scope_path_needs_no_filesystem():
    root = BundleRoot(path=Path("/definitely/not/here"))
    assert root.namespace("ghost").path == Path("/definitely/not/here/namespaces/ghost")
    assert root.cluster_scoped().path == Path("/definitely/not/here/cluster-scoped-resources")


def test_parsed_resource_accessors_tolerate_absence():
    resource = ParsedResource(source_path=Path("x.yaml"), document={"kind": "Pod"})
    assert resource.resource_kind == "Pod"
    assert resource.name is None
    assert resource.namespace is None
    assert resource.raw is None

    scalar = ParsedResource(source_path=Path("x.yaml"), document="text")
    assert scalar.api_version is None


def test_parsed_resources_are_hashable(bundle_top):
    ns = BundleLocator().locate(bundle_top).namespace("openshift-machine-api")
    first = ResourceExtractor().extract(ns, Machine())
    second = ResourceExtractor().extract(ns, Machine())

    assert first == second
    assert {hash(r) for r in first} == {hash(r) for r in second}
    assert len(set(first + second)) == 3
