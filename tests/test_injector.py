import threading

import pytest

from tinyinjector import (
    AlreadyScannedError,
    CyclicDependencyError,
    DiscoveryError,
    Injector,
    MissingDependencyError,
    NotScannedError,
    TypeDescriptor,
    UnknownComponentError,
    factory_constructor,
)

from components import Bar, Foo


@pytest.fixture
def injector() -> Injector:
    return Injector()


def test_scan_and_retrieve(injector):
    injector.scan([TypeDescriptor(Foo), TypeDescriptor(Bar, (Foo,))])

    assert injector.scanned
    assert injector.retrieve(Bar).foo is injector.retrieve(Foo)


def test_retrieve_is_idempotent(injector):
    injector.scan([TypeDescriptor(Foo)])

    first = injector.retrieve(Foo)
    assert all(injector.retrieve(Foo) is first for _ in range(10))


def test_retrieve_before_scan_raises(injector):
    with pytest.raises(NotScannedError, match="before components were scanned"):
        injector.retrieve(Foo)


def test_retrieve_unknown_component_raises(injector):
    injector.scan([TypeDescriptor(Foo)])

    with pytest.raises(UnknownComponentError):
        injector.retrieve(Bar)


def test_second_scan_raises(injector):
    injector.scan([TypeDescriptor(Foo)])

    with pytest.raises(AlreadyScannedError, match="already been scanned"):
        injector.scan([TypeDescriptor(Foo)])


def test_second_scan_after_failure_raises(injector):
    with pytest.raises(CyclicDependencyError):
        injector.scan([TypeDescriptor("a", ("b",)), TypeDescriptor("b", ("a",))])

    with pytest.raises(AlreadyScannedError):
        injector.scan([TypeDescriptor(Foo)])


def test_failed_scan_leaves_nothing_retrievable(injector):
    with pytest.raises(MissingDependencyError):
        injector.scan([TypeDescriptor(Foo), TypeDescriptor(Bar, ("unknown",))])

    assert not injector.scanned
    with pytest.raises(NotScannedError):
        injector.retrieve(Foo)


def test_concurrent_scans_admit_only_one(injector):
    outcomes = []
    barrier = threading.Barrier(4)

    def scan():
        barrier.wait()
        try:
            injector.scan([TypeDescriptor(Foo)])
            outcomes.append("scanned")
        except AlreadyScannedError:
            outcomes.append("rejected")

    threads = [threading.Thread(target=scan) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["rejected", "rejected", "rejected", "scanned"]


def test_scan_with_factories():
    injector = Injector(factory_constructor({"answer": lambda: 42}))

    injector.scan([TypeDescriptor("answer")])

    assert injector.retrieve("answer") == 42


def test_scan_package():
    from sample_app.storage import Database, UserRepository
    from sample_app.web.handlers import Greeter

    injector = Injector()
    registry = injector.scan("sample_app")

    greeter = injector.retrieve(Greeter)
    assert greeter.greet("u001") == "Welcome, Arthur Putey!"
    assert greeter.users is injector.retrieve(UserRepository)
    assert greeter.db is injector.retrieve(Database)
    assert set(registry.identities) == {Database, UserRepository, Greeter}


def test_scan_of_unimportable_package_fails(injector):
    with pytest.raises(DiscoveryError):
        injector.scan("broken_app")

    with pytest.raises(NotScannedError):
        injector.retrieve(Foo)


def test_scan_package_with_unmarked_dependency_fails(injector):
    from partial_app.services import Cache, Catalogue

    with pytest.raises(MissingDependencyError) as e:
        injector.scan("partial_app")

    assert e.value.identity is Cache
    assert e.value.dependent is Catalogue
    assert not injector.scanned
