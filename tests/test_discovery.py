from typing import Annotated, NamedTuple

import pytest

from tinyinjector.discovery import Marker, component, describe, discover
from tinyinjector.domain import TypeDescriptor
from tinyinjector.errors import DiscoveryError

from components import Bar, Baz, Foo


def test_describe_class_without_constructor():
    assert describe(Foo) == TypeDescriptor(Foo, ())


def test_describe_uses_parameter_order():
    assert describe(Baz) == TypeDescriptor(Baz, (Bar, Foo))


def test_describe_strips_annotated_metadata():
    class Service:
        def __init__(self, foo: Annotated[Foo, "primary"]):
            self.foo = foo

    assert describe(Service).parameters == (Foo,)


def test_describe_rejects_unannotated_parameter():
    class Service:
        def __init__(self, foo):
            self.foo = foo

    with pytest.raises(DiscoveryError, match="Dependency <foo> of component <.*Service> is not annotated"):
        describe(Service)


def test_describe_rejects_keyword_only_parameter():
    class Service:
        def __init__(self, *, foo: Foo):
            self.foo = foo

    with pytest.raises(DiscoveryError, match="cannot be passed positionally"):
        describe(Service)


def test_marker_tags_class():
    @component
    class Tagged:
        pass

    assert component.is_present(Tagged)
    assert not component.is_present(Foo)


def test_marker_is_not_inherited():
    @component
    class Tagged:
        pass

    class Child(Tagged):
        pass

    assert not component.is_present(Child)


def test_markers_are_independent():
    service = Marker("service")

    @service
    class Tagged:
        pass

    assert service.is_present(Tagged)
    assert not component.is_present(Tagged)


def test_marker_rejects_non_class():
    with pytest.raises(DiscoveryError, match="is not a class"):
        component(lambda: None)


def test_discover_finds_marked_classes_in_submodules():
    from sample_app.storage import Database, UserRepository
    from sample_app.web.handlers import Greeter

    descriptors = discover("sample_app")

    assert descriptors == [
        TypeDescriptor(Database, ()),
        TypeDescriptor(UserRepository, (Database,)),
        TypeDescriptor(Greeter, (UserRepository, Database)),
    ]


def test_discover_single_module():
    from sample_app.storage import Database, UserRepository

    identities = [d.identity for d in discover("sample_app.storage")]

    assert identities == [Database, UserRepository]


def test_discover_with_other_marker_finds_nothing():
    assert discover("sample_app", Marker("repository")) == []


def test_discover_reports_import_failure():
    with pytest.raises(DiscoveryError, match="Could not import module broken_app.boom") as e:
        discover("broken_app")

    assert isinstance(e.value.__cause__, RuntimeError)


def test_discover_reports_missing_package():
    with pytest.raises(DiscoveryError, match="Could not import module no_such_package"):
        discover("no_such_package")


class Pair(NamedTuple):
    foo: Foo
    bar: Bar


def test_describe_named_tuple_uses_field_annotations():
    assert describe(Pair) == TypeDescriptor(Pair, (Foo, Bar))
