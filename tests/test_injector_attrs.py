from attr import field

from hinject.inject_attrs import _get_compatible_attrs_define_kwargs, inject_define, inject_field
from hinject.injector import Injector


def test_injects_attrs_fields() -> None:
    @inject_define
    class TestClass:
        greeting: str = inject_field()
        formal: str = inject_field("greeting", name="formal")
        count: int = 100
        limit: int = field(default=1000)

    injector = Injector()
    injector.map("greeting").to_value("hi")
    injector.map("greeting", "formal").to_value("good day")

    instance = TestClass()
    injector.inject_into(instance)

    assert instance.greeting == "hi"
    assert instance.formal == "good day"
    assert instance.count == 100
    assert instance.limit == 1000


def test_explicit_values_are_not_injected() -> None:
    @inject_define
    class TestClass:
        greeting: str = inject_field()

    injector = Injector()
    instance = TestClass(greeting="explicit")
    injector.inject_into(instance)

    assert instance.greeting == "explicit"


def test_attrs_class_as_singleton() -> None:
    @inject_define
    class Service:
        url: str = inject_field()

    injector = Injector()
    injector.map("url").to_value("http://localhost")
    injector.map("service").to_singleton(Service)

    service = injector.get_instance("service")
    assert service.url == "http://localhost"
    assert service is injector.get_instance("service")


def test_slotted_attrs_class() -> None:
    @inject_define(define_kwargs={"slots": True})
    class Slotted:
        url: str = inject_field()

    injector = Injector()
    injector.map("url").to_value("http://localhost")

    instance = Slotted()
    injector.inject_into(instance)

    assert not hasattr(instance, "__dict__")
    assert instance.url == "http://localhost"


def test_inject_field_rejects_default() -> None:
    try:
        inject_field(default="x")
        assert False
    except TypeError:
        assert True


def test_attr_defaults() -> None:
    """
    Test that the default configuration keeps classes writable and
    compares instances by identity.
    """

    @inject_define
    class TestClassOne:
        ...

    @inject_define(define_kwargs={})
    class TestClassTwo:
        ...

    assert TestClassOne() != TestClassOne()
    assert TestClassTwo() == TestClassTwo()
    kwargs = _get_compatible_attrs_define_kwargs()
    assert kwargs["init"] is True
    assert kwargs["frozen"] is False
