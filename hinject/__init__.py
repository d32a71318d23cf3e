"""
The Injector provides hierarchical dependency injection by attribute.

Instead of objects constructing or looking up their own collaborators, an
object declares what it needs by holding an injection marker string in an
attribute, and an Injector replaces each marker with the bound instance:

from hinject import initialize
injector = initialize()
injector.map("greeting").to_value("Hello World")

class Greeter:
    def __init__(self):
        self.greeting = "inject"

greeter = Greeter()
injector.inject_into(greeter)
assert greeter.greeting == "Hello World"

Markers may name a different type key and a qualifier name:

    self.other = "inject:greeting"
    self.formal = 'inject(name="formal"):greeting'

Classes can declare the same thing up front with inject.bind:

@inject.bind(greeting=inject.reference(), formal=inject.reference("greeting", name="formal"))
class Greeter: ...

Bindings resolve to a fixed value (to_value), a new injected instance per
request (to_type) or one lazily created injected instance (to_singleton).
Child injectors, from create_child_injector, inherit and may shadow the
bindings of their ancestors.
"""

__version__ = "1.0.0"

from . import inject
from .errors import HinjectError, InvalidParentInjectorError, MappingNotFoundError
from .inject_attrs import inject_define as define, inject_field as field
from .injector import Injector, initialize
from .markers import Marker, format_marker, parse_marker
from .model import BindingKey
from .registry import MappingRegistry, RuleBuilder

__all__ = [
    "BindingKey",
    "define",
    "field",
    "format_marker",
    "HinjectError",
    "initialize",
    "inject",
    "Injector",
    "InvalidParentInjectorError",
    "MappingNotFoundError",
    "MappingRegistry",
    "Marker",
    "parse_marker",
    "RuleBuilder",
]
