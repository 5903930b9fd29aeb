"""Auto-dataclass base for domain services and handlers."""

from abc import ABCMeta
from dataclasses import dataclass
from typing import Any, dataclass_transform


@dataclass_transform()
class DataclassMeta(ABCMeta):
    """Applies @dataclass to every subclass of a class built with this metaclass.

    The root class stays a plain class, so it can hold abstract methods and
    ClassVars. Subclasses declare collaborators as annotated fields and get a
    generated __init__ that dishka inspects for injection.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)
        return cls


class Service(metaclass=DataclassMeta):
    """Base class for domain services such as DispatchPolicy and JobQueue."""
