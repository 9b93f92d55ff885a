from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Mapping


Context = dict[str, Any]

class DefaultOptions(ABC):
    """ 
    A type's default options are either a static dict (StaticOptions) or a function of the field's options (ComputedOptions).
    Callers should use resolve() rather than checking which one they have.
    """

    @abstractmethod
    def resolve(self, context: Context | None = None) -> dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def of(value: 'DefaultOptions | Mapping[str, Any] | Callable[[Context], dict[str, Any]]') -> 'DefaultOptions':
        """ Wraps a raw dict or function. Raises TypeError for anything else. """
        if isinstance(value, DefaultOptions):
            return value
        if isinstance(value, Mapping):
            return StaticOptions(dict(value))
        if callable(value):
            return ComputedOptions(value)
        raise TypeError(f"Expected a dict or a function for default options, got {type(value).__name__}")

@dataclass
class StaticOptions(DefaultOptions):
    value: dict[str, Any]

    def resolve(self, context: Context | None = None) -> dict[str, Any]:
        """ Returns a copy so callers can't mutate the registered defaults. """
        return deepcopy(self.value)

@dataclass
class ComputedOptions(DefaultOptions):
    func: Callable[[Context], dict[str, Any]]

    def resolve(self, context: Context | None = None) -> dict[str, Any]:
        return self.func(context if context is not None else {})
