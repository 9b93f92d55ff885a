from dataclasses import dataclass, field
import logging
from typing import Any

from .types.type_definition import TypeDefinition
from .types.type_registry import TypeRegistry
from .usability.usability import Usability
from .utilities.logger import get_logger
from .wrappers.wrapper_definition import WrapperDefinition
from .wrappers.wrapper_registry import WrapperRegistry


@dataclass
class Extras:
    """ Flags read by the renderer. They have no effect on registration. """
    disable_ng_model_attrs_manipulator: bool = False

@dataclass
class TemplateManipulators:
    """ Functions the renderer runs over a field's template before and after its wrappers are applied. """
    pre_wrapper: list[Any] = field(default_factory=list)
    post_wrapper: list[Any] = field(default_factory=list)


class FormConfig:
    """
    The public configuration object: field types, wrappers and the global flags the renderer reads.
    
    Create one per configuration scope (usually one per application) and discard it with that scope.
    Instances share nothing, so tests can build as many as they like.
    """

    def __init__(self, *, logger: logging.Logger | None = None, usability: Usability | None = None):
        self.logger = logger if logger is not None else get_logger()
        self.usability = usability if usability is not None else Usability()
        
        self.disable_warnings: bool = False
        self.extras = Extras()
        self.template_manipulators = TemplateManipulators()
        
        self.type_registry = TypeRegistry(usability=self.usability, warn=self.warn)
        self.wrapper_registry = WrapperRegistry(usability=self.usability, warn=self.warn)

    def warn(self, *parts: Any) -> None:
        """ Logs a warning unless disable_warnings is set. """
        if not self.disable_warnings:
            self.logger.warning(" ".join(str(part) for part in parts))

    # Types
    def set_type(self, options: Any) -> TypeDefinition | list[TypeDefinition]:
        return self.type_registry.register(options)

    def get_type(self, name: str | None, throw_error: bool = False, error_context: Any = None) -> TypeDefinition | None:
        return self.type_registry.resolve(name, throw_error, error_context)

    # Wrappers
    def set_wrapper(self, options: Any, name: str | None = None) -> WrapperDefinition | list[WrapperDefinition]:
        return self.wrapper_registry.register(options, name)

    def get_wrapper(self, name: str | None = None) -> WrapperDefinition | None:
        return self.wrapper_registry.get_by_name(name)

    def get_wrapper_by_type(self, type_name: str) -> list[WrapperDefinition]:
        return self.wrapper_registry.get_by_type(type_name)

    def remove_wrapper_by_name(self, name: str) -> WrapperDefinition | None:
        return self.wrapper_registry.remove_by_name(name)

    def remove_wrappers_for_type(self, type_name: str) -> list[WrapperDefinition] | None:
        return self.wrapper_registry.remove_for_type(type_name)
