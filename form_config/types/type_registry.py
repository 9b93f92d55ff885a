from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping

from .default_options import DefaultOptions
from .extend_type import extend_type
from .type_definition import TypeDefinition
from ..registration.check_overwrite import check_overwrite
from ..registration.registration_input import ManyTypes, SingleType, classify_type_input
from ..usability.usability import Usability, to_json
from ..utilities.config_error import InvalidArgument, NotFound
from ..utilities.key_aliases import ALLOWED_TYPE_PROPERTIES, TYPE_KEYS, to_public_key
from ..utilities.logger import get_logger


@dataclass
class TypeRegistry:
    """ 
    Named field types. Types that extend another type are composed with their parent when registered,
    so everything stored here is fully resolved.
    """
    usability: Usability
    warn: Callable[..., None]
    """ Called with the overwrite warning message. The facade decides whether it is actually logged. """
    type_map: dict[str, TypeDefinition] = field(default_factory=dict)

    def register(self, options: Any) -> TypeDefinition | list[TypeDefinition]:
        """ 
        Registers a TypeDefinition, a dict of options, or a list of either.
        List elements are registered one at a time; a failure does not undo the ones before it.
        Returns what was stored (a list for list input).
        """
        type_input = classify_type_input(options)
        if isinstance(type_input, ManyTypes):
            return [self.register(type_options) for type_options in type_input.options_list]
        if isinstance(type_input, SingleType):
            return self._register_single(type_input.options)
        raise self.usability.get_error(
            f"You must provide an object or list for set_type. You provided: {to_json(options)}",
            InvalidArgument
        )

    def _register_single(self, options: TypeDefinition | Mapping[str, Any]) -> TypeDefinition:
        definition = self._to_definition(options)
        overwrite_ok = definition.overwrite_ok
        definition.overwrite_ok = False
        self._check_type(definition)
        if not overwrite_ok:
            check_overwrite(definition.name, self.type_map, definition, "types", self.warn)

        if definition.extends:
            parent = self.resolve(definition.extends, True, definition)
            extend_type(definition, parent)
            get_logger().debug(f"Type '{definition.name}' extends '{parent.name}'")

        self.type_map[definition.name] = definition
        get_logger().debug(f"Registered type '{definition.name}'")
        return definition

    def _to_definition(self, options: TypeDefinition | Mapping[str, Any]) -> TypeDefinition:
        """ Returns a fresh TypeDefinition so the caller's object is never mutated by extension. """
        if isinstance(options, TypeDefinition):
            return replace(options)
        public_options = {to_public_key(key, TYPE_KEYS): value for key, value in options.items()}
        overwrite_ok = public_options.pop("overwriteOk", False)
        self.usability.check_allowed_properties(ALLOWED_TYPE_PROPERTIES, public_options)
        definition = TypeDefinition.from_dict(public_options)
        definition.overwrite_ok = bool(overwrite_ok)
        return definition

    def _check_type(self, definition: TypeDefinition) -> None:
        if not definition.name or not isinstance(definition.name, str):
            raise self.usability.get_error(f"You must provide a name for set_type. You provided: {to_json(definition)}")
        if definition.default_options is None and definition.template is None and definition.template_url is None and not definition.extends:
            raise self.usability.get_error(
                "You must provide defaultOptions, extends OR a template OR templateUrl for set_type. "
                f"You provided none of these: {to_json(definition)}"
            )
        if definition.template is not None and definition.template_url is not None:
            raise self.usability.get_error(
                "You must provide at most a template OR templateUrl for set_type. "
                f"You provided both: {to_json(definition)}"
            )
        if definition.default_options is not None:
            default_options = definition.default_options
            if not isinstance(default_options, (DefaultOptions, Mapping)) and not callable(default_options):
                raise self.usability.get_error(
                    f"defaultOptions must be a dict or a function for set_type. You provided: {to_json(definition)}"
                )
            definition.default_options = DefaultOptions.of(default_options)

    def resolve(self, name: str | None, throw_error: bool = False, error_context: Any = None) -> TypeDefinition | None:
        """ Returns the stored type, or None. Raises NotFound instead when throw_error is True and the type is missing. """
        if not name:
            return None
        type_ = self.type_map.get(name)
        if type_ is None and throw_error is True:
            raise self.usability.get_error(
                f'There is no type by the name of "{name}": {to_json(error_context)}',
                NotFound,
                name=name,
                context=error_context
            )
        return type_

    def names(self) -> list[str]:
        return list(self.type_map)

    def __contains__(self, name: object) -> bool:
        return name in self.type_map

    def __len__(self) -> int:
        return len(self.type_map)
