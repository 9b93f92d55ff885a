from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping

from .wrapper_definition import WrapperDefinition
from ..registration.check_overwrite import check_overwrite
from ..registration.registration_input import ManyWrappers, SingleWrapper, WrapperTemplate, classify_wrapper_input
from ..usability.usability import Usability, to_json
from ..utilities.config_error import InvalidArgument
from ..utilities.key_aliases import ALLOWED_WRAPPER_PROPERTIES, WRAPPER_KEYS, to_public_key
from ..utilities.logger import get_logger
from ..utilities.special_values import DEFAULT_WRAPPER_NAME


@dataclass
class WrapperRegistry:
    """ 
    Named wrapper templates. Each wrapper lists the types it applies to; the type -> wrappers lookup is derived
    by scanning those lists, so there is no second index to keep in sync.
    """
    usability: Usability
    warn: Callable[..., None]
    wrapper_map: dict[str, WrapperDefinition] = field(default_factory=dict)

    def register(self, options: Any, name: str | None = None) -> WrapperDefinition | list[WrapperDefinition]:
        """ 
        Registers a WrapperDefinition, a dict of options, a bare template string (stored under `name`), or a list of any of these.
        `name` is only used as a fallback for a single wrapper; list elements are registered without it.
        """
        wrapper_input = classify_wrapper_input(options)
        if isinstance(wrapper_input, ManyWrappers):
            return [self.register(wrapper_options) for wrapper_options in wrapper_input.options_list]
        if isinstance(wrapper_input, WrapperTemplate):
            return self.register(WrapperDefinition(template=wrapper_input.template, name=name))
        if isinstance(wrapper_input, SingleWrapper):
            return self._register_single(wrapper_input.options, name)
        raise self.usability.get_error(
            f"You must provide an object, string or list for set_wrapper. You provided: {to_json(options)}",
            InvalidArgument
        )

    def _register_single(self, options: WrapperDefinition | Mapping[str, Any], name: str | None) -> WrapperDefinition:
        wrapper = self._to_definition(options)
        wrapper.types = self._get_options_types(wrapper)
        wrapper.name = wrapper.name or name or " ".join(wrapper.types) or DEFAULT_WRAPPER_NAME
        self._check_wrapper_api(wrapper)
        self.wrapper_map[wrapper.name] = wrapper
        get_logger().debug(f"Registered wrapper '{wrapper.name}' for types {wrapper.types}")
        return wrapper

    def _to_definition(self, options: WrapperDefinition | Mapping[str, Any]) -> WrapperDefinition:
        if isinstance(options, WrapperDefinition):
            return replace(options)
        public_options = {to_public_key(key, WRAPPER_KEYS): value for key, value in options.items()}
        self.usability.check_allowed_properties(ALLOWED_WRAPPER_PROPERTIES + ["overwriteOk"], public_options)
        return WrapperDefinition.from_dict(public_options)

    def _get_options_types(self, wrapper: WrapperDefinition) -> list[str]:
        types = wrapper.types
        if isinstance(types, str):
            return [types]
        if types is None:
            return []
        if not isinstance(types, (list, tuple)) or not all(isinstance(type_, str) for type_ in types):
            raise self.usability.get_error(
                "Attempted to create a template wrapper with types that is not a string or a list of strings. "
                f"You provided: {to_json(wrapper)}"
            )
        return list(types)

    def _check_wrapper_api(self, wrapper: WrapperDefinition) -> None:
        self.usability.check_wrapper(wrapper)
        if wrapper.template:
            self.usability.check_wrapper_template(wrapper.template, wrapper)
        if not wrapper.overwrite_ok:
            check_overwrite(wrapper.name, self.wrapper_map, wrapper, "template_wrappers", self.warn)
        wrapper.overwrite_ok = False

    def get_by_name(self, name: str | None = None) -> WrapperDefinition | None:
        return self.wrapper_map.get(name or DEFAULT_WRAPPER_NAME)

    def get_by_type(self, type_name: str) -> list[WrapperDefinition]:
        """ Every wrapper that lists type_name, in registration order. """
        return [wrapper for wrapper in self.wrapper_map.values() if type_name in wrapper.types]

    def remove_by_name(self, name: str) -> WrapperDefinition | None:
        wrapper = self.wrapper_map.pop(name, None)
        if wrapper is not None:
            get_logger().debug(f"Removed wrapper '{name}'")
        return wrapper

    def remove_for_type(self, type_name: str) -> list[WrapperDefinition] | None:
        """ Removes every wrapper that lists type_name. Returns the removed wrappers, or None when there were none. """
        wrappers = self.get_by_type(type_name)
        if not wrappers:
            return None
        for wrapper in wrappers:
            self.remove_by_name(wrapper.name)
        return wrappers
