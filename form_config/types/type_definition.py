from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

from .default_options import ComputedOptions, DefaultOptions, StaticOptions
from ..utilities.key_aliases import TYPE_KEYS


@dataclass(kw_only=True)
class TypeDefinition:
    """ 
    Everything the renderer needs to draw one kind of form field.
    
    NOTE: None indicates an unset field. Unset fields are filled in from the parent type when `extends` is given.
    """
    name: str | None = None
    template: str | None = None
    template_url: str | None = None
    controller: Any = None
    """ Opaque handle passed to the controller instantiation mechanism. Plain callables taking the scope work with the default one. """
    link: Callable[..., Any] | None = None
    default_options: DefaultOptions | Mapping[str, Any] | Callable[[dict[str, Any]], dict[str, Any]] | None = None
    extends: str | None = None
    """ Name of the parent type. Resolved once, when this type is registered. """
    wrapper: str | list[str] | None = None
    data: dict[str, Any] | None = None
    overwrite_ok: bool = False
    """ Consumed at registration. Stored definitions always have this set back to False. """

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> 'TypeDefinition':
        """ Builds a definition from public camelCase keys (snake_case field names are accepted too). Unknown keys are ignored, so check them first. """
        kwargs = {}
        for key, value in options.items():
            field_name = TYPE_KEYS.get(key, key)
            if field_name in TYPE_KEYS.inverse:
                kwargs[field_name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """ The set fields, keyed by their public camelCase names. """
        output = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None or (field.name == "overwrite_ok" and not value):
                continue
            if isinstance(value, StaticOptions):
                value = value.value
            elif isinstance(value, ComputedOptions):
                value = value.func
            output[TYPE_KEYS.inverse[field.name]] = value
        return output
