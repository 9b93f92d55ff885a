from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from ..utilities.key_aliases import WRAPPER_KEYS


@dataclass(kw_only=True)
class WrapperDefinition:
    """ A template drawn around a field's rendered output (label, error messages, etc.). """
    name: str | None = None
    template: str | None = None
    template_url: str | None = None
    types: Any = field(default_factory=list)
    """ Names of the types this wrapper applies to. A single string or None are accepted and normalized to a list on registration. """
    data: dict[str, Any] | None = None
    overwrite_ok: bool = False

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> 'WrapperDefinition':
        """ Builds a definition from public camelCase keys (snake_case field names are accepted too). Unknown keys are ignored. """
        kwargs = {}
        for key, value in options.items():
            field_name = WRAPPER_KEYS.get(key, key)
            if field_name in WRAPPER_KEYS.inverse:
                kwargs[field_name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        output = {}
        for field_ in fields(self):
            value = getattr(self, field_.name)
            if value is None or (field_.name == "overwrite_ok" and not value):
                continue
            output[WRAPPER_KEYS.inverse[field_.name]] = value
        return output
