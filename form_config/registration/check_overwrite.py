from typing import Any, Callable, Mapping

from ..usability.usability import to_json


class _Json:
    """ Renders its value as json only when formatted, so a suppressed warning never serializes anything. """

    def __init__(self, value: Any):
        self.value = value

    def __str__(self) -> str:
        return to_json(self.value)


def check_overwrite(name: str, registry: Mapping[str, Any], new_value: Any, registry_name: str, warn: Callable[..., None]) -> None:
    """ Warns (never raises) when name is already registered. """
    if name in registry:
        warn(
            f"Attempting to overwrite {name} on {registry_name} which is currently",
            _Json(registry[name]), "with", _Json(new_value),
            'To suppress this warning, specify the property "overwriteOk: true"'
        )
