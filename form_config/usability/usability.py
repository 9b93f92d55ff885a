from dataclasses import dataclass
import json
from typing import TYPE_CHECKING, Any, Iterable

from ..utilities.config_error import ConfigError, FormConfigError
if TYPE_CHECKING:
    from ..wrappers.wrapper_definition import WrapperDefinition


def to_json(value: Any) -> str:
    """ Best-effort json for error and warning messages. Controllers and other callables are shown by repr. """
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    try:
        return json.dumps(value, default=repr)
    except (TypeError, ValueError):
        # Non-string keys or circular references
        return repr(value)

@dataclass
class Usability:
    """
    Builds the errors raised by the registries and runs the schema checks they delegate.
    
    Swap in your own instance (or subclass) on FormConfig to change message formatting or tighten the checks.
    """
    error_url_prefix: str | None = None
    """ When set, errors raised with a slug end with a link to f"{error_url_prefix}{slug}". """
    transclude_marker: str | None = None
    """ When set, every wrapper template must contain this marker. """

    def get_error_message(self, message: str, slug: str | None = None) -> str:
        url = ""
        if slug is not None and self.error_url_prefix is not None:
            url = f" {self.error_url_prefix}{slug}"
        return f"Form config error: {message}.{url}"

    def get_error(self, message: str, error_cls: type[FormConfigError] = ConfigError, *, slug: str | None = None, **details: Any) -> FormConfigError:
        """ Returns (does not raise) an error of error_cls. Extra keyword details are passed through to the error's constructor. """
        return error_cls(self.get_error_message(message, slug), **details)

    def check_allowed_properties(self, allowed_properties: Iterable[str], obj: dict[str, Any]) -> None:
        allowed = set(allowed_properties)
        extra_props = [prop for prop in obj if prop not in allowed]
        if extra_props:
            raise self.get_error(
                f"Cannot specify these properties: {', '.join(extra_props)}. "
                f"Only these are allowed: {', '.join(allowed_properties)}. You provided: {to_json(obj)}"
            )

    def check_wrapper(self, wrapper: 'WrapperDefinition') -> None:
        """ Validates the shape of a normalized wrapper before it is stored. """
        if not isinstance(wrapper.name, str):
            raise self.get_error(f"A template wrapper name must be a string. You provided: {to_json(wrapper)}", slug="setwrapper-validation-failed")
        has_template = isinstance(wrapper.template, str)
        has_template_url = isinstance(wrapper.template_url, str)
        if has_template == has_template_url:
            raise self.get_error(
                f"A template wrapper must have exactly one of template or templateUrl as a string. You provided: {to_json(wrapper)}",
                slug="setwrapper-validation-failed"
            )
        if not isinstance(wrapper.overwrite_ok, bool):
            raise self.get_error(f"overwriteOk must be a boolean. You provided: {to_json(wrapper)}", slug="setwrapper-validation-failed")

    def check_wrapper_template(self, template: str, additional_info: Any) -> None:
        if self.transclude_marker is None:
            return
        if self.transclude_marker not in template:
            raise self.get_error(
                f'Template wrapper templates must use "{self.transclude_marker}" somewhere in them. '
                f'This one does not have "{self.transclude_marker}" in it: {template}\n'
                f"Additional information: {to_json(additional_info)}"
            )
