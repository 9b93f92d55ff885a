"""
Form Config Module

This module provides the runtime registry of field types and wrapper templates used to render dynamic forms.
Create a FormConfig per configuration scope and register everything through it.
"""

from .form_config import Extras, FormConfig, TemplateManipulators

# Expose these at the module level
from .types.default_options import ComputedOptions, DefaultOptions, StaticOptions
from .types.type_definition import TypeDefinition
from .wrappers.wrapper_definition import WrapperDefinition
from .usability.usability import Usability
from .utilities.config_error import ConfigError, FormConfigError, InvalidArgument, NotFound
from .utilities.logger import set_log_level, set_logger
from .utilities.reverse_deep_merge import reverse_deep_merge
from .utilities.special_values import DEFAULT_WRAPPER_NAME, TRANSCLUDE_MARKER
