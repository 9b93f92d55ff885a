from typing import Any


class FormConfigError(Exception):
    """ Base exception for everything raised while registering or resolving form config. """
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class InvalidArgument(FormConfigError):
    """ Raised when a registration call receives a value of the wrong shape. """

class ConfigError(FormConfigError):
    """ Raised when a type or wrapper definition violates the registration schema. """

class NotFound(ConfigError):
    """ Raised when a referenced type is not registered. """

    def __init__(self, message: str, *, name: str | None = None, context: Any = None):
        self.name = name
        self.context = context
        super().__init__(message)
