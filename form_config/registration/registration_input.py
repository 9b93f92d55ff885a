from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..types.type_definition import TypeDefinition
from ..wrappers.wrapper_definition import WrapperDefinition


""" 
set_type() and set_wrapper() accept several shapes of input. Each entry point classifies its argument into one of these
variants once, then dispatches on the variant.
"""

@dataclass
class SingleType:
    options: TypeDefinition | Mapping[str, Any]

@dataclass
class ManyTypes:
    options_list: Sequence[Any]

@dataclass
class SingleWrapper:
    options: WrapperDefinition | Mapping[str, Any]

@dataclass
class WrapperTemplate:
    template: str

@dataclass
class ManyWrappers:
    options_list: Sequence[Any]

TypeInput = SingleType | ManyTypes
WrapperInput = SingleWrapper | WrapperTemplate | ManyWrappers

def classify_type_input(options: Any) -> TypeInput | None:
    """ Returns None when options is none of the accepted shapes. """
    if isinstance(options, (list, tuple)):
        return ManyTypes(options)
    if isinstance(options, (TypeDefinition, Mapping)):
        return SingleType(options)
    return None

def classify_wrapper_input(options: Any) -> WrapperInput | None:
    """ Returns None when options is none of the accepted shapes. Strings are checked first since they are also sequences. """
    if isinstance(options, str):
        return WrapperTemplate(options)
    if isinstance(options, (list, tuple)):
        return ManyWrappers(options)
    if isinstance(options, (WrapperDefinition, Mapping)):
        return SingleWrapper(options)
    return None
