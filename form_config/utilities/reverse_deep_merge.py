from copy import deepcopy
from typing import Any, TypeVar


T = TypeVar('T', dict, list)

def _is_same_container(a: Any, b: Any) -> bool:
    """ Only recurse when both sides are the same kind of container. """
    return isinstance(a, (dict, list)) and type(a) is type(b)

def reverse_deep_merge(target: T, *sources: Any) -> T:
    """
    Fills the gaps in target with values from sources, without overwriting anything target already holds.
    
    Precedence is target > earlier sources > later sources. When target and a source both hold a dict (or both hold a list)
    under the same key, the two are merged recursively. Lists are merged by index.
    Values copied over from a source are deep copies, so later mutation of target does not leak back into the source.
    Sources that are not the same kind of container as target (including None) are skipped.
    
    Returns target (mutated in place) for chaining.
    """
    for source in sources:
        if isinstance(target, list) and isinstance(source, list):
            _merge_list(target, source)
        elif isinstance(target, dict) and isinstance(source, dict):
            _merge_dict(target, source)
    return target

def _merge_dict(target: dict, source: dict) -> None:
    for key, value in source.items():
        if key not in target:
            target[key] = deepcopy(value)
        elif _is_same_container(target[key], value):
            reverse_deep_merge(target[key], value)

def _merge_list(target: list, source: list) -> None:
    for index, value in enumerate(source):
        if index >= len(target):
            target.append(deepcopy(value))
        elif _is_same_container(target[index], value):
            reverse_deep_merge(target[index], value)
