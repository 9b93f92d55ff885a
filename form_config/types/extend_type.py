from copy import deepcopy
from typing import Any, Callable

from .default_options import ComputedOptions, Context, DefaultOptions, StaticOptions
from .type_definition import TypeDefinition
from ..utilities.reverse_deep_merge import reverse_deep_merge


""" 
Composition rules for `extends`. The parent passed in here is always already resolved, so composing against it carries the whole ancestor chain.
Each function mutates the child definition in place.
"""

Instantiate = Callable[[Any, dict[str, Any]], Any]

def call_controller(controller: Any, scope: dict[str, Any]) -> Any:
    """ Default controller instantiation: call the controller with the scope. """
    return controller(scope)

def compose_controllers(parent_ctrl: Any, child_ctrl: Any) -> Callable[..., None]:
    def controller(scope: dict[str, Any], instantiate: Instantiate | None = None) -> None:
        instantiate = instantiate or call_controller
        # Parent first so the child can override whatever state it sets up
        instantiate(parent_ctrl, scope)
        instantiate(child_ctrl, scope)
    controller.parent = parent_ctrl
    controller.child = child_ctrl
    return controller

def compose_links(parent_link: Callable[..., Any], child_link: Callable[..., Any]) -> Callable[..., None]:
    def link(*args: Any, **kwargs: Any) -> None:
        parent_link(*args, **kwargs)
        child_link(*args, **kwargs)
    link.parent = parent_link
    link.child = child_link
    return link

def extend_controller(options: TypeDefinition, parent: TypeDefinition) -> None:
    if parent.controller is None:
        return
    if options.controller is not None:
        options.controller = compose_controllers(parent.controller, options.controller)
    else:
        options.controller = parent.controller

def extend_link(options: TypeDefinition, parent: TypeDefinition) -> None:
    if parent.link is None:
        return
    if options.link is not None:
        options.link = compose_links(parent.link, options.link)
    else:
        options.link = parent.link

def compose_default_options(parent_do: DefaultOptions | None, child_do: DefaultOptions | None) -> DefaultOptions | None:
    """ 
    Returns the child's composed default options, or None when there is nothing to compose yet
    (static parent with static or missing child is handled by the residual merge).
    """
    if parent_do is None:
        return child_do

    if isinstance(parent_do, ComputedOptions):
        parent_func = parent_do.func
        if isinstance(child_do, ComputedOptions):
            child_func = child_do.func
            def default_options(context: Context) -> dict[str, Any]:
                return child_func(parent_func(context))
            return ComputedOptions(default_options)

        child_static = child_do.value if isinstance(child_do, StaticOptions) else None
        def default_options(context: Context) -> dict[str, Any]:
            base = parent_func(context)
            if child_static is not None:
                # Child's static values win, base fills the gaps. Update base in place and hand it back.
                merged = reverse_deep_merge(deepcopy(child_static), base)
                base.update(merged)
            return base
        return ComputedOptions(default_options)

    if isinstance(child_do, ComputedOptions):
        child_func = child_do.func
        parent_static = parent_do.value
        def default_options(context: Context) -> dict[str, Any]:
            return child_func(reverse_deep_merge({}, context, parent_static))
        return ComputedOptions(default_options)

    return child_do

def extend_default_options(options: TypeDefinition, parent: TypeDefinition) -> None:
    options.default_options = compose_default_options(parent.default_options, options.default_options)

def merge_remaining_fields(options: TypeDefinition, parent: TypeDefinition) -> None:
    """ Fills every field the child left unset from the parent. Containers are merged with the child's values taking precedence. """
    # Only inherit a template when the child has neither kind, so at most one of them is ever set
    if options.template is None and options.template_url is None:
        options.template = parent.template
        options.template_url = parent.template_url
    if options.wrapper is None:
        options.wrapper = deepcopy(parent.wrapper)

    if options.data is None:
        options.data = deepcopy(parent.data)
    elif isinstance(options.data, dict) and isinstance(parent.data, dict):
        options.data = reverse_deep_merge(deepcopy(options.data), parent.data)

    # A computed parent was already composed by extend_default_options
    parent_do = parent.default_options
    if isinstance(parent_do, StaticOptions):
        if options.default_options is None:
            options.default_options = StaticOptions(deepcopy(parent_do.value))
        elif isinstance(options.default_options, StaticOptions):
            options.default_options = StaticOptions(reverse_deep_merge(deepcopy(options.default_options.value), parent_do.value))

def extend_type(options: TypeDefinition, parent: TypeDefinition) -> TypeDefinition:
    """ Composes options with its (already resolved) parent, in place, and returns options. """
    extend_controller(options, parent)
    extend_link(options, parent)
    extend_default_options(options, parent)
    merge_remaining_fields(options, parent)
    return options
