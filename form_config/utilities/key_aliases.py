from bidict import bidict


""" 
Public (camelCase) option keys mapped to the snake_case field names used on our dataclasses.
Use .inverse to go from a field name back to the public key, e.g. when echoing a definition in a warning.
"""

TYPE_KEYS: bidict[str, str] = bidict({
    "name": "name",
    "template": "template",
    "templateUrl": "template_url",
    "controller": "controller",
    "link": "link",
    "defaultOptions": "default_options",
    "extends": "extends",
    "wrapper": "wrapper",
    "data": "data",
    "overwriteOk": "overwrite_ok",
})

WRAPPER_KEYS: bidict[str, str] = bidict({
    "name": "name",
    "template": "template",
    "templateUrl": "template_url",
    "types": "types",
    "data": "data",
    "overwriteOk": "overwrite_ok",
})

ALLOWED_TYPE_PROPERTIES: list[str] = [
    'name', 'template', 'templateUrl', 'controller', 'link',
    'defaultOptions', 'extends', 'wrapper', 'data'
]

ALLOWED_WRAPPER_PROPERTIES: list[str] = [
    'name', 'template', 'templateUrl', 'types', 'data'
]

def to_public_key(key: str, aliases: bidict[str, str]) -> str:
    """ Accepts either spelling of a key and returns the public camelCase one. Unknown keys pass through unchanged. """
    if key in aliases:
        return key
    return aliases.inverse.get(key, key)
