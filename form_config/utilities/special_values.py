DEFAULT_WRAPPER_NAME = "default"
"""
Name given to a wrapper registered with neither a name nor any types.
get_wrapper() also falls back to this name when called without one.
"""

TRANSCLUDE_MARKER = "<formly-transclude></formly-transclude>"
""" 
The placeholder a wrapper template uses to mark where the wrapped field is rendered.
Pass this to Usability(transclude_marker=...) to require it in every wrapper template.
"""
