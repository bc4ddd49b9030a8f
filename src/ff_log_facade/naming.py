"""
Logger name normalization.

Loggers are arranged in a hierarchy by dotted names using package/class
naming conventions:

* ``"pmodule"``
* ``"pmodule.cmodule"``
* ``"pmodule.cmodule.ClassName"``

which enables hierarchical level setting and abbreviation in some output
handlers.
"""

import re
import types
from typing import Any

_SEPARATOR = re.compile(r"::|\.")


def _lower_namespace(qualified: str) -> str:
    segments = _SEPARATOR.split(qualified)
    return ".".join([s.lower() for s in segments[:-1]] + segments[-1:])


def to_log_name(identifier: Any) -> str:
    """
    Return a logger name for the given identifier.

    Strings are returned unchanged. Modules, classes and functions are turned
    into their fully qualified dotted name with every segment but the last
    lowercased, i.e.::

        to_log_name(foo.bar.Baz) --> "foo.bar.Baz"
        to_log_name(Foo.Bar.Baz) --> "foo.bar.Baz"

    Any other object is named after its class.
    """
    if isinstance(identifier, str):
        return identifier

    if isinstance(identifier, types.ModuleType):
        return _lower_namespace(identifier.__name__)

    if not hasattr(identifier, "__qualname__"):
        identifier = type(identifier)

    module = getattr(identifier, "__module__", None)
    qualified = identifier.__qualname__
    if module and module != "builtins":
        qualified = f"{module}.{qualified}"
    return _lower_namespace(qualified)
