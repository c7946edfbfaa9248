"""

    respath.resource -- handlers as capability sets
    ===============================================

    A handler is anything exposing named actions: a mapping, a module, a class
    or an instance. Registry only cares about which action names a handler
    provides, so handlers are normalized into a plain ``dict`` mapping action
    name to callable. Callables are never invoked here.

"""

from collections.abc import Mapping

from respath.utils import import_string

__all__ = ('capabilities', 'placeholder', 'noop')

def noop(*args, **kwargs):
    """ Stand-in for handler actions restored from serialized data"""

def capabilities(handler):
    """ Normalize ``handler`` into mapping from action name to callable

    :param handler:
        ``None``, a mapping, an import string (``pkg.module`` or
        ``pkg.module:obj``) or any object with callable attributes
    """
    if handler is None:
        return None
    if isinstance(handler, str):
        handler = import_string(handler)
    if isinstance(handler, Mapping):
        return dict(handler)
    caps = {}
    for name in dir(handler):
        if name.startswith('_'):
            continue
        value = getattr(handler, name, None)
        if callable(value):
            caps[name] = value
    return caps

def placeholder(names):
    """ Build handler which has ``names`` as capabilities but does nothing"""
    return dict((name, noop) for name in names)
