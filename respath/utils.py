"""

    respath.utils -- utility code
    =============================

    Path templates mark parameters with a colon, like ``/:id/edit``.
    :func:`fill_positional` is what path helpers use; :func:`fill_string`
    fills parameters by name and is provided for callers which keep
    arguments in a mapping.

"""

import re
import sys
from collections.abc import Mapping
from urllib.parse import quote

__all__ = (
    'string_params', 'fill_string', 'fill_positional', 'build_query_string',
    'import_string', 'ImportStringError')

_param_re = re.compile(r':(\w+)')

# characters left alone by encodeURIComponent
_component_safe = "-_.!~*'()"

def string_params(template):
    """ Return parameter names found in ``template``

    Parameters are marked by a colon, duplicates are kept in order of
    appearance:

        >>> string_params('/resource/:id/action/:sub')
        ['id', 'sub']

    """
    return _param_re.findall(template)

def fill_string(template, values):
    """ Fill ``template`` parameters by name from ``values`` mapping

    Parameters without a value are left in their original state:

        >>> fill_string('/resource/:id/action/:extra', {'id': 1})
        '/resource/1/action/:extra'

    """
    def replace(m):
        name = m.group(1)
        if name in values:
            return str(values[name])
        return m.group(0)
    return _param_re.sub(replace, template)

def fill_positional(template, args):
    """ Fill ``template`` parameters by position from ``args`` sequence

    Parameter names from :func:`string_params` are zipped with ``args``, so
    each occurrence of a parameter takes the next argument, even if the same
    name was already filled. Surplus arguments are ignored, occurrences
    without an argument are left as is:

        >>> fill_positional('/:id/copy/:id/:rest', [1, 2])
        '/1/copy/2/:rest'

    """
    values = iter([
        str(arg) for _name, arg in zip(string_params(template), args)])

    def replace(m):
        return next(values, m.group(0))
    return _param_re.sub(replace, template)

def _encode_component(value):
    return quote(str(value), safe=_component_safe)

def build_query_string(params):
    """ Build query string from ``params``

    Keys and values are rendered with ``str()`` before encoding, so
    ``True`` and ``None`` become ``True`` and ``None``, not ``true`` and
    ``null``.

    :param params:
        mapping or sequence of ``(key, value)`` pairs, order is preserved
    """
    if isinstance(params, Mapping):
        params = params.items()
    return '&'.join(
        '%s=%s' % (_encode_component(k), _encode_component(v))
        for k, v in params)

def import_string(import_name, silent=False):
    """Imports an object based on a string.  An import path can be specified
    either in dotted notation (``xml.sax.saxutils.escape``) or with a colon as
    object delimiter (``xml.sax.saxutils:escape``).

    If `silent` is True the return value will be `None` if the import fails.

    :param import_name: the dotted name for the object to import.
    :param silent: if set to `True` import errors are ignored and
                   `None` is returned instead.
    :return: imported object

    :copyright: (c) 2011 by the Werkzeug Team
    """
    try:
        if ':' in import_name:
            module, obj = import_name.split(':', 1)
        elif '.' in import_name:
            module, obj = import_name.rsplit('.', 1)
        else:
            return __import__(import_name)
        try:
            return getattr(__import__(module, None, None, [obj]), obj)
        except (ImportError, AttributeError):
            # support importing modules not yet set up by the parent module
            # (or package for that matter)
            modname = module + '.' + obj
            __import__(modname)
            return sys.modules[modname]
    except ImportError as e:
        if not silent:
            raise ImportStringError(import_name, e) from e

class ImportStringError(ImportError):
    """Provides information about a failed :func:`import_string` attempt.

    :copyright: (c) 2011 by the Werkzeug Team
    """

    #: String in dotted notation that failed to be imported.
    import_name = None
    #: Wrapped exception.
    exception = None

    def __init__(self, import_name, exception):
        self.import_name = import_name
        self.exception = exception
        ImportError.__init__(
            self, 'import_string() failed for %r, %s: %s' % (
                import_name, exception.__class__.__name__, exception))

    def __repr__(self):
        return '<%s(%r, %r)>' % (self.__class__.__name__, self.import_name,
                                 self.exception)
