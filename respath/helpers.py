"""

    respath.helpers -- computing paths and URLs for resource actions
    ================================================================

"""

import re

from respath.utils import fill_positional, build_query_string
from respath.exc import ActionNotFound, ResourceNotFound, UrlRootMissing

__all__ = ('PathHelpers', 'PathTo', 'URLTo')

def _as_args(args):
    if args is None:
        return []
    if isinstance(args, (list, tuple)):
        return list(args)
    return [args]

class PathHelpers(object):
    """ Path and URL builder over :class:`respath.Registry`

    :param registry:
        registry to read resources from, it is never modified
    :param url_root:
        scheme and host to prepend to paths in :meth:`url_to`, e.g.
        ``http://example.com``
    """

    def __init__(self, registry, url_root=None):
        self.registry = registry
        self.url_root = url_root

    def regex_of(self, resource):
        """ Return compiled pattern matching paths which belong to
        ``resource``

        Resource name is used as is, without escaping.

        :raises respath.exc.ResourceNotFound:
            if ``resource`` isn't registered
        """
        if not self.registry.has_resource(resource):
            raise ResourceNotFound(resource)
        pattern = '^'
        if self.registry.global_path_prefix:
            pattern += self.registry.global_path_prefix + '/'
        pattern += resource + '.*'
        return re.compile(pattern)

    def path_to(self, resource, action, args=None, params=None):
        """ Return path to ``action`` of ``resource``

        :param args:
            single value or a list of values to fill path parameters with,
            by position
        :param params:
            mapping of query string parameters, ``None`` means no query
            string at all

        :raises respath.exc.ResourceNotFound:
            if ``resource`` isn't registered
        :raises respath.exc.ActionNotFound:
            if ``resource`` has no ``action``
        """
        endpoint = self.registry.lookup(resource, action)
        if endpoint is None:
            if not self.registry.has_resource(resource):
                raise ResourceNotFound(resource, action)
            raise ActionNotFound(resource, action)

        path = fill_positional(
            '/%s%s' % (resource, endpoint.path), _as_args(args))

        if self.registry.global_path_prefix:
            path = self.registry.global_path_prefix + path

        if params is None:
            return path

        query = build_query_string(params)
        if query:
            path += '?' + query
        return path

    def url_to(self, resource, action, args=None, params=None):
        """ Return absolute URL to ``action`` of ``resource``

        Same as :meth:`path_to` but prefixed with ``url_root``.

        :raises respath.exc.UrlRootMissing:
            if helpers were constructed without ``url_root``
        """
        if self.url_root is None:
            raise UrlRootMissing()
        return self.url_root + self.path_to(resource, action, args, params)

    def gen_path_to(self, resource, action):
        """ Return :class:`PathTo` bound to ``resource`` and ``action``"""
        return PathTo(self, resource, action)

    def gen_url_to(self, resource, action):
        """ Return :class:`URLTo` bound to ``resource`` and ``action``"""
        return URLTo(self, resource, action)

class PathTo(object):
    """ Path to resource action with args and params supplied later"""

    def __init__(self, helpers, resource, action):
        self.helpers = helpers
        self.resource = resource
        self.action = action

    def __call__(self, args=None, params=None):
        return self.helpers.path_to(self.resource, self.action, args, params)

    def __repr__(self):
        return '%s(resource=%r, action=%r)' % (
            self.__class__.__name__, self.resource, self.action)

class URLTo(PathTo):
    """ Absolute URL to resource action with args and params supplied
    later"""

    def __call__(self, args=None, params=None):
        return self.helpers.url_to(self.resource, self.action, args, params)
