"""

    respath -- RESTful resource registry with path helpers
    ======================================================

    This module provides a registry of resources, each one backed by a
    conventional set of RESTful endpoints (index, new, create, show, edit,
    update, destroy) plus arbitrary extra endpoints. Registry can be dumped to
    plain data and restored from it, and :class:`respath.helpers.PathHelpers`
    computes paths and URLs for registered resource actions.

"""

import enum
import json
import logging
from collections import namedtuple
from collections.abc import Mapping

from respath.resource import capabilities, placeholder
from respath.exc import (
    RouteConfigurationError, InvalidMethod, RouteReversalError,
    ActionNotFound, ResourceNotFound, UrlRootMissing)

__all__ = (
    'Registry', 'ResourceEntry', 'Endpoint', 'ActionMethod',
    'CONVENTIONAL_ENDPOINTS',
    'ALL', 'GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS', 'HEAD',
    'RouteConfigurationError', 'InvalidMethod', 'RouteReversalError',
    'ActionNotFound', 'ResourceNotFound', 'UrlRootMissing')

log = logging.getLogger('respath')

class ActionMethod(str, enum.Enum):
    """ HTTP method

    Members compare equal to their string tags, so ``ActionMethod.GET ==
    'GET'`` holds.
    """

    ALL     = 'ALL'
    GET     = 'GET'
    POST    = 'POST'
    PUT     = 'PUT'
    DELETE  = 'DELETE'
    PATCH   = 'PATCH'
    OPTIONS = 'OPTIONS'
    HEAD    = 'HEAD'

    @classmethod
    def from_value(cls, value):
        """ Return method for string tag ``value``

        :raises respath.exc.InvalidMethod:
            if ``value`` isn't one of the known tags
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidMethod(value) from None

    def __str__(self):
        return self.value

ALL     = ActionMethod.ALL
GET     = ActionMethod.GET
POST    = ActionMethod.POST
PUT     = ActionMethod.PUT
DELETE  = ActionMethod.DELETE
PATCH   = ActionMethod.PATCH
OPTIONS = ActionMethod.OPTIONS
HEAD    = ActionMethod.HEAD

Endpoint = namedtuple('Endpoint', ['method', 'path', 'name'])
Endpoint.__doc__ = """ Endpoint serving single resource action

:attr method:
    :class:`ActionMethod` of endpoint
:attr path:
    path template relative to resource, parameters are marked by a colon
    like in ``/:id/edit``
:attr name:
    name of the action
"""

CONVENTIONAL_ENDPOINTS = (
    Endpoint(GET,    '/',           'index'),
    Endpoint(GET,    '/new',        'new'),
    Endpoint(GET,    '/new',        'new_'),
    Endpoint(POST,   '/',           'create'),
    Endpoint(GET,    '/:id',        'show'),
    Endpoint(GET,    '/:id/edit',   'edit'),
    Endpoint(PUT,    '/:id',        'update'),
    Endpoint(POST,   '/:id/update', 'updateByPost'),
    Endpoint(GET,    '/:id/destroy', 'destroy'),
    Endpoint(DELETE, '/:id',        'destroy'),
    )

class ResourceEntry(object):
    """ Registered resource

    :attr handler:
        mapping from action name to callable or ``None`` if resource was
        registered without handler
    :attr endpoints:
        mapping from action name to :class:`Endpoint`
    """

    def __init__(self, handler, endpoints):
        self.handler = handler
        self.endpoints = endpoints

    def __eq__(self, o):
        if not isinstance(o, ResourceEntry):
            return NotImplemented
        return self.handler == o.handler and self.endpoints == o.endpoints

    def __repr__(self):
        return '%s(handler=%r, endpoints=%r)' % (
            self.__class__.__name__,
            sorted(self.handler) if self.handler is not None else None,
            list(self.endpoints))

class Registry(object):
    """ Collection of resources

    :param global_path_prefix:
        prefix prepended to every path computed for registered resources,
        e.g. ``/api``
    """

    def __init__(self, global_path_prefix=''):
        self.global_path_prefix = global_path_prefix
        self.resources = {}

    @classmethod
    def load(cls, data):
        """ Construct registry from ``data`` produced by :meth:`serialize`"""
        registry = cls()
        registry.deserialize(data)
        return registry

    def register(self, name, handler=None, extra=()):
        """ Register resource ``name``

        Extra endpoints are considered first, then conventional ones. An
        endpoint is included if no ``handler`` was given or if ``handler``
        provides an action with endpoint's name. Once an action name is taken
        other endpoints with the same name are skipped. Previous registration
        under ``name`` is replaced completely.

        :param name:
            name of the resource
        :param handler:
            object with actions, see :func:`respath.resource.capabilities`,
            can be omitted if only path helpers are needed
        :param extra:
            a list of non-restful :class:`Endpoint` objects
        """
        handler = capabilities(handler)
        endpoints = {}
        for endpoint in list(extra) + list(CONVENTIONAL_ENDPOINTS):
            if endpoint.name in endpoints:
                continue
            if handler is None or endpoint.name in handler:
                endpoints[endpoint.name] = endpoint
        self.resources[name] = ResourceEntry(handler, endpoints)
        log.debug('registered resource %r with actions %s',
                  name, ', '.join(endpoints) or '<none>')

    def attach_handler(self, name, handler):
        """ Replace handler of already registered resource ``name``

        Endpoints computed at registration are kept as is. Unknown resource
        names are ignored.
        """
        if name not in self.resources:
            log.debug('not attaching handler to unknown resource %r', name)
            return
        self.resources[name].handler = capabilities(handler)
        log.debug('attached handler to resource %r', name)

    def has_resource(self, name):
        return name in self.resources

    def has_action(self, resource, action):
        """ Check if ``resource`` is registered and has ``action``"""
        entry = self.resources.get(resource)
        return entry is not None and action in entry.endpoints

    def lookup(self, resource, action):
        """ Return :class:`Endpoint` for ``action`` of ``resource`` or
        ``None``"""
        if not self.has_action(resource, action):
            return None
        return self.resources[resource].endpoints[action]

    def serialize(self):
        """ Dump registry to plain data

        Handlers are reduced to mapping from action names to empty strings,
        endpoint methods to their string tags.
        """
        paths = {}
        for name, entry in self.resources.items():
            if entry.handler is None:
                handler = None
            else:
                handler = dict((action, '') for action in entry.handler)
            paths[name] = {
                'handler': handler,
                'endpoints': dict(
                    (action, {
                        'method': str(endpoint.method),
                        'path': endpoint.path,
                        'name': action,
                    })
                    for action, endpoint in entry.endpoints.items()),
            }
        return {
            'globalPathPrefix': self.global_path_prefix,
            'paths': paths,
        }

    def deserialize(self, data):
        """ Restore resources from ``data`` produced by :meth:`serialize`

        Handlers are restored as placeholders with no-op actions, real ones
        can be put back with :meth:`attach_handler`.

        :raises respath.exc.InvalidMethod:
            if some endpoint has an unknown method
        :raises respath.exc.RouteConfigurationError:
            if ``data`` is malformed

        Registry is left untouched if any part of ``data`` is rejected.
        """
        try:
            prefix = data['globalPathPrefix']
            paths = list(data['paths'].items())
        except (KeyError, TypeError, AttributeError) as e:
            raise RouteConfigurationError(
                'malformed serialized registry: %s' % e) from e

        loaded = []
        for name, serialized in paths:
            try:
                extra = [
                    Endpoint(
                        ActionMethod.from_value(endpoint['method']),
                        endpoint['path'],
                        endpoint['name'])
                    for endpoint in serialized['endpoints'].values()]
                handler = serialized.get('handler')
                if handler is not None:
                    if not isinstance(handler, Mapping):
                        raise TypeError('handler should be a mapping')
                    handler = placeholder(handler)
            except (KeyError, TypeError, AttributeError) as e:
                raise RouteConfigurationError(
                    "malformed serialized resource '%s': %s" % (name, e)
                    ) from e
            loaded.append((name, handler, extra))

        self.global_path_prefix = prefix
        for name, handler, extra in loaded:
            self.register(name, handler, extra)
        log.debug('loaded %d resource(s) with prefix %r',
                  len(loaded), self.global_path_prefix)

    def to_json(self, **kwargs):
        """ Dump registry to JSON text, ``kwargs`` go to :func:`json.dumps`"""
        return json.dumps(self.serialize(), **kwargs)

    def from_json(self, text):
        """ Restore resources from JSON text produced by :meth:`to_json`"""
        try:
            data = json.loads(text)
        except ValueError as e:
            raise RouteConfigurationError(
                'cannot decode serialized registry: %s' % e) from e
        self.deserialize(data)

    def __contains__(self, name):
        return self.has_resource(name)

    def __iter__(self):
        return iter(self.resources)

    def __eq__(self, o):
        if not isinstance(o, Registry):
            return NotImplemented
        return (self.global_path_prefix == o.global_path_prefix
            and self.resources == o.resources)

    def __repr__(self):
        return '%s(global_path_prefix=%r, resources=%r)' % (
            self.__class__.__name__, self.global_path_prefix, self.resources)
