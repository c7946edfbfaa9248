"""

    respath.exc -- exceptions
    =========================

"""

from webob import exc

__all__ = (
    'RouteConfigurationError', 'InvalidMethod', 'RouteReversalError',
    'ActionNotFound', 'ResourceNotFound', 'UrlRootMissing')

class RouteConfigurationError(Exception):
    """ Resources were configured improperly

    Errors of such type can be only raised while registering or loading
    resources and not while computing paths.
    """

class InvalidMethod(RouteConfigurationError, ValueError):
    """ Raised when a method tag doesn't name any known HTTP method"""

    def __init__(self, value):
        self.value = value
        super(InvalidMethod, self).__init__(
            "action method for name '%s' not found" % value)

class RouteReversalError(Exception):
    """ Cannot compute path or URL

    :attr response:
        :class:`webob.Response` object to return to client if the error
        escapes into a WSGI application
    """

    response = exc.HTTPInternalServerError()

class ActionNotFound(RouteReversalError):
    """ Raised when resource has no endpoint for requested action"""

    response = exc.HTTPNotFound()

    def __init__(self, resource, action=None, msg=None):
        self.resource = resource
        self.action = action
        super(ActionNotFound, self).__init__(
            msg or "action '%s' not found in resource '%s'" % (
                action, resource))

class ResourceNotFound(ActionNotFound):
    """ Raised when resource isn't registered at all"""

    def __init__(self, resource, action=None):
        super(ResourceNotFound, self).__init__(
            resource, action, "resource '%s' not found" % resource)

class UrlRootMissing(RouteReversalError):
    """ Raised when absolute URL is requested but no URL root was given"""

    def __init__(self):
        super(UrlRootMissing, self).__init__(
            'URL root not specified, unable to form URL')
