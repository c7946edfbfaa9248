"""

    respath.tests -- test suite
    ===========================

"""

import json
from unittest import TestCase

from respath import Registry, Endpoint, ActionMethod, CONVENTIONAL_ENDPOINTS
from respath import GET, POST, DELETE
from respath.helpers import PathHelpers, PathTo, URLTo
from respath.resource import capabilities, placeholder, noop
from respath.utils import (
    string_params, fill_string, fill_positional, build_query_string,
    import_string, ImportStringError)
from respath.exc import (
    InvalidMethod, RouteConfigurationError, RouteReversalError,
    ActionNotFound, ResourceNotFound, UrlRootMissing)

__all__ = ()

def index():
    return 'index'

def show(id):
    return 'show'

def action_with_detail(id, detail):
    return 'detail'

controller = {
    'index': index,
    'show': show,
    'actionWithDetail': action_with_detail,
}

detail_endpoint = Endpoint(GET, '/:id/action/:detail', 'actionWithDetail')

class Controller(object):

    def index(self):
        pass

    def edit(self, id):
        pass

    def _private(self):
        pass

    title = 'not an action'

class TestRegistry(TestCase):

    def setUp(self):
        self.registry = Registry('/api')
        self.registry.register('test', controller, [detail_endpoint])

    def test_actions_follow_handler(self):
        self.assertEqual(
            sorted(self.registry.resources['test'].endpoints),
            ['actionWithDetail', 'index', 'show'])
        self.assertTrue(self.registry.has_action('test', 'show'))
        self.assertFalse(self.registry.has_action('test', 'edit'))
        self.assertFalse(self.registry.has_action('test', 'destroy'))
        self.assertFalse(self.registry.has_action('missing', 'show'))

    def test_no_handler_gets_everything(self):
        self.registry.register('users', extra=[detail_endpoint])
        names = set(e.name for e in CONVENTIONAL_ENDPOINTS)
        names.add('actionWithDetail')
        self.assertEqual(set(self.registry.resources['users'].endpoints), names)
        for name in names:
            self.assertTrue(self.registry.has_action('users', name))
        self.assertIsNone(self.registry.resources['users'].handler)

    def test_first_endpoint_wins(self):
        self.registry.register('users')
        self.assertEqual(
            self.registry.lookup('users', 'destroy'),
            Endpoint(GET, '/:id/destroy', 'destroy'))

        self.registry.register('users', None, [
            Endpoint(GET, '/:slug', 'show'),
            Endpoint(POST, '/:slug', 'show')])
        self.assertEqual(
            self.registry.lookup('users', 'show'),
            Endpoint(GET, '/:slug', 'show'))

    def test_extra_needs_capability(self):
        self.registry.register('test', {'index': index}, [detail_endpoint])
        self.assertFalse(self.registry.has_action('test', 'actionWithDetail'))
        self.assertTrue(self.registry.has_action('test', 'index'))

    def test_register_replaces(self):
        self.registry.register('test', {'edit': index})
        entry = self.registry.resources['test']
        self.assertEqual(list(entry.endpoints), ['edit'])
        self.assertEqual(entry.handler, {'edit': index})

    def test_attach_handler(self):
        other = {'destroy': index}
        self.registry.attach_handler('test', other)
        entry = self.registry.resources['test']
        self.assertEqual(entry.handler, other)
        self.assertEqual(
            sorted(entry.endpoints), ['actionWithDetail', 'index', 'show'])
        self.assertFalse(self.registry.has_action('test', 'destroy'))

    def test_attach_handler_unknown(self):
        self.registry.attach_handler('users', controller)
        self.assertNotIn('users', self.registry)
        self.assertEqual(list(self.registry), ['test'])

    def test_lookup(self):
        self.assertEqual(
            self.registry.lookup('test', 'show'),
            Endpoint(GET, '/:id', 'show'))
        self.assertIsNone(self.registry.lookup('test', 'edit'))
        self.assertIsNone(self.registry.lookup('missing', 'show'))

    def test_handler_object(self):
        self.registry.register('ctl', Controller())
        self.assertEqual(
            sorted(self.registry.resources['ctl'].endpoints), ['edit', 'index'])
        self.assertEqual(
            sorted(self.registry.resources['ctl'].handler), ['edit', 'index'])

    def test_handler_import_string(self):
        self.registry.register(
            'fmt', 'string:Formatter', [Endpoint(GET, '/:id/format', 'format')])
        self.assertTrue(self.registry.has_action('fmt', 'format'))
        self.assertFalse(self.registry.has_action('fmt', 'index'))
        self.assertRaises(
            ImportStringError,
            self.registry.register, 'bad', 'respath.no_such_module')

class TestSerialization(TestCase):

    def setUp(self):
        self.registry = Registry('/api')
        self.registry.register('test', controller, [detail_endpoint])

    def test_serialize(self):
        expected = {
            'globalPathPrefix': '/api',
            'paths': {
                'test': {
                    'handler': {
                        'index': '',
                        'show': '',
                        'actionWithDetail': '',
                    },
                    'endpoints': {
                        'index': {
                            'method': 'GET',
                            'name': 'index',
                            'path': '/',
                        },
                        'show': {
                            'method': 'GET',
                            'name': 'show',
                            'path': '/:id',
                        },
                        'actionWithDetail': {
                            'method': 'GET',
                            'name': 'actionWithDetail',
                            'path': '/:id/action/:detail',
                        },
                    },
                },
            },
        }
        self.assertEqual(self.registry.serialize(), expected)

    def test_deserialize_then_attach(self):
        restored = Registry()
        restored.deserialize(self.registry.serialize())
        self.assertNotEqual(restored, self.registry)
        restored.attach_handler('test', controller)
        self.assertEqual(restored, self.registry)

    def test_deserialize_placeholders(self):
        restored = Registry.load(self.registry.serialize())
        self.assertEqual(restored.global_path_prefix, '/api')
        handler = restored.resources['test'].handler
        self.assertEqual(set(handler), set(controller))
        for action in handler.values():
            self.assertIs(action, noop)
        self.assertEqual(
            restored.resources['test'].endpoints,
            self.registry.resources['test'].endpoints)

    def test_methods_restored(self):
        self.registry.register('users', None, [
            Endpoint(ActionMethod.PATCH, '/:id', 'patch')])
        restored = Registry.load(self.registry.serialize())
        endpoint = restored.lookup('users', 'patch')
        self.assertIs(endpoint.method, ActionMethod.PATCH)
        self.assertIs(restored.lookup('users', 'update').method, ActionMethod.PUT)

    def test_no_handler_round_trip(self):
        self.registry.register('users')
        data = self.registry.serialize()
        self.assertIsNone(data['paths']['users']['handler'])
        restored = Registry.load(data)
        self.assertIsNone(restored.resources['users'].handler)
        self.assertEqual(
            restored.resources['users'], self.registry.resources['users'])

    def test_json_round_trip(self):
        text = self.registry.to_json(sort_keys=True)
        self.assertEqual(json.loads(text), self.registry.serialize())
        restored = Registry()
        restored.from_json(text)
        restored.attach_handler('test', controller)
        self.assertEqual(restored, self.registry)

    def test_invalid_method(self):
        data = self.registry.serialize()
        data['paths']['test']['endpoints']['show']['method'] = 'FETCH'
        self.assertRaises(InvalidMethod, Registry.load, data)

    def test_malformed(self):
        self.assertRaises(RouteConfigurationError, Registry.load, {})
        self.assertRaises(
            RouteConfigurationError,
            Registry.load, {'globalPathPrefix': '', 'paths': {'a': {}}})
        self.assertRaises(
            RouteConfigurationError, Registry().from_json, '{not json')
        self.assertRaises(
            RouteConfigurationError,
            Registry.load, {'globalPathPrefix': '', 'paths': []})
        self.assertRaises(
            RouteConfigurationError,
            Registry.load, {'globalPathPrefix': '', 'paths': {
                'a': {'handler': 5, 'endpoints': {}}}})
        self.assertRaises(
            RouteConfigurationError,
            Registry.load, {'globalPathPrefix': '', 'paths': {
                'a': {'handler': 'index', 'endpoints': {}}}})

    def test_failed_load_keeps_registry(self):
        self.registry.register('keep')
        before = self.registry.serialize()
        data = {
            'globalPathPrefix': '/v2',
            'paths': {
                'a': {'handler': None, 'endpoints': {
                    'index': {'method': 'GET', 'path': '/', 'name': 'index'},
                }},
                'b': {'handler': None, 'endpoints': {
                    'index': {'method': 'FETCH', 'path': '/', 'name': 'index'},
                }},
            },
        }
        self.assertRaises(InvalidMethod, self.registry.deserialize, data)
        self.assertEqual(self.registry.global_path_prefix, '/api')
        self.assertEqual(sorted(self.registry), ['keep', 'test'])
        self.assertEqual(self.registry.serialize(), before)

        data['paths']['b'] = {'handler': 5, 'endpoints': {}}
        self.assertRaises(
            RouteConfigurationError, self.registry.deserialize, data)
        self.assertEqual(self.registry.global_path_prefix, '/api')
        self.assertNotIn('a', self.registry)

class TestActionMethod(TestCase):

    def test_from_value(self):
        for tag in ('ALL', 'GET', 'POST', 'PUT', 'DELETE', 'PATCH',
                    'OPTIONS', 'HEAD'):
            method = ActionMethod.from_value(tag)
            self.assertEqual(method.value, tag)
            self.assertEqual(str(method), tag)
        self.assertIs(ActionMethod.from_value('DELETE'), DELETE)

    def test_unknown(self):
        self.assertRaises(InvalidMethod, ActionMethod.from_value, 'get')
        self.assertRaises(ValueError, ActionMethod.from_value, 'TRACE')
        with self.assertRaises(InvalidMethod) as cm:
            ActionMethod.from_value('TRACE')
        self.assertEqual(cm.exception.value, 'TRACE')

class TestPathHelpers(TestCase):

    def setUp(self):
        self.registry = Registry('/api')
        self.registry.register('test', controller, [detail_endpoint])
        self.helpers = PathHelpers(self.registry)

    def test_no_args(self):
        self.assertEqual(self.helpers.path_to('test', 'index'), '/api/test/')

    def test_single_arg(self):
        self.assertEqual(self.helpers.path_to('test', 'show', 1), '/api/test/1')

    def test_multiple_args(self):
        self.assertEqual(
            self.helpers.path_to('test', 'actionWithDetail', [1, 'some_detail']),
            '/api/test/1/action/some_detail')
        self.assertEqual(
            self.helpers.path_to('test', 'actionWithDetail', (1, 'x', 'extra')),
            '/api/test/1/action/x')

    def test_missing_args(self):
        self.assertEqual(
            self.helpers.path_to('test', 'actionWithDetail', 1),
            '/api/test/1/action/:detail')
        self.assertEqual(self.helpers.path_to('test', 'show'), '/api/test/:id')

    def test_params(self):
        self.assertEqual(
            self.helpers.path_to('test', 'show', 1, {
                'param1': 'value1',
                'param2': 'value2',
            }),
            '/api/test/1?param1=value1&param2=value2')
        self.assertEqual(
            self.helpers.path_to('test', 'show', 1, {}), '/api/test/1')
        self.assertEqual(
            self.helpers.path_to('test', 'index', None, {'q': 'a b&c'}),
            '/api/test/?q=a%20b%26c')

    def test_repeated_params(self):
        self.registry.register('copy', None, [
            Endpoint(POST, '/:id/to/:id', 'copy')])
        self.assertEqual(
            self.helpers.path_to('copy', 'copy', [1, 2]), '/api/copy/1/to/2')
        self.assertEqual(
            self.helpers.path_to('copy', 'copy', [1]), '/api/copy/1/to/:id')

    def test_no_prefix(self):
        registry = Registry()
        registry.register('users')
        helpers = PathHelpers(registry)
        self.assertEqual(helpers.path_to('users', 'edit', 5), '/users/5/edit')

    def test_not_found(self):
        self.assertRaises(
            ResourceNotFound, self.helpers.path_to, 'not-found', 'resource')
        self.assertRaises(
            ActionNotFound, self.helpers.path_to, 'not-found', 'resource')
        self.assertRaises(ActionNotFound, self.helpers.path_to, 'test', 'edit', 1)
        with self.assertRaises(ActionNotFound) as cm:
            self.helpers.path_to('test', 'edit', 1)
        e = cm.exception
        self.assertNotIsInstance(e, ResourceNotFound)
        self.assertEqual((e.resource, e.action), ('test', 'edit'))
        self.assertEqual(e.response.status_code, 404)

    def test_url_to(self):
        self.helpers.url_root = 'http://example.com'
        self.assertEqual(
            self.helpers.url_to('test', 'show', 1),
            'http://example.com/api/test/1')
        helpers = PathHelpers(self.registry, 'https://example.org')
        self.assertEqual(
            helpers.url_to('test', 'index', params={'page': 2}),
            'https://example.org/api/test/?page=2')

    def test_url_to_without_root(self):
        self.assertRaises(UrlRootMissing, self.helpers.url_to, 'test', 'show', 1)
        self.assertRaises(
            RouteReversalError, self.helpers.gen_url_to('test', 'show'), 1)

    def test_gen_path_to(self):
        path_to = self.helpers.gen_path_to('test', 'actionWithDetail')
        self.assertIsInstance(path_to, PathTo)
        self.assertEqual(path_to([1, 'd']), '/api/test/1/action/d')
        self.assertEqual(
            path_to([1, 'd'], {'x': 1}), '/api/test/1/action/d?x=1')

        url_to = self.helpers.gen_url_to('test', 'show')
        self.assertIsInstance(url_to, URLTo)
        self.helpers.url_root = 'http://example.com'
        self.assertEqual(url_to(3), 'http://example.com/api/test/3')

    def test_gen_is_lazy(self):
        path_to = self.helpers.gen_path_to('users', 'index')
        self.registry.register('users')
        self.assertEqual(path_to(), '/api/users/')

    def test_regex_of(self):
        regex = self.helpers.regex_of('test')
        self.assertEqual(regex.pattern, '^/api/test.*')
        self.assertTrue(regex.match('/api/test/1/edit'))
        self.assertFalse(regex.match('/api/other'))
        self.assertRaises(ResourceNotFound, self.helpers.regex_of, 'other')

        registry = Registry()
        registry.register('users')
        self.assertEqual(
            PathHelpers(registry).regex_of('users').pattern, '^users.*')

class TestUtils(TestCase):

    def test_fill_string(self):
        self.assertEqual(
            fill_string('/resource/:id/action', {'id': 1}),
            '/resource/1/action')
        self.assertEqual(
            fill_string('/resource/:id/action/:no_replace', {'id': 1}),
            '/resource/1/action/:no_replace')

    def test_fill_positional(self):
        self.assertEqual(
            fill_positional('/resource/:id/action/:sub', [1, 'x']),
            '/resource/1/action/x')
        self.assertEqual(fill_positional('/resource', [1]), '/resource')
        self.assertEqual(
            fill_positional('/:id/copy/:id/:rest', [1, 2]),
            '/1/copy/2/:rest')
        self.assertEqual(fill_positional('/:id', [1, 2, 3]), '/1')

    def test_string_params(self):
        self.assertEqual(
            string_params('/resource/:id/action/:sub'), ['id', 'sub'])
        self.assertEqual(string_params('/:id/:id'), ['id', 'id'])
        self.assertEqual(string_params('/resource'), [])

    def test_build_query_string(self):
        self.assertEqual(build_query_string({}), '')
        self.assertEqual(
            build_query_string({'b': 1, 'a': 'x y'}), 'b=1&a=x%20y')
        self.assertEqual(
            build_query_string([('k/v', "it's"), ('e', '~!*()')]),
            "k%2Fv=it's&e=~!*()")
        self.assertEqual(
            build_query_string([('on', True), ('off', None)]),
            'on=True&off=None')

    def test_import_string(self):
        from respath.helpers import PathHelpers as cls
        self.assertIs(import_string('respath.helpers:PathHelpers'), cls)
        self.assertIs(import_string('respath.helpers.PathHelpers'), cls)
        self.assertIsNone(import_string('respath.nothing', silent=True))
        self.assertRaises(ImportStringError, import_string, 'respath.nothing')

    def test_capabilities(self):
        self.assertIsNone(capabilities(None))
        caps = capabilities(Controller)
        self.assertEqual(sorted(caps), ['edit', 'index'])
        self.assertEqual(capabilities({'a': 1}), {'a': 1})
        self.assertEqual(placeholder(['a', 'b']), {'a': noop, 'b': noop})
