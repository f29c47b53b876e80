from __future__ import absolute_import

import mock

import crashlog
from crashlog.conf import Configuration
from crashlog.utils import system
from crashlog.utils.testutils import InMemoryTransport, TestCase


def configure_for_tests(**options):
    options.setdefault('api_key', 'abc')
    options.setdefault('scheme', 'mock+http')
    options.setdefault('host', 'localhost')
    return crashlog.configure(**options)


class ConfigurationSingletonTest(TestCase):
    def test_lazily_created(self):
        config = crashlog.configuration()
        assert isinstance(config, Configuration)
        assert crashlog.configuration() is config

    def test_reset(self):
        config = crashlog.configuration()
        crashlog.reset()
        assert crashlog.configuration() is not config

    def test_configure_returns_singleton(self):
        config = configure_for_tests()
        assert config is crashlog.configuration()
        assert config.api_key == 'abc'

    def test_configure_with_mutator(self):
        def setup(config):
            config.stage = 'staging'

        crashlog.configure(setup)
        assert crashlog.configuration().stage == 'staging'


class NotifyTest(TestCase):
    def setUp(self):
        configure_for_tests(ignore=['KeyError'])

    def test_notify(self):
        InMemoryTransport.reply(200, {'id': 'abc123'})
        assert crashlog.notify(RuntimeError('boom'), {'context': {'user_id': 42}}) is True

    def test_notify_failure(self):
        InMemoryTransport.reply(500)
        assert crashlog.notify(RuntimeError('boom')) is False

    def test_notify_or_ignore(self):
        assert crashlog.notify_or_ignore(KeyError('missing')) is False
        assert InMemoryTransport.sent == []
        assert crashlog.notify(KeyError('missing')) is True
        assert len(InMemoryTransport.sent) == 1

    def test_not_live(self):
        crashlog.configure(stage='development', release_stages=['production'])
        assert crashlog.is_live() is False
        assert crashlog.notify(RuntimeError('boom')) is False
        assert InMemoryTransport.sent == []

    def test_is_ignored(self):
        assert crashlog.is_ignored(KeyError())
        assert not crashlog.is_ignored(RuntimeError())

    def test_unconfigured(self):
        crashlog.reset()
        with mock.patch('crashlog.transport.requests.RequestsHTTPTransport.send') as send:
            send.side_effect = Exception('no network in tests')
            assert crashlog.notify(RuntimeError('boom')) is False
        assert not send.called

    def test_unconfigured_logs_exception(self):
        crashlog.configure(api_key=None)
        logger = crashlog.logger()
        with mock.patch.object(logger, 'warning') as warning, \
                mock.patch.object(logger, 'error') as error:
            assert crashlog.notify(RuntimeError('boom')) is False

        assert 'api_key' in warning.call_args[0][0] % warning.call_args[0][1:]
        assert 'RuntimeError: boom' in error.call_args[0][0]
        assert InMemoryTransport.sent == []

    def test_report_for_duty(self):
        InMemoryTransport.reply(200, {'application_name': 'Shop'})
        with mock.patch.object(crashlog.logger(), 'info') as info:
            crashlog.report_for_duty()
        assert "'Shop'" in info.call_args[0][0] % info.call_args[0][1:]


class SystemInformationMemoizationTest(TestCase):
    def test_collected_once(self):
        configure_for_tests()
        with mock.patch('crashlog.utils.system._collect') as collect:
            collect.return_value = {'hostname': 'web-1'}
            for _ in range(5):
                crashlog.notify(RuntimeError('boom'))
            assert collect.call_count == 1

        assert system.collect() == {'hostname': 'web-1'}
