# -*- coding: utf-8 -*-
from __future__ import absolute_import

from crashlog.processors import Processor, SanitizePasswordsProcessor
from crashlog.utils.testutils import TestCase


VARS = {
    'foo': 'bar',
    'vars_dict': {
        42: 'bar',
        ('foo', 'bar'): 'hello',
        'password': 'hello',
    },
    'password': 'hello',
    'the_secret': 'hello',
    'a_password_here': 'hello',
    'api_key': 'secret_key',
    'apiKey': 'secret_key',
    'access_token': 'oauth2 access token',
}


class SanitizePasswordsProcessorTest(TestCase):
    def test_sanitizes_keys(self):
        result = SanitizePasswordsProcessor().process(VARS)

        assert result['foo'] == 'bar'
        assert result['password'] == SanitizePasswordsProcessor.MASK
        assert result['the_secret'] == SanitizePasswordsProcessor.MASK
        assert result['a_password_here'] == SanitizePasswordsProcessor.MASK
        assert result['api_key'] == SanitizePasswordsProcessor.MASK
        assert result['apiKey'] == SanitizePasswordsProcessor.MASK
        assert result['access_token'] == SanitizePasswordsProcessor.MASK

    def test_nested(self):
        result = SanitizePasswordsProcessor().process(VARS)
        assert result['vars_dict'] == {
            42: 'bar',
            ('foo', 'bar'): 'hello',
            'password': SanitizePasswordsProcessor.MASK,
        }

    def test_does_not_modify_input(self):
        SanitizePasswordsProcessor().process(VARS)
        assert VARS['password'] == 'hello'

    def test_credit_card(self):
        result = SanitizePasswordsProcessor().process({'foo': '4242424242424242'})
        assert result['foo'] == SanitizePasswordsProcessor.MASK

    def test_custom_fields(self):
        result = SanitizePasswordsProcessor(['Token']).process({'token': 'x', 'password': 'y'})
        assert result == {'token': SanitizePasswordsProcessor.MASK, 'password': 'y'}

    def test_none_values(self):
        assert SanitizePasswordsProcessor().process({'password': None}) == {'password': None}

    def test_bytes_keys(self):
        result = SanitizePasswordsProcessor().process({b'password': 'hello'})
        assert result == {b'password': SanitizePasswordsProcessor.MASK}


class ProcessorTest(TestCase):
    def test_passthrough(self):
        assert Processor().process({'password': 'hello'}) == {'password': 'hello'}
