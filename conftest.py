from __future__ import absolute_import

import os.path
import pytest

import crashlog
from crashlog.utils.testutils import InMemoryTransport, install_test_transport


@pytest.fixture
def project_root():
    return os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(autouse=True)
def crashlog_state(monkeypatch):
    for name in ('CRASHLOG_API_KEY', 'CRASHLOG_SECRET', 'CRASHLOG_STAGE', 'CRASHLOG_HOST'):
        monkeypatch.delenv(name, raising=False)

    install_test_transport()
    InMemoryTransport.reset()
    crashlog.reset()
    yield
    crashlog.reset()
    InMemoryTransport.reset()
