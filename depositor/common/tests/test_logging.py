import json
import logging
from logging import INFO, LogRecord
from unittest import mock

import pytest

from depositor.common.logging import setup_logging
from depositor.common.utils import JsonFormatter
from depositor.config.settings import LOG_JSON, LOG_PLAIN, settings


def _make_record(msg: str) -> LogRecord:
    return LogRecord(
        msg=msg,
        name='depositor.test',
        level=INFO,
        pathname='example.py',
        lineno=1,
        args=(),
        exc_info=None,
    )


def test_json_formatter():
    formatter = JsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    data = json.loads(formatter.format(_make_record('Deposit data verified')))

    assert data['message'] == 'Deposit data verified'
    assert data['level'] == 'INFO'
    assert data['name'] == 'depositor.test'
    assert data['timestamp']


@pytest.mark.usefixtures('fake_settings')
class TestSetupLogging:
    def test_plain(self):
        with mock.patch.object(settings, 'log_format', LOG_PLAIN):
            setup_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        # library logs are muted unless verbose
        assert logging.getLogger('staking_deposit').level == logging.WARNING

    def test_json(self):
        with mock.patch.object(settings, 'log_format', LOG_JSON):
            setup_logging()

        root = logging.getLogger()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
