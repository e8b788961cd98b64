from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import click
from pythonjsonlogger import jsonlogger

from depositor.common.exceptions import CollaboratorError
from depositor.config.settings import LOG_DATE_FORMAT


def get_build_version() -> str | None:
    path = Path(__file__).parents[1].joinpath('GIT_SHA')
    if not path.exists():
        return None

    with path.open(encoding='utf-8') as fh:
        return fh.read().strip()


def format_error(e: BaseException) -> str:
    if isinstance(e, CollaboratorError):
        # str(e) of wrapped library errors is often empty
        return f'{e.operation} failed: {e.error.__class__.__name__} {e.error}'.strip()

    return str(e)


def greenify(value: Any) -> str:
    return click.style(value, bold=True, fg='green')


def redify(value: Any) -> str:
    return click.style(value, bold=True, fg='red')


class JsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):  # type: ignore
        super().add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            date = datetime.fromtimestamp(record.created, tz=timezone.utc)
            log_record['timestamp'] = date.strftime(LOG_DATE_FORMAT)
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname
