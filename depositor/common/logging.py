import logging

from depositor.common.utils import JsonFormatter
from depositor.config.settings import LOG_DATE_FORMAT, LOG_JSON, settings


def setup_logging() -> None:
    formatter: JsonFormatter | logging.Formatter
    if settings.log_format == LOG_JSON:
        formatter = JsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    else:
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)-8s %(message)s', datefmt=LOG_DATE_FORMAT
        )
    logHandler = logging.StreamHandler()
    logHandler.setFormatter(formatter)
    logging.basicConfig(
        level=settings.log_level,
        handlers=[logHandler],
        force=True,
    )
    if not settings.verbose:
        logging.getLogger('staking_deposit').setLevel(logging.WARNING)
