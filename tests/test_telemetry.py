import logging
import pytest

from tablesize import LoggingTelemetry, PathSizeCalculator, TableIdentifier
from tablesize.testing import InMemoryFileSystem


def test_logged_messages(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger='tablesize.telemetry')
    calculator = PathSizeCalculator(telemetry=LoggingTelemetry())
    fs = InMemoryFileSystem({'/t/f': 1}, denied={'/t'})
    identifier = TableIdentifier(database='db', name='events')
    assert calculator.compute_size(fs, '/t', identifier) == 0

    messages = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert messages[0] == (
        logging.INFO,
        'Starting to calculate the total file size under path /t.',
    )
    level, warning = messages[1]
    assert level == logging.WARNING
    assert warning.startswith(
        'Failed to get the size of table events in the database db because of'
    )
    level, completed = messages[2]
    assert level == logging.INFO
    assert completed.startswith('It took ')
    assert completed.endswith(
        ' ms to calculate the total file size under path /t.'
    )


def test_custom_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger('my.stats')
    caplog.set_level(logging.INFO, logger='my.stats')
    LoggingTelemetry(logger).size_calculation_started('/x')
    assert [r.name for r in caplog.records] == ['my.stats']


def test_failure_without_table(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger='tablesize.telemetry')
    calculator = PathSizeCalculator(telemetry=LoggingTelemetry())
    fs = InMemoryFileSystem({'/t/f': 1})
    assert calculator.compute_size(fs, '/missing') == 0

    warnings = [
        r.getMessage() for r in caplog.records if r.levelno == logging.WARNING
    ]
    assert len(warnings) == 1
    assert warnings[0].startswith(
        'Failed to get the size of path /missing because of PathNotFound('
    )
