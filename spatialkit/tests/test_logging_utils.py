import logging

import pytest

from spatialkit.core.logging_utils import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


def test_get_logger_prefixes_namespace():
    assert get_logger('foo').name == 'spatialkit.foo'
    assert get_logger('spatialkit.bar').name == 'spatialkit.bar'
    assert get_logger('spatialkit').name == 'spatialkit'


def test_child_logger_inherits_level():
    log = get_logger('triangle2d')
    assert log.level == logging.NOTSET
    log = get_logger('triangle2d', level='DEBUG')
    assert log.level == logging.DEBUG
    get_logger('triangle2d')  # back to NOTSET for other tests


def test_package_is_silent_until_configured():
    import spatialkit  # noqa: F401
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers
    # the package itself only registers NullHandlers
    assert not get_logger('anything').handlers


def test_configure_logging(restore_root_logger):
    root = configure_logging('debug')
    assert root is restore_root_logger
    assert root.level == logging.DEBUG
    assert root.propagate is False
    streams = [h for h in root.handlers if not isinstance(h, logging.NullHandler)]
    assert len(streams) == 1
    # idempotent
    configure_logging(logging.WARNING)
    assert root.level == logging.WARNING
    assert len([h for h in root.handlers if not isinstance(h, logging.NullHandler)]) == 1


def test_unknown_level_falls_back_to_info(restore_root_logger):
    assert configure_logging('chatty').level == logging.INFO


def test_construction_failures_are_logged(restore_root_logger, caplog):
    from spatialkit import InvalidShapeError, Triangle2D
    root = restore_root_logger
    root.propagate = True
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        with pytest.raises(InvalidShapeError):
            Triangle2D([(0, 0), (1, 1), (2, 2)])
    assert any(r.name == 'spatialkit.triangle2d' for r in caplog.records)
