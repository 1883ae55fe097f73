"""
Test cases for the logging set up
"""
import logging
from flask import Flask
from service.common import log_handlers


def _make_app(name):
    app = Flask(name)
    app.config["LOG_LEVEL"] = "WARNING"
    return app


def test_init_logging_to_console():
    """It should log to the console when no server handlers exist"""
    app = _make_app("console_app")
    log_handlers.init_logging(app, "no.such.server")
    assert len(app.logger.handlers) == 1
    assert isinstance(app.logger.handlers[0], logging.StreamHandler)
    assert app.logger.level == logging.WARNING
    assert app.logger.propagate is False


def test_init_logging_shares_server_handlers():
    """It should reuse the handlers of the server logger"""
    server_logger = logging.getLogger("test.gunicorn.error")
    handler = logging.NullHandler()
    server_logger.addHandler(handler)
    try:
        app = _make_app("gunicorn_app")
        log_handlers.init_logging(app, "test.gunicorn.error")
        assert app.logger.handlers == [handler]
        assert handler.formatter._fmt == log_handlers.LOG_FORMAT  # pylint: disable=protected-access
    finally:
        server_logger.removeHandler(handler)
