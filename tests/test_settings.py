import logging

from restassert.core import get_settings, init_restassert
from restassert.model import RequestLogLevel, ResponseLogLevel
from restassert.settings import Settings


def test_defaults():
    settings = Settings()
    assert settings.request_log_level == RequestLogLevel.NONE
    assert settings.response_log_level == ResponseLogLevel.NONE
    assert settings.verify_ssl is True


def test_environment(monkeypatch):
    monkeypatch.setenv("RESTASSERT_REQUEST_LOG_LEVEL", "body")
    monkeypatch.setenv("RESTASSERT_RESPONSE_LOG_LEVEL", "all")
    monkeypatch.setenv("RESTASSERT_DISABLE_SSL_CERTIFICATE_VALIDATION", "true")
    settings = Settings()
    assert settings.request_log_level == RequestLogLevel.BODY
    assert settings.response_log_level == ResponseLogLevel.ALL
    assert settings.verify_ssl is False


def test_relaxed_https_validation():
    assert Settings(use_relaxed_https_validation=True).verify_ssl is False


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_init(mocker):
    configure = mocker.patch("restassert.core.configure_logging")
    init_restassert()
    configure.assert_called_once_with(level=logging.INFO)
