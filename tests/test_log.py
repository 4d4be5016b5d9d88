import pytest

from docsearch.log import configure_logging, get_logger


@pytest.mark.parametrize("log_format", ["console", "json"])
def test_configure_logging_accepts_supported_formats(log_format):
    configure_logging("debug", log_format)

    get_logger("tests").info("configured", log_format=log_format)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")


def test_configure_logging_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unknown log format"):
        configure_logging("INFO", "xml")
