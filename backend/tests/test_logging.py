import logging

from nbgo_api.core.logging_config import LIBRARY_LOG_LEVELS, FieldsFilter, format_fields, log_info, setup_logging


def test_format_fields():
    assert format_fields({"addr": "0.0.0.0:8080", "error": "boom"}) == "addr=0.0.0.0:8080 error=boom"


def test_log_info_appends_fields(caplog):
    logger = logging.getLogger("nbgo.tests.logging")
    caplog.set_level(logging.INFO, logger=logger.name)

    log_info(logger, "Starting HTTP API server", addr=":8080")

    record = caplog.records[-1]
    assert record.getMessage() == "Starting HTTP API server addr=:8080"
    assert record.fields == {"addr": ":8080"}


def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "app.log"
    try:
        setup_logging("DEBUG", log_file=str(log_file), enable_file_logging=True)
        logging.getLogger("nbgo.tests.file").debug("written to file")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert all(any(isinstance(f, FieldsFilter) for f in h.filters) for h in root.handlers)
        assert logging.getLogger("uvicorn.access").level == LIBRARY_LOG_LEVELS["uvicorn.access"]
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_fields_filter_defaults_to_empty_mapping():
    record = logging.LogRecord("nbgo", logging.INFO, __file__, 1, "plain message", None, None)

    assert FieldsFilter().filter(record)
    assert record.fields == {}


def test_fields_filter_keeps_helper_fields():
    record = logging.LogRecord("nbgo", logging.INFO, __file__, 1, "with fields", None, None)
    record.fields = {"addr": ":8080"}

    FieldsFilter().filter(record)

    assert record.fields == {"addr": ":8080"}
