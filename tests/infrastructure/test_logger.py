import logging
from logging.handlers import RotatingFileHandler

from shared_kernel.config.schemas import LoggingConfig
from shared_kernel.infrastructure.logging import get_logger, setup_logging
from shared_kernel.infrastructure.logging.logger import CallerInfoFormatter


def test_setup_logging_stdout(restore_root_logger):
    setup_logging(LoggingConfig(level="debug", destination="stdout"))

    handlers = restore_root_logger.handlers
    assert restore_root_logger.level == logging.DEBUG
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert not isinstance(handlers[0], RotatingFileHandler)


def test_setup_logging_writes_to_file(restore_root_logger, tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "kernel.log"
    config = LoggingConfig(level="INFO", destination="file", file_path=str(log_file))

    # Act
    setup_logging(config)
    get_logger("tests.logger").info("Order saved", order_id=7)
    for handler in restore_root_logger.handlers:
        handler.flush()

    # Assert
    assert isinstance(restore_root_logger.handlers[0], RotatingFileHandler)
    content = log_file.read_text()
    assert "Order saved" in content
    assert "order_id=7" in content


def test_setup_logging_both_destinations(restore_root_logger, tmp_path):
    config = LoggingConfig(destination="both", file_path=str(tmp_path / "kernel.log"))

    setup_logging(config)

    assert len(restore_root_logger.handlers) == 2


def test_logs_below_level_are_filtered(restore_root_logger, tmp_path):
    log_file = tmp_path / "kernel.log"
    setup_logging(LoggingConfig(level="WARNING", destination="file", file_path=str(log_file)))

    logger = get_logger("tests.logger")
    logger.debug("quiet")
    logger.warning("loud")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "loud" in content
    assert "quiet" not in content


def test_caller_info_formatter():
    formatter = CallerInfoFormatter("%(caller_info)s %(message)s")
    record = logging.LogRecord(
        "orders", logging.INFO, "/srv/app/orders.py", 12, "saved", None, None, func="save"
    )

    assert formatter.format(record) == "orders.save:12 saved"
