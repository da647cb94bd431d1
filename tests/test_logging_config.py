"""
Tests for structured logging configuration
"""

import json
import logging

from account_ledger.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_operation
)


class TestJSONFormatter:
    """Test JSON log record formatting"""
    
    def make_record(self, message="hello", **extra):
        record = logging.LogRecord("account_ledger", logging.INFO, __file__, 1,
                                   message, (), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record
    
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(self.make_record()))
        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert "timestamp" in entry
        assert "operation" not in entry
    
    def test_structured_fields(self):
        record = self.make_record(operation="DEBIT", balance="50.00",
                                  outcome="rejected", error="InsufficientFunds")
        entry = json.loads(JSONFormatter().format(record))
        assert entry["operation"] == "DEBIT"
        assert entry["balance"] == "50.00"
        assert entry["outcome"] == "rejected"
        assert entry["error"] == "InsufficientFunds"


class TestSetupLogging:
    """Test logger setup"""
    
    def test_single_handler_after_repeated_setup(self):
        logger = setup_logging("INFO", logger_name="test_ledger_setup")
        logger = setup_logging("INFO", logger_name="test_ledger_setup")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
        assert not logger.propagate
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
    
    def test_text_format(self):
        logger = setup_logging("DEBUG", log_format="text", logger_name="test_ledger_text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
    
    def test_log_file(self, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging("INFO", log_file=str(log_file), logger_name="test_ledger_file")
        
        log_operation(logger, "info", "CREDIT applied", operation="CREDIT",
                      balance="1050.00", outcome="accepted")
        for handler in logger.handlers:
            handler.flush()
        
        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "CREDIT applied"
        assert entry["operation"] == "CREDIT"
        assert entry["outcome"] == "accepted"
        
        setup_logging("INFO", logger_name="test_ledger_file")
    
    def test_get_logger_default_name(self):
        assert get_logger().name == "account_ledger"
