"""
Test suite for logging setup
Following TDD approach with AAA pattern and descriptive naming
"""

import logging
from unittest.mock import patch

from onesky_adapter.logging_config import configure_logging, LOG_FORMAT


class TestConfigureLogging:
    """Test suite for applying the [logging] config section"""

    @patch('logging.basicConfig')
    def test_configure_logging_with_defaults_uses_stream_handler_at_info(self, mock_basic_config):
        """
        Test that no settings gives console logging at INFO
        """
        # Act
        configure_logging()

        # Assert
        kwargs = mock_basic_config.call_args[1]
        assert kwargs['level'] == logging.INFO
        assert kwargs['format'] == LOG_FORMAT
        assert len(kwargs['handlers']) == 1
        assert isinstance(kwargs['handlers'][0], logging.StreamHandler)

    @patch('logging.basicConfig')
    def test_configure_logging_with_log_file_adds_file_handler(self, mock_basic_config, tmp_path):
        """
        Test that log_file_name adds a FileHandler in the given directory
        """
        # Act
        configure_logging({'log_file_name': 'logs/onesky_api.log', 'level': 'debug'}, log_dir=tmp_path)

        # Assert
        kwargs = mock_basic_config.call_args[1]
        handlers = kwargs['handlers']
        try:
            assert kwargs['level'] == logging.DEBUG
            file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].baseFilename == str(tmp_path / 'logs' / 'onesky_api.log')
        finally:
            for handler in handlers:
                handler.close()
