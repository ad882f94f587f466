"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from shared_kernel.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        result = expand_env_vars("$NONEXISTENT_SHARED_KERNEL_VAR")
        assert result == "$NONEXISTENT_SHARED_KERNEL_VAR"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion of environment variables in nested containers."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/kernel.log"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            result = expand_env_vars(config)
            assert result == {
                "logging": {"file_path": "/test/path/kernel.log"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        result = expand_env_vars(config)
        assert result == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"KERNEL_LOG_LEVEL": "DEBUG"}):
            config = {"logging": {"level": "$KERNEL_LOG_LEVEL"}}
            assert expand_config_env_vars(config) == {"logging": {"level": "DEBUG"}}
