"""Tests for custom exception hierarchy in linespin.lib.errors."""

from linespin.lib.errors import ConfigError, LineSpinError, SpinnerStateError


class TestLineSpinError:
    """Tests for base LineSpinError exception."""

    def test_linespin_error_creates_with_message(self) -> None:
        """Test that LineSpinError can be created with a message."""
        error = LineSpinError("Test error message")
        assert str(error) == "Test error message"

    def test_linespin_error_is_exception(self) -> None:
        """Test that LineSpinError is an Exception subclass."""
        assert isinstance(LineSpinError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("tick_interval", "Input should be greater than 0")
        assert str(error) == (
            "Configuration error in 'tick_interval': Input should be greater than 0"
        )

    def test_config_error_keeps_attributes(self) -> None:
        """Test that ConfigError exposes field and message."""
        error = ConfigError("frames", "too short")
        assert error.field == "frames"
        assert error.message == "too short"

    def test_config_error_is_linespin_error(self) -> None:
        """Test that ConfigError inherits from LineSpinError."""
        assert isinstance(ConfigError("frames", "bad"), LineSpinError)


class TestSpinnerStateError:
    """Tests for SpinnerStateError exception."""

    def test_spinner_state_error_is_linespin_error(self) -> None:
        """Test that SpinnerStateError inherits from LineSpinError."""
        error = SpinnerStateError("stopped from refresh thread")
        assert isinstance(error, LineSpinError)
        assert "refresh thread" in str(error)
