"""Tests for domain exceptions."""

from matrix_events.domain.exceptions import (
    InvalidArgumentError,
    MatrixEventsError,
    ValidationError,
)


class TestMatrixEventsError:
    """Test cases for the base exception."""

    def test_basic(self):
        """Test basic creation."""
        error = MatrixEventsError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details == {}

    def test_with_details(self):
        """Test details are kept."""
        error = MatrixEventsError("Error occurred", {"room_id": "!room:example.org"})
        assert error.details["room_id"] == "!room:example.org"


class TestInvalidArgumentError:
    """Test cases for InvalidArgumentError."""

    def test_hierarchy(self):
        """Test it is a validation error and not a ValueError."""
        error = InvalidArgumentError("bad")
        assert isinstance(error, ValidationError)
        assert isinstance(error, MatrixEventsError)
        assert not isinstance(error, ValueError)

    def test_argument_details(self):
        """Test the offending argument is recorded."""
        error = InvalidArgumentError("bad callback", argument="callback", value=3)
        assert error.argument == "callback"
        assert error.details == {"argument": "callback", "value_type": "int"}

    def test_without_argument(self):
        """Test details stay empty when no argument is named."""
        error = InvalidArgumentError("bad")
        assert error.argument is None
        assert error.details == {}
