"""Unit tests for the error taxonomy and its classification."""

import pytest

from spark_client.utils.exceptions import (
    InvalidKeyError,
    NetworkError,
    NetworkErrorCode,
    NoActiveWalletError,
    ProviderRejectedError,
    ProviderUnavailableError,
    QueryFailedError,
    TokenNotFoundError,
    UnknownAccountError,
    UnsupportedNetworkError,
    is_recoverable,
)


class TestErrorCodes:
    """Test every error carries its code."""

    @pytest.mark.parametrize(
        "error_cls,code",
        [
            (TokenNotFoundError, NetworkErrorCode.NOT_FOUND),
            (NoActiveWalletError, NetworkErrorCode.NO_ACTIVE_WALLET),
            (ProviderRejectedError, NetworkErrorCode.PROVIDER_REJECTED),
            (UnknownAccountError, NetworkErrorCode.UNKNOWN_ACCOUNT),
            (ProviderUnavailableError, NetworkErrorCode.PROVIDER_UNAVAILABLE),
            (InvalidKeyError, NetworkErrorCode.INVALID_KEY),
            (QueryFailedError, NetworkErrorCode.QUERY_FAILED),
            (UnsupportedNetworkError, NetworkErrorCode.UNSUPPORTED_NETWORK),
        ],
    )
    def test_class_code(self, error_cls, code):
        """Subclasses expose a fixed code."""
        error = error_cls("message")
        assert error.code is code
        assert str(error) == "message"
        assert isinstance(error, NetworkError)

    def test_explicit_code_overrides(self):
        """Code passed to the constructor wins."""
        error = NetworkError("x", code=NetworkErrorCode.UNKNOWN_ACCOUNT)
        assert error.code is NetworkErrorCode.UNKNOWN_ACCOUNT

    def test_repr_contains_code(self):
        """repr shows class and code."""
        assert "invalid_key" in repr(InvalidKeyError("bad"))


class TestIsRecoverable:
    """Test recoverable classification."""

    @pytest.mark.parametrize(
        "error",
        [
            UnknownAccountError("no account"),
            ProviderRejectedError("rejected"),
            NetworkError("x", code=NetworkErrorCode.UNKNOWN_ACCOUNT),
        ],
    )
    def test_recoverable(self, error):
        """Provider rejections ask the user to act."""
        assert is_recoverable(error) is True

    @pytest.mark.parametrize(
        "error",
        [
            ProviderUnavailableError("missing"),
            InvalidKeyError("bad"),
            NoActiveWalletError("none"),
            RuntimeError("boom"),
            ValueError("bad"),
        ],
    )
    def test_not_recoverable(self, error):
        """Everything else is an unexpected error."""
        assert is_recoverable(error) is False
