"""Unit tests for REST API request models."""

import pytest
from pydantic import ValidationError

from models.requests import CredentialRequest


class TestCredentialRequest:
    """Test cases for the CredentialRequest model."""

    def test_constructor(self) -> None:
        """Test the CredentialRequest constructor."""
        cr = CredentialRequest(account_id="acme", quota=1000)
        assert cr.account_id == "acme"
        assert cr.quota == 1000

    def test_default_quota(self) -> None:
        """Test that quota is unlimited by default."""
        cr = CredentialRequest(account_id="acme")
        assert cr.quota == 0

    def test_camel_case_account_id(self) -> None:
        """Test that camel-case key is accepted too."""
        cr = CredentialRequest.model_validate({"accountID": "acme", "quota": 5})
        assert cr.account_id == "acme"
        assert cr.quota == 5

    def test_missing_account_id(self) -> None:
        """Test that account ID is required."""
        with pytest.raises(ValidationError, match="Field required"):
            CredentialRequest.model_validate({"quota": 5})

    @pytest.mark.parametrize("account_id", ["", "x" * 256])
    def test_improper_account_id(self, account_id: str) -> None:
        """Test the account ID length validation."""
        with pytest.raises(ValidationError):
            CredentialRequest(account_id=account_id, quota=5)

    def test_negative_quota(self) -> None:
        """Test that negative quota is refused."""
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            CredentialRequest(account_id="acme", quota=-1)

    @pytest.mark.parametrize("quota", [2**31, 10**20])
    def test_too_large_quota(self, quota: int) -> None:
        """Test that quota not fitting into database column is refused."""
        with pytest.raises(ValidationError, match="less than or equal to 2147483647"):
            CredentialRequest(account_id="acme", quota=quota)

    def test_largest_quota(self) -> None:
        """Test that the largest quota is accepted."""
        cr = CredentialRequest(account_id="acme", quota=2**31 - 1)
        assert cr.quota == 2147483647

    def test_unknown_field(self) -> None:
        """Test that unknown fields are refused."""
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            CredentialRequest.model_validate(
                {"account_id": "acme", "quota": 5, "quota_usage": 0}
            )
