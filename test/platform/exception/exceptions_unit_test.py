import pytest

from cinema_ticketing.platform.exception.exceptions import (
    CustomBaseError,
    InvalidArgumentError,
    InvalidPurchaseError,
    PurchaseRejectionReason,
)


pytestmark = pytest.mark.unit


class TestInvalidPurchaseError:
    def test_message_defaults_to_reason(self):
        error = InvalidPurchaseError(PurchaseRejectionReason.TICKET_LIMIT_EXCEEDED)

        assert error.reason is PurchaseRejectionReason.TICKET_LIMIT_EXCEEDED
        assert error.message == 'ticket limit exceeded'
        assert str(error) == 'ticket limit exceeded'

    def test_custom_message_keeps_reason_tag(self):
        error = InvalidPurchaseError(PurchaseRejectionReason.INVALID_ACCOUNT, 'Invalid account ID')

        assert error.reason is PurchaseRejectionReason.INVALID_ACCOUNT
        assert str(error) == 'Invalid account ID'
        assert repr(error) == (
            "InvalidPurchaseError(reason=INVALID_ACCOUNT, message='Invalid account ID')"
        )

    def test_is_a_project_error(self):
        error = InvalidPurchaseError(PurchaseRejectionReason.ADULT_REQUIRED)

        assert isinstance(error, CustomBaseError)

    @pytest.mark.parametrize(
        'reason, text',
        [
            (PurchaseRejectionReason.INVALID_ACCOUNT, 'invalid account'),
            (PurchaseRejectionReason.TICKET_LIMIT_EXCEEDED, 'ticket limit exceeded'),
            (PurchaseRejectionReason.ADULT_REQUIRED, 'adult required'),
            (PurchaseRejectionReason.UNKNOWN_CATEGORY, 'unknown category'),
        ],
    )
    def test_reason_text(self, reason, text):
        assert reason == text


class TestInvalidArgumentError:
    def test_is_both_project_error_and_value_error(self):
        error = InvalidArgumentError('count must be a positive integer')

        assert isinstance(error, CustomBaseError)
        assert isinstance(error, ValueError)
        assert error.message == 'count must be a positive integer'
