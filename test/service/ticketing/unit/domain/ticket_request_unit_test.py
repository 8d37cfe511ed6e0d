"""
Unit tests for TicketRequest

Test Coverage:
1. Valid construction from enum members and category names
2. Category rejection
3. Count rejection (zero, negative, non-integral, non-numeric, bool)
4. Immutability
"""

import attrs
import pytest

from cinema_ticketing.platform.exception.exceptions import InvalidArgumentError
from cinema_ticketing.service.ticketing.domain.enum import TicketCategory
from cinema_ticketing.service.ticketing.domain.value_object import TicketRequest


pytestmark = pytest.mark.unit


class TestTicketRequestConstruction:
    def test_exposes_category_and_count(self):
        request = TicketRequest(TicketCategory.CHILD, 3)

        assert request.category is TicketCategory.CHILD
        assert request.count == 3

    def test_category_name_is_converted_to_enum(self):
        request = TicketRequest('ADULT', 1)

        assert request.category is TicketCategory.ADULT

    def test_equal_values_are_equal(self):
        assert TicketRequest(TicketCategory.INFANT, 2) == TicketRequest('INFANT', 2)

    @pytest.mark.parametrize('category', ['INVALID_TYPE', 'adult', '', None, 1])
    def test_unknown_category_is_rejected(self, category):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TicketRequest(category, 1)

        assert 'category must be one of ADULT, CHILD, INFANT' in str(exc_info.value)

    @pytest.mark.parametrize('count', [0, -1, 2.5, 1.0, '3', None, True])
    def test_non_positive_integer_count_is_rejected(self, count):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TicketRequest(TicketCategory.ADULT, count)

        assert 'count must be a positive integer' in str(exc_info.value)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            TicketRequest(TicketCategory.ADULT, 0)


class TestTicketRequestImmutability:
    def test_attributes_cannot_be_reassigned(self):
        request = TicketRequest(TicketCategory.ADULT, 1)

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            request.count = 5  # type: ignore[misc]

        assert request.count == 1
