"""
Unit tests for PageRequest.

Covers the validated constructor, the unvalidated hydration path used by the decoder,
offset arithmetic, and navigation to sibling requests.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from pagantic import Direction, InvalidPageRequestError, Pageable, PageRequest, Sort
from pagantic.request import PageMetadata


@pytest.mark.unit
class TestValidatedConstruction:
    """The constructor path rejects out-of-range values."""

    def test_of_sets_fields(self) -> None:
        sort = Sort.by("name")
        request = PageRequest.of(3, 25, sort)

        assert request.number == 3
        assert request.size == 25
        assert request.sort == sort
        assert request.total_elements == 0

    def test_negative_number_rejected(self) -> None:
        with pytest.raises(InvalidPageRequestError, match="Page number must not be less than zero!"):
            PageRequest.of(-1, 10)

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(InvalidPageRequestError, match="Page size must not be less than one!") as exc:
            PageRequest.of(0, 0)

        assert exc.value.field == "size"
        assert exc.value.value == 0

    def test_keyword_constructor_validates_too(self) -> None:
        with pytest.raises(InvalidPageRequestError):
            PageRequest(number=-5, size=10)

    def test_wire_alias_accepted(self) -> None:
        request = PageRequest.model_validate({"number": 1, "size": 10, "totalElements": 42})
        assert request.total_elements == 42

    def test_frozen(self) -> None:
        request = PageRequest.of(0, 10)
        with pytest.raises(PydanticValidationError):
            request.number = 4  # type: ignore[misc]

    def test_is_a_pageable(self) -> None:
        assert isinstance(PageRequest.of(0, 10), Pageable)
        assert issubclass(PageRequest, Pageable)


@pytest.mark.unit
class TestHydration:
    """The decoder path accepts whatever the server sent. This divergence is intentional."""

    def test_hydrate_accepts_zero_size(self) -> None:
        request = PageRequest.hydrate(number=0, size=0, total_elements=3)
        assert request.size == 0
        assert request.total_elements == 3

    def test_hydrate_accepts_negative_number(self) -> None:
        request = PageRequest.hydrate(number=-1, size=10)
        assert request.number == -1
        assert request.offset == -10

    def test_hydrated_instance_is_still_frozen(self) -> None:
        request = PageRequest.hydrate(number=1, size=10)
        with pytest.raises(PydanticValidationError):
            request.size = 20  # type: ignore[misc]

    def test_hydrated_equals_validated(self) -> None:
        assert PageRequest.hydrate(number=1, size=10) == PageRequest.of(1, 10)

    def test_lenient_context_skips_validation(self) -> None:
        request = PageRequest.model_validate(
            {"number": -1, "size": 0}, context={"strict_page_requests": False}
        )
        assert request.number == -1
        assert request.size == 0

    def test_strict_context_validates(self) -> None:
        with pytest.raises(InvalidPageRequestError):
            PageRequest.model_validate(
                {"number": -1, "size": 10}, context={"strict_page_requests": True}
            )

    def test_from_metadata_lenient(self) -> None:
        metadata = PageMetadata(number=-2, size=0, total_elements=1)
        request = PageRequest.from_metadata(metadata)
        assert (request.number, request.size, request.total_elements) == (-2, 0, 1)

    def test_hydrated_instance_is_not_revalidated(self) -> None:
        request = PageRequest.hydrate(number=-1, size=0)

        assert PageRequest.model_validate(request) is request

    def test_metadata_reports_invalid_fields(self) -> None:
        assert PageMetadata(number=-2, size=0).invalid_fields() == {"number": -2, "size": 0}
        assert PageMetadata(number=0, size=10).invalid_fields() == {}

    def test_from_metadata_strict(self) -> None:
        metadata = PageMetadata(number=0, size=0)
        with pytest.raises(InvalidPageRequestError):
            PageRequest.from_metadata(metadata, strict=True)


@pytest.mark.unit
class TestOffset:
    @pytest.mark.parametrize(("number", "size"), [(0, 1), (0, 20), (3, 7), (10, 100)])
    def test_offset_is_number_times_size(self, number: int, size: int) -> None:
        assert PageRequest.of(number, size).offset == number * size

    def test_offset_does_not_overflow(self) -> None:
        request = PageRequest.of(2**40, 2**30)
        assert request.offset == 2**70


@pytest.mark.unit
class TestNavigation:
    def test_next_increments_number(self) -> None:
        sort = Sort.by("created_at", direction=Direction.DESC)
        request = PageRequest(number=1, size=10, total_elements=55, sort=sort)

        nxt = request.next()

        assert nxt is not request
        assert nxt.number == 2
        assert nxt.size == 10
        assert nxt.sort == sort
        # The total of the next page is unknown
        assert nxt.total_elements == 0
        assert request.number == 1

    def test_previous_decrements_number(self) -> None:
        request = PageRequest.of(4, 10)
        previous = request.previous()

        assert previous is not request
        assert previous.number == 3

    def test_previous_at_zero_returns_same_instance(self) -> None:
        request = PageRequest.of(0, 10)

        assert request.previous() is request
        assert request.previous() == request.first()

    def test_previous_or_first(self) -> None:
        assert PageRequest.of(5, 10).previous_or_first().number == 4
        first = PageRequest.of(0, 10).previous_or_first()
        assert first.number == 0
        assert first.size == 10

    def test_first(self) -> None:
        sort = Sort.by("id")
        first = PageRequest.of(7, 15, sort).first()
        assert first == PageRequest.of(0, 15, sort)

    def test_has_previous(self) -> None:
        assert PageRequest.of(0, 10).has_previous is False
        assert PageRequest.of(1, 10).has_previous is True

    @pytest.mark.parametrize("number", [0, 1, 2, 50])
    def test_next_then_previous_round_trips(self, number: int) -> None:
        request = PageRequest.of(number, 10, Sort.by("id"))
        assert request.next().previous() == request

    def test_navigation_from_invalid_hydrated_values_validates(self) -> None:
        request = PageRequest.hydrate(number=-3, size=10)
        with pytest.raises(InvalidPageRequestError):
            request.next()
