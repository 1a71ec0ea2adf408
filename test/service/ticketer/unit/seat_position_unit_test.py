import pytest

from src.platform.exception.exceptions import FormatError, ValidationError
from src.service.ticketer.domain.value_object.seat_position import (
    SeatPosition,
    position_to_seat_label,
    seat_label_to_position,
)
from test.service.ticketer.catalog_factory import make_venue


@pytest.mark.unit
class TestSeatLabelToPosition:
    @pytest.mark.parametrize(
        'label,expected',
        [
            ('A1', SeatPosition(row=0, col=0)),
            ('B17', SeatPosition(row=1, col=16)),
            ('R30', SeatPosition(row=17, col=29)),
        ],
    )
    def test_decodes_row_letter_and_column_number(self, label: str, expected: SeatPosition):
        assert seat_label_to_position(label) == expected

    @pytest.mark.parametrize('label', ['', 'A', '17', 'AB1', 'a1', 'A-1', 'A1B', ' A1'])
    def test_rejects_malformed_labels(self, label: str):
        with pytest.raises(FormatError):
            seat_label_to_position(label)

    def test_format_error_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            seat_label_to_position('??')


@pytest.mark.unit
class TestPositionToSeatLabel:
    def test_encodes_position(self):
        assert position_to_seat_label(1, 16) == 'B17'
        assert SeatPosition(row=0, col=0).label == 'A1'

    def test_round_trip_for_every_seat_of_a_venue(self):
        venue = make_venue(rows=18, cols=30)

        for row in range(venue.rows):
            for col in range(venue.cols):
                position = SeatPosition(row=row, col=col)
                assert seat_label_to_position(position_to_seat_label(row, col)) == position
                assert position.is_within(venue)

    def test_bounds_are_checked_against_the_venue(self):
        venue = make_venue(rows=2, cols=3)

        assert SeatPosition.from_label('B3').is_within(venue)
        assert not SeatPosition.from_label('C1').is_within(venue)
        assert not SeatPosition.from_label('A4').is_within(venue)
        assert not SeatPosition.from_label('A0').is_within(venue)
