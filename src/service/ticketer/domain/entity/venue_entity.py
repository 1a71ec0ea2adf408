import attrs

from src.platform.exception.exceptions import ValidationError


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValidationError(f'Venue {attribute.name} must be greater than 0')


@attrs.define(frozen=True)
class Venue:
    venue_number: int = attrs.field(validator=_validate_positive)
    rows: int = attrs.field(eq=False, validator=_validate_positive)
    cols: int = attrs.field(eq=False, validator=_validate_positive)

    @property
    def total_seats(self) -> int:
        return self.rows * self.cols
