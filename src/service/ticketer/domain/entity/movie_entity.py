import attrs

from src.platform.exception.exceptions import ValidationError


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValidationError(f'Movie {attribute.name} must be greater than 0')


def _validate_release_year(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 1900:
        raise ValidationError('Movie release_year must be after 1900')


@attrs.define(frozen=True)
class Movie:
    """Identified by title; equality ignores every other attribute."""

    title: str
    genre: str = attrs.field(eq=False)
    running_time: int = attrs.field(eq=False, validator=_validate_positive)
    release_year: int = attrs.field(eq=False, validator=_validate_release_year)
