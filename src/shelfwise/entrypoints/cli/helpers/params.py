"""Click parameter types for the SHELFWISE CLI."""

from datetime import date

import click

from shelfwise.domain.dates import parse_date
from shelfwise.domain.errors import InvalidDateError


class DateParamType(click.ParamType):
    """A calendar date written YYYY-MM-DD (also YYYY/MM/DD or YYYY.MM.DD)."""

    name = "date"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> date:
        if isinstance(value, date):
            return value
        try:
            return parse_date(str(value))
        except InvalidDateError:
            self.fail(
                f"{value!r} is not a valid date (expected YYYY-MM-DD).", param, ctx
            )


DATE = DateParamType()
