"""
Assembly of the full Gmail search string used when reading messages.

`SearchQueryBuilder` joins the raw free-text search, the compiled filter and
the time-range bounds into the single `q` string handed to the Gmail list call.
Gmail only supports per-day `after:`/`before:` bounds, so the range is
quantized to days in the mailbox time zone; exact filtering on message time is
left to the fetch layer.
"""

from datetime import date, datetime, timedelta
from typing import Any, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from gmailquery.settings import settings

from .exceptions import InvalidConfigError
from .logger import Logger
from .querydsl.compilers import BaseFilterCompiler, gmail_filter

__all__ = (
    "SearchQueryBuilder",
    "build_search_query",
)

Bound = Union[datetime, date]


class SearchQueryBuilder:
    """Build Gmail search strings from a raw search, a filter tree and a time range.

    Attributes:
        compiler: Filter compiler used for the filter tree
        zone: Time zone the day bounds are computed in
        date_format: strftime format of the day bounds
    """

    def __init__(
        self,
        compiler: Optional[BaseFilterCompiler] = None,
        timezone: Optional[str] = None,
        date_format: Optional[str] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            compiler: Filter compiler (default: the shared Gmail compiler)
            timezone: IANA zone name (default from settings)
            date_format: strftime format for bounds (default from settings)

        Raises:
            InvalidConfigError: If the time zone is unknown
        """
        self.compiler = compiler or gmail_filter
        zone_name = timezone or settings.SEARCH_TIMEZONE
        try:
            self.zone = ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidConfigError("Unknown time zone", config_key="SEARCH_TIMEZONE", value=zone_name) from e
        self.date_format = date_format or settings.SEARCH_DATE_FORMAT
        self.logger = Logger(self.__class__.__name__)
        self.logger.message(
            "SearchQueryBuilder initialized: compiler=%s zone=%s date_format=%s",
            self.compiler.__class__.__name__,
            zone_name,
            self.date_format,
        )

    def build(
        self,
        filter_ast: Any = None,
        raw: Optional[str] = None,
        start: Optional[Bound] = None,
        end: Optional[Bound] = None,
    ) -> str:
        """Build the search string.

        Args:
            filter_ast: Filter tree (nodes or dict form); skipped when None
            raw: Raw Gmail search text, passed through unchanged
            start: Earliest message time, emitted as `after:<day>`
            end: Latest message time, emitted as `before:<day after end>`

        Returns:
            Space-separated search string

        Raises:
            CompileError: If the filter cannot be expressed in Gmail search
        """
        parts: List[str] = []
        if raw:
            parts.append(raw.strip())
        if filter_ast is not None:
            self.logger.debug("Filter ast: %s", filter_ast)
            expr = self.compiler.compile(filter_ast)
            self.logger.debug("Filter expression: %s", expr)
            parts.append(expr)
        if start is not None:
            parts.append("after:" + self._format_day(self._local_day(start)))
        if end is not None:
            # before: is exclusive, so step to the next day to keep `end` inside the range
            parts.append("before:" + self._format_day(self._local_day(end) + timedelta(days=1)))

        search = " ".join(p for p in parts if p)
        self.logger.debug("Search string: %s", search)
        return search

    def _local_day(self, bound: Bound) -> date:
        if isinstance(bound, datetime):
            # Naive datetimes are already in the mailbox zone
            if bound.tzinfo is not None:
                bound = bound.astimezone(self.zone)
            return bound.date()
        return bound

    def _format_day(self, day: date) -> str:
        return day.strftime(self.date_format)


def build_search_query(
    filter_ast: Any = None,
    raw: Optional[str] = None,
    start: Optional[Bound] = None,
    end: Optional[Bound] = None,
    **kwargs: Any,
) -> str:
    """Build a Gmail search string with a one-off `SearchQueryBuilder`.

    Keyword arguments (`compiler`, `timezone`, `date_format`) configure the builder.
    """
    return SearchQueryBuilder(**kwargs).build(filter_ast, raw=raw, start=start, end=end)
