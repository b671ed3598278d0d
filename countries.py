# countries.py
"""Country name lookups against the ``countries`` table.

Three reads are supported: a single localized name, the full localized
listing (for country selectors) and the whole row for one code. Every
caller supplied value is bound as a query parameter; the only identifiers
interpolated into SQL are column names picked from the language allow-list.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from errors import InvalidArgument, NotFound, QueryError
from languages import language_column, validate_language
from models import RECORD_COLUMNS, CountryNamePair, CountryRecord, countries

DEFAULT_LANGUAGE = "en"

# Codes present in the reference data that are not real countries
# (obsolete states, regional groupings, Antarctica, placeholders).
PSEUDO_COUNTRY_CODES: frozenset[str] = frozenset({"yu", "eu", "ap", "nt", "aq", "01"})


def is_pseudo_country(code: str | None) -> bool:
    if not code:
        return False
    return code.strip().lower() in PSEUDO_COUNTRY_CODES


def normalise_country_code(code: str | None) -> str:
    """Lookup form of a country code: stripped and lowercase."""
    if not isinstance(code, str):
        raise InvalidArgument("code", code)
    return code.strip().lower()


def _row_to_record(row, lang: str) -> CountryRecord:
    data = row._mapping
    fields = {key: data[key] for key in RECORD_COLUMNS}
    return CountryRecord(name=data[language_column(lang)], **fields)


class Countries:
    """Read-only access to the country reference table.

    *bind* is an ``Engine`` or an open ``Connection``. Its lifecycle belongs
    to the caller; with an engine each call checks out its own connection.
    """

    def __init__(self, bind: Engine | Connection) -> None:
        self.bind = bind

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        if isinstance(self.bind, Connection):
            yield self.bind
            return
        with self.bind.connect() as conn:
            yield conn

    def _execute(self, stmt):
        try:
            with self._connect() as conn:
                return conn.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise QueryError() from exc

    def lookup_name(self, code: str, lang: str = DEFAULT_LANGUAGE) -> str | None:
        """Name of country *code* in language *lang*."""
        lang = validate_language(lang)
        code = normalise_country_code(code)
        column = countries.c[language_column(lang)]
        rows = self._execute(select(column).where(countries.c.code == code))
        if not rows:
            raise NotFound(code)
        return rows[0][0]

    def list_all_countries(self, lang: str = DEFAULT_LANGUAGE) -> list[CountryNamePair]:
        """All real countries as (code, name) pairs, sorted by name.

        Sorting happens in the store, so the order follows its collation.
        """
        lang = validate_language(lang)
        column = countries.c[language_column(lang)]
        stmt = select(countries.c.code, column).order_by(column.asc())
        return [
            CountryNamePair(code=code, name=name)
            for code, name in self._execute(stmt)
            if code not in PSEUDO_COUNTRY_CODES
        ]

    def get_country_record(self, code: str, lang: str = DEFAULT_LANGUAGE) -> CountryRecord:
        """Whole row for *code* with the name only in language *lang*.

        The ``country_iso`` reference name is kept; other localized
        columns are dropped.
        """
        lang = validate_language(lang)
        code = normalise_country_code(code)
        rows = self._execute(select(countries).where(countries.c.code == code))
        if not rows:
            raise NotFound(code)
        return _row_to_record(rows[0], lang)


__all__ = [
    "Countries",
    "DEFAULT_LANGUAGE",
    "PSEUDO_COUNTRY_CODES",
    "is_pseudo_country",
    "normalise_country_code",
]
