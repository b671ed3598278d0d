# models.py
from __future__ import annotations

from dataclasses import dataclass, asdict

from sqlalchemy import Column, MetaData, String, Table

from languages import LANGUAGE_COLUMNS, REFERENCE_NAME_COLUMN

metadata = MetaData()

# --- Countries ---
# One row per country/territory, keyed by the lowercase ISO-2 code.
countries = Table(
    "countries",
    metadata,
    Column("code",                String(2),   primary_key=True),
    Column(REFERENCE_NAME_COLUMN, String(128)),
    *(Column(name, String(128)) for name in LANGUAGE_COLUMNS),
    Column("alpha3",              String(3)),
    Column("continent",           String(32)),
    Column("capital",             String(128)),
    Column("currency",            String(8)),
    Column("dialing_code",        String(16)),
    Column("tld",                 String(8)),
)

# Non-localized columns copied verbatim into a CountryRecord.
RECORD_COLUMNS: tuple[str, ...] = (
    "code",
    REFERENCE_NAME_COLUMN,
    "alpha3",
    "continent",
    "capital",
    "currency",
    "dialing_code",
    "tld",
)


@dataclass(frozen=True)
class CountryNamePair:
    code: str
    name: str | None

    def to_dict(self):
        return {"code": self.code, "name": self.name}


@dataclass(frozen=True)
class CountryRecord:
    """Full row for one country with the name in a single language."""

    code: str
    name: str | None
    country_iso: str | None = None
    alpha3: str | None = None
    continent: str | None = None
    capital: str | None = None
    currency: str | None = None
    dialing_code: str | None = None
    tld: str | None = None

    def to_dict(self):
        return asdict(self)
