import pytest
from sqlalchemy import insert

from countries import Countries
from db import make_engine
from languages import LANGUAGE_COLUMNS
from models import RECORD_COLUMNS, countries, metadata


def _row(code, iso, en, de, fr, cs, zh_cn, zh_hk, **extra):
    row = {name: None for name in LANGUAGE_COLUMNS + RECORD_COLUMNS}
    row.update({
        "code": code,
        "country_iso": iso,
        "country_en": en,
        "country_de": de,
        "country_fr": fr,
        "country_cs": cs,
        "country_zh_cn": zh_cn,
        "country_zh_hk": zh_hk,
    })
    row.update(extra)
    return row


SEED_ROWS = [
    _row("fr", "FRANCE", "France", "Frankreich", "France", "Francie", "法国", "法國",
         alpha3="FRA", continent="EU", capital="Paris", currency="EUR", dialing_code="+33", tld=".fr"),
    _row("de", "GERMANY", "Germany", "Deutschland", "Allemagne", "Německo", "德国", "德國",
         alpha3="DEU", continent="EU", capital="Berlin", currency="EUR", dialing_code="+49", tld=".de"),
    _row("cz", "CZECHIA", "Czech Republic", "Tschechien", "Tchéquie", "Česko", "捷克", "捷克",
         alpha3="CZE", continent="EU", capital="Prague", currency="CZK", dialing_code="+420", tld=".cz"),
    _row("us", "UNITED STATES", "United States", "Vereinigte Staaten", "États-Unis", "Spojené státy", "美国", "美國",
         alpha3="USA", continent="NA", capital="Washington", currency="USD", dialing_code="+1", tld=".us"),
    _row("jp", "JAPAN", "Japan", "Japan", "Japon", "Japonsko", "日本", "日本",
         alpha3="JPN", continent="AS", capital="Tokyo", currency="JPY", dialing_code="+81", tld=".jp"),
    # Pseudo-country codes that must never show up in listings
    _row("eu", "EUROPE", "Europe", "Europa", "Europe", "Evropa", "欧洲", "歐洲"),
    _row("yu", "YUGOSLAVIA", "Yugoslavia", "Jugoslawien", "Yougoslavie", "Jugoslávie", "南斯拉夫", "南斯拉夫"),
    _row("ap", "ASIA/PACIFIC REGION", "Asia/Pacific Region", "Asien/Pazifik", "Asie/Pacifique", "Asie/Pacifik", "亚太地区", "亞太地區"),
    _row("nt", "NEUTRAL ZONE", "Neutral Zone", "Neutrale Zone", "Zone neutre", "Neutrální zóna", "中立区", "中立區"),
    _row("aq", "ANTARCTICA", "Antarctica", "Antarktis", "Antarctique", "Antarktida", "南极洲", "南極洲"),
    _row("01", "UNKNOWN", "Anonymous Proxy", "Anonymer Proxy", "Proxy anonyme", "Anonymní proxy", "匿名代理", "匿名代理"),
]


@pytest.fixture()
def engine():
    eng = make_engine("sqlite://")
    metadata.create_all(eng)
    with eng.begin() as conn:
        conn.execute(insert(countries), SEED_ROWS)
    yield eng
    eng.dispose()


@pytest.fixture()
def service(engine):
    return Countries(engine)


@pytest.fixture()
def app(engine, monkeypatch):
    import app as app_module

    # Share the seeded in-memory store with the app
    monkeypatch.setattr(app_module, "make_engine", lambda url, echo=False: engine)
    return app_module.create_app({"DATABASE_URL": "sqlite://", "TESTING": True})


@pytest.fixture()
def client(app):
    return app.test_client()
