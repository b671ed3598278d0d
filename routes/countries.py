# routes/countries.py
"""Country lookup endpoints (names for selectors and per-country details)."""

import structlog
from flask import Blueprint, current_app, jsonify, request

from countries import normalise_country_code
from errors import InvalidArgument, NotFound, QueryError
from languages import validate_language

bp = Blueprint("countries", __name__, url_prefix="/api/countries")
log = structlog.get_logger("countries")


def _service():
    return current_app.extensions["countries"]


def _lang():
    return request.args.get("lang") or current_app.config["COUNTRIES_DEFAULT_LANG"]


@bp.errorhandler(InvalidArgument)
def _invalid_argument(exc):
    return jsonify({'error': 'invalid_argument', 'message': str(exc)}), 400


@bp.errorhandler(NotFound)
def _not_found(exc):
    return jsonify({'error': 'not_found', 'message': str(exc)}), 404


@bp.errorhandler(QueryError)
def _query_failed(exc):
    log.error("countries_query_failed", path=request.path, error=str(exc.__cause__ or exc), exc_info=exc)
    return jsonify({'error': 'query_failed', 'message': 'Error executing SQL query'}), 500


@bp.route("", methods=["GET", "HEAD", "OPTIONS"], strict_slashes=False)
@bp.route("/", methods=["GET", "HEAD", "OPTIONS"], strict_slashes=False)
def list_countries():
    """All countries as ``[{code, name}]`` sorted by the localized name."""
    if request.method in ("HEAD", "OPTIONS"):
        return ("", 204)
    pairs = _service().list_all_countries(_lang())
    return jsonify([p.to_dict() for p in pairs]), 200


@bp.route("/<code>", methods=["GET", "HEAD", "OPTIONS"])
def get_country(code: str):
    if request.method in ("HEAD", "OPTIONS"):
        return ("", 204)
    record = _service().get_country_record(code, _lang())
    return jsonify(record.to_dict()), 200


@bp.route("/<code>/name", methods=["GET", "HEAD", "OPTIONS"])
def get_country_name(code: str):
    if request.method in ("HEAD", "OPTIONS"):
        return ("", 204)
    service = _service()
    # Resolve once so the response echoes the language actually used
    lang = validate_language(_lang())
    name = service.lookup_name(code, lang)
    return jsonify({"code": normalise_country_code(code), "lang": lang, "name": name}), 200
