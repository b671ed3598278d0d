# routes/core.py
import structlog
from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

bp = Blueprint("core", __name__)
log = structlog.get_logger("health")

@bp.get("/")
def root():
    return jsonify({"ok": True, "service": "countries-backend"}), 200

@bp.get("/health")
def health():
    engine = current_app.extensions["countries_engine"]
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        log.warning("health_db_unreachable", error=str(exc))
        return jsonify({"status": "unhealthy"}), 503
    return jsonify({"status": "healthy"}), 200
