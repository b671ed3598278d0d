from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import atexit
import logging
import os
import structlog

from config import load_config
from countries import Countries
from db import make_engine

load_dotenv()


# --- Logging (JSON/structured) ---
def _configure_logging():
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
    # Bridge stdlib logging to structlog
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.INFO)


def create_app(overrides=None):
    """Build the Flask app around one engine and one Countries service."""
    _configure_logging()
    app = Flask(__name__)
    load_config(app, overrides)

    engine = make_engine(app.config['DATABASE_URL'], echo=app.config['SQLALCHEMY_ECHO'])
    atexit.register(engine.dispose)
    app.extensions['countries_engine'] = engine
    app.extensions['countries'] = Countries(engine)

    CORS(app, resources={r"/api/*": {"origins": app.config['ALLOWED_ORIGINS']}})

    from routes.core import bp as core_bp
    from routes.countries import bp as countries_bp
    app.register_blueprint(core_bp, url_prefix="")
    app.register_blueprint(countries_bp)

    structlog.get_logger("startup").info(
        "backend_boot",
        pid=os.getpid(),
        default_lang=app.config['COUNTRIES_DEFAULT_LANG'],
    )
    return app


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "8081"))
    create_app().run(host="0.0.0.0", port=port)
