from flask import Flask, g, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
import os
import time
from app.extensions import db, migrate, jwt, limiter
from app.exceptions import ApiError
from app.repositories import Store
from datetime import timedelta
import logging

# Load environment variables
load_dotenv()


def create_app(test_config=None):
    app = Flask(__name__)

    # Set testing mode from environment variable
    app.config["TESTING"] = os.getenv("FLASK_ENV") in ["development", "testing"]

    # Configure logging
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "postgresql://localhost/grace_community"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Configure JWT
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY", "your-secret-key")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(
        days=int(os.getenv("JWT_EXPIRE_DAYS", 30))
    )
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"

    # Rate limiting
    app.config["RATELIMIT_DEFAULT"] = "150 per minute;10000 per hour;100000 per day"
    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("LIMITER_DATABASE_URL", "memory://")
    app.config["RATELIMIT_STRATEGY"] = "fixed-window"
    app.config["RATELIMIT_HEADERS_ENABLED"] = True

    if test_config:
        app.config.update(test_config)

    # Initialize Flask extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)

    # The store is owned by the app and reached through the app context
    app.extensions["store"] = Store(db)

    # Register blueprints
    from app.routes.auth_routes import auth_bp
    from app.routes.content_routes import event_bp, sermon_bp, gallery_bp
    from app.routes.contact_routes import contact_bp
    from app.routes.group_routes import group_bp
    from app.routes.coordinator_routes import coordinator_bp
    from app.routes.admin_routes import admin_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(event_bp, url_prefix="/api")
    app.register_blueprint(sermon_bp, url_prefix="/api")
    app.register_blueprint(gallery_bp, url_prefix="/api")
    app.register_blueprint(contact_bp, url_prefix="/api")
    app.register_blueprint(group_bp, url_prefix="/api")
    app.register_blueprint(coordinator_bp, url_prefix="/api/coordinator")
    app.register_blueprint(admin_bp, url_prefix="/api/admin")

    register_error_handlers(app)
    register_request_logging(app)

    # Set up CORS
    cors_origins = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
    ).split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={
            r"/api/*": {"origins": cors_origins},
        },
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        expose_headers=["Content-Type"],
    )

    @app.route("/", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"}), 200

    return app


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            app.logger.error(f"Internal error on {request.method} {request.path}: {error}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        app.logger.exception(f"Unexpected error on {request.method} {request.path}")
        return jsonify({"error": "An unexpected error occurred"}), 500


def register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        if request.path.startswith("/api"):
            started = g.get("request_started")
            duration = (time.perf_counter() - started) * 1000 if started else 0
            app.logger.info(
                f"{request.method} {request.path} {response.status_code} in {duration:.0f}ms"
            )
        return response
