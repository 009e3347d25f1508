import logging

from flask import Flask

from board.config import Config
from board.db import db
from board.errors import register_error_handlers, register_jwt_handlers
from board.extensions.extensions import cors, jwt, ma


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.from_mapping(test_config)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ALLOWED_ORIGINS"],
        supports_credentials=True,
    )
    register_jwt_handlers(jwt)
    register_error_handlers(app)

    from board.routes.auth_routes import auth_bp
    from board.routes.comment_routes import comment_bp
    from board.routes.post_routes import post_bp
    from board.routes.user_routes import user_bp
    from board.routes.vote_routes import vote_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_bp, url_prefix="/api")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(vote_bp, url_prefix="/api")

    with app.app_context():
        from board import models  # noqa: F401
        db.create_all()

    return app
