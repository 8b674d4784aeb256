# app.py
# Flask application built with the Application Factory pattern

import logging

from flask import Flask
from config import Config
from extensions import db, migrate

# Models are imported here so Flask-Migrate sees every table
from models import User, Event, Entry, JudgeScore, VoteRecord, ViewRecord  # noqa: F401


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    db.init_app(app)
    migrate.init_app(app, db)

    from routes.main import main_bp
    from routes.admin import admin_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)

    @app.cli.command('seed')
    def seed():
        """Replace all data with the demo event."""
        from seed_data import seed_demo_data
        db.create_all()
        event = seed_demo_data()
        app.logger.info("Seeded event %s (%s)", event.id, event.name)

    return app
