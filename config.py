# config.py
# Flask application configuration

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.join(BASE_DIR, "instance", "storyseed.db")}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key-change-me'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Podium: top 6, at most 2 per class level before global backfill
    PODIUM_SIZE = int(os.environ.get('PODIUM_SIZE') or 6)
    PODIUM_PER_CLASS_LEVEL = int(os.environ.get('PODIUM_PER_CLASS_LEVEL') or 2)
    # Next best entries after the podium open for community voting
    VOTING_POOL_SIZE = int(os.environ.get('VOTING_POOL_SIZE') or 45)
    VOTE_COOLDOWN_HOURS = int(os.environ.get('VOTE_COOLDOWN_HOURS') or 24)

    # Order matters: round-robin fill of the podium walks levels in this order
    CLASS_LEVELS = ('Tiny Tales', 'Young Dreamers', 'Story Champions')

    VOTE_WEBHOOK_URL = os.environ.get('VOTE_WEBHOOK_URL')
    VOTE_WEBHOOK_TIMEOUT = float(os.environ.get('VOTE_WEBHOOK_TIMEOUT') or 5)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test'
    VOTE_WEBHOOK_URL = None
