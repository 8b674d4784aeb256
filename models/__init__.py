# models/__init__.py

from .user import User
from .event import Event
from .entry import Entry
from .judge_score import JudgeScore
from .vote_record import VoteRecord
from .view_record import ViewRecord
