# errors.py
# Domain errors. status_code is what the blueprints answer with.


class RankingError(Exception):
    status_code = 400

    def __init__(self, message=None):
        super().__init__(message or self.__doc__)
        self.message = message or self.__doc__


class NotFoundError(RankingError):
    """Not found."""
    status_code = 404


class EventNotFoundError(NotFoundError):
    """Event not found."""


class EntryNotFoundError(NotFoundError):
    """Entry not found."""


class InvalidVoterError(RankingError, ValueError):
    """Invalid voter details."""


class InvalidScoreError(RankingError, ValueError):
    """Score must be between 0 and 10."""


class UnknownMetricError(RankingError, ValueError):
    """Unknown leaderboard metric."""


class NotAJudgeError(RankingError):
    """Only judges can score entries."""
    status_code = 403


class NotEligibleError(RankingError):
    """This entry is not open for community voting."""
    status_code = 409


class UserNotFoundError(NotFoundError):
    """User not found."""


class InvalidRoleError(RankingError, ValueError):
    """Unknown role."""
