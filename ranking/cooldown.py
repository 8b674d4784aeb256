# ranking/cooldown.py
# Per-voter, per-entry vote cooldown and voter identity normalization.

import math
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from errors import InvalidVoterError

ONE_HOUR = timedelta(hours=1)
DEFAULT_WINDOW = timedelta(hours=24)

_NON_DIGITS = re.compile(r'\D')


def normalize_phone(raw):
    """Canonical 10-digit voter identity: '+91 90000-00001' -> '9000000001'."""
    if raw is None:
        raw = ''
    elif isinstance(raw, int) and not isinstance(raw, bool):
        # JSON clients may send the number unquoted
        raw = str(raw)
    elif not isinstance(raw, str):
        raise InvalidVoterError('Please enter a valid 10-digit phone number.')
    digits = _NON_DIGITS.sub('', raw)
    if len(digits) == 12 and digits.startswith('91'):
        digits = digits[2:]
    elif len(digits) == 11 and digits.startswith('0'):
        digits = digits[1:]
    if len(digits) != 10:
        raise InvalidVoterError('Please enter a valid 10-digit phone number.')
    return digits


@dataclass(frozen=True)
class VoteCheck:
    can_vote: bool
    hours_remaining: Optional[int] = None
    eligible: bool = True

    @property
    def reason(self):
        if self.can_vote:
            return None
        if not self.eligible:
            return 'This entry is not open for community voting.'
        unit = 'hour' if self.hours_remaining == 1 else 'hours'
        return (f'You already voted for this contestant. '
                f'You can vote again in {self.hours_remaining} {unit}')

    def to_dict(self):
        data = {'can_vote': self.can_vote, 'eligible': self.eligible}
        if not self.can_vote:
            data['hours_remaining'] = self.hours_remaining
            data['reason'] = self.reason
        return data


def check_cooldown(last_vote_at, now, window=DEFAULT_WINDOW):
    if last_vote_at is None:
        return VoteCheck(can_vote=True)
    elapsed = now - last_vote_at
    if elapsed >= window:
        return VoteCheck(can_vote=True)
    return VoteCheck(can_vote=False, hours_remaining=math.ceil((window - elapsed) / ONE_HOUR))
