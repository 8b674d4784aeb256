from datetime import datetime, timedelta

import pytest

from errors import InvalidVoterError
from ranking import VoteCheck, check_cooldown, normalize_phone

T0 = datetime(2026, 3, 1, 18, 30)
WINDOW = timedelta(hours=24)


@pytest.mark.parametrize('raw', ['9000000001', '90000 00001', '+91 90000-00001', '09000000001'])
def test_phone_is_normalized_to_ten_digits(raw):
    assert normalize_phone(raw) == '9000000001'


@pytest.mark.parametrize('raw', ['', None, '12345', '900000000123'])
def test_invalid_phone_is_rejected(raw):
    with pytest.raises(InvalidVoterError):
        normalize_phone(raw)


def test_first_vote_is_allowed():
    check = check_cooldown(None, T0, WINDOW)
    assert check.can_vote
    assert check.hours_remaining is None
    assert check.reason is None


def test_vote_after_23_hours_is_rejected_with_one_hour_left():
    check = check_cooldown(T0, T0 + timedelta(hours=23), WINDOW)

    assert not check.can_vote
    assert check.hours_remaining == 1
    assert check.reason.endswith('in 1 hour')


def test_vote_exactly_at_window_is_accepted():
    assert check_cooldown(T0, T0 + WINDOW, WINDOW).can_vote


def test_one_second_early_is_rejected():
    check = check_cooldown(T0, T0 + WINDOW - timedelta(seconds=1), WINDOW)
    assert not check.can_vote
    assert check.hours_remaining >= 1


def test_hours_remaining_rounds_up():
    check = check_cooldown(T0, T0 + timedelta(hours=1, minutes=5), WINDOW)
    assert check.hours_remaining == 23
    assert check.reason.endswith('in 23 hours')
    assert check.to_dict() == {'can_vote': False, 'eligible': True, 'hours_remaining': 23,
                               'reason': check.reason}


def test_unquoted_json_number_is_a_phone():
    assert normalize_phone(9000000001) == '9000000001'
    assert normalize_phone(919000000001) == '9000000001'


@pytest.mark.parametrize('raw', [9000000001.0, True, ['9000000001'], {'phone': '9000000001'}])
def test_non_text_phone_is_rejected(raw):
    with pytest.raises(InvalidVoterError):
        normalize_phone(raw)


def test_ineligible_check_explains_itself():
    check = VoteCheck(can_vote=False, eligible=False)
    assert check.to_dict() == {
        'can_vote': False, 'eligible': False, 'hours_remaining': None,
        'reason': 'This entry is not open for community voting.',
    }
