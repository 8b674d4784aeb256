# notifications.py
# Best-effort outbound notifications. A failure here never undoes the vote.

import logging

import requests
from flask import current_app

logger = logging.getLogger(__name__)


def send_vote_notification(entry, voter_name, phone):
    """
    Posts the accepted vote to the configured webhook (WhatsApp thank-you flow).

    Returns True when the webhook answered with a success status. Network and
    HTTP errors are logged and swallowed.
    """
    url = current_app.config.get('VOTE_WEBHOOK_URL')
    if not url:
        return False

    payload = {
        'name': voter_name,
        'phone': phone,
        'yt_link': entry.yt_link or '',
    }
    try:
        response = requests.post(url, json=payload, timeout=current_app.config.get('VOTE_WEBHOOK_TIMEOUT', 5))
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Vote notification for entry %s failed: %s", entry.id, e)
        return False
    return True
