from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from wtyczka_app.models import AppSettings
from wtyczka_app.utils import time_utils


def iso(dt):
    return dt.isoformat()


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the gate clock to 2025-09-28T00:00:00Z."""
    now = datetime(2025, 9, 28, tzinfo=timezone.utc)
    monkeypatch.setattr(time_utils, 'utcnow', lambda: now)
    return now


# --- /api/check-access/contacts ---

def test_contacts_open_when_unconfigured(client):
    response = client.get('/api/check-access/contacts')

    assert response.status_code == 200
    body = response.get_json()
    assert body['ok'] is True
    assert body['access'] is True
    assert 'daysRemaining' not in body
    assert 'date' not in body


def test_contacts_closed_before_date(client, set_setting):
    threshold = time_utils.utcnow() + timedelta(days=2, hours=12)
    set_setting('CONTACT_DATE', iso(threshold))

    response = client.get('/api/check-access/contacts')

    assert response.status_code == 200
    body = response.get_json()
    assert body['ok'] is True
    assert body['access'] is False
    assert body['isOpen'] is False
    assert body['daysRemaining'] == 3
    assert body['date'] == iso(threshold)
    assert body['message']


def test_contacts_open_after_date(client, set_setting):
    set_setting('CONTACT_DATE', iso(time_utils.utcnow() - timedelta(minutes=1)))

    body = client.get('/api/check-access/contacts').get_json()

    assert body['access'] is True
    assert body['isOpen'] is True
    assert 'daysRemaining' not in body


def test_days_remaining_example(client, set_setting, frozen_now):
    set_setting('CONTACT_DATE', '2025-10-01T00:00:00Z')

    body = client.get('/api/check-access/contacts').get_json()

    assert body['daysRemaining'] == 3
    assert body['date'] == '2025-10-01T00:00:00Z'


def test_threshold_equal_to_now_is_open(client, set_setting, frozen_now):
    set_setting('CONTACT_DATE', '2025-09-28T00:00:00Z')

    body = client.get('/api/check-access/contacts').get_json()

    assert body['access'] is True
    assert body['isOpen'] is True


def test_offset_is_respected(client, set_setting, frozen_now):
    # 01:00 in Warsaw summer time is 23:00 UTC the day before the pinned clock.
    set_setting('CONTACT_DATE', '2025-09-28T01:00:00+02:00')

    body = client.get('/api/check-access/contacts').get_json()

    assert body['access'] is True


def test_date_only_threshold_counts_from_utc_midnight(client, set_setting, frozen_now):
    set_setting('CONTACT_DATE', '2025-10-01')

    body = client.get('/api/check-access/contacts').get_json()

    assert body['access'] is False
    assert body['daysRemaining'] == 3


# --- /api/check-access/payment-form ---

def test_payment_form_closed_when_unconfigured(client):
    response = client.get('/api/check-access/payment-form')

    assert response.status_code == 200
    body = response.get_json()
    assert body['ok'] is True
    assert body['access'] is False
    assert 'daysRemaining' not in body


def test_payment_form_before_date_returns_403_with_decision(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-10-01T00:00:00Z')

    response = client.get('/api/check-access/payment-form')

    assert response.status_code == 403
    body = response.get_json()
    assert body['ok'] is True
    assert body['access'] is False
    assert body['isOpen'] is False
    assert body['daysRemaining'] == 3


def test_payment_form_ignores_admin_cookie(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-10-01T00:00:00Z')
    client.set_cookie('admin-auth', 'token')

    response = client.get('/api/check-access/payment-form')

    assert response.status_code == 403
    assert 'isAdmin' not in response.get_json()


def test_payment_form_open_after_date(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-09-01T00:00:00Z')

    response = client.get('/api/check-access/payment-form')

    assert response.status_code == 200
    assert response.get_json()['access'] is True


# --- /api/check-access/payment ---

def test_payment_closed_when_unconfigured(client):
    body = client.get('/api/check-access/payment').get_json()

    assert body['access'] is False
    assert body['isAdmin'] is False


def test_payment_admin_cookie_without_date_stays_closed(client):
    client.set_cookie('admin-auth', 'token')

    response = client.get('/api/check-access/payment')

    assert response.status_code == 200
    body = response.get_json()
    assert body['access'] is False
    assert body['isAdmin'] is True
    assert 'isOpen' not in body
    assert 'daysRemaining' not in body


def test_payment_admin_cookie_bypasses_date_but_not_is_open(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-10-01T00:00:00Z')
    client.set_cookie('admin-auth', 'token')

    response = client.get('/api/check-access/payment')

    assert response.status_code == 200
    body = response.get_json()
    assert body['access'] is True
    assert body['isOpen'] is False
    assert body['isAdmin'] is True
    assert body['message'] == 'Admin access granted'


def test_payment_closed_without_cookie(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-10-01T00:00:00Z')

    response = client.get('/api/check-access/payment')

    assert response.status_code == 200
    body = response.get_json()
    assert body['access'] is False
    assert body['isOpen'] is False
    assert body['isAdmin'] is False
    assert body['daysRemaining'] == 3


def test_payment_open_reports_admin_flag(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-09-01T00:00:00Z')
    client.set_cookie('admin-auth', 'token')

    body = client.get('/api/check-access/payment').get_json()

    assert body['access'] is True
    assert body['isOpen'] is True
    assert body['isAdmin'] is True
    assert body['message'] == 'Payment is available'


def test_date_change_applies_on_next_request(client, set_setting, frozen_now):
    set_setting('PAYMENT_OPEN_DATE', '2025-10-01T00:00:00Z')
    assert client.get('/api/check-access/payment').get_json()['access'] is False

    set_setting('PAYMENT_OPEN_DATE', '2025-09-01T00:00:00Z')
    assert client.get('/api/check-access/payment').get_json()['access'] is True


# --- infrastructure failures ---

def test_storage_failure_is_server_error_not_denial(client, monkeypatch):
    def broken(key):
        raise OperationalError('SELECT value FROM app_settings', {}, Exception('database is locked'))

    monkeypatch.setattr(AppSettings, 'get_raw', broken)

    for path in ('/api/check-access/contacts', '/api/check-access/payment-form', '/api/check-access/payment'):
        response = client.get(path)
        assert response.status_code == 500
        body = response.get_json()
        assert body['ok'] is False
        assert 'access' not in body


def test_malformed_date_is_server_error(client, set_setting):
    set_setting('CONTACT_DATE', 'next tuesday')

    response = client.get('/api/check-access/contacts')

    assert response.status_code == 500
    assert response.get_json() == {'ok': False, 'error': 'Server error'}
