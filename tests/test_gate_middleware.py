import pytest

from wtyczka_app.models import TeamMember, db


@pytest.fixture
def roster(app):
    db.session.add(TeamMember(name='Anna Nowak', role='Koordynatorka', email='anna@example.com', display_order=1))
    db.session.commit()


def test_team_hidden_before_contact_date(client, set_setting, roster):
    set_setting('CONTACT_DATE', '2999-01-01T00:00:00Z')

    for path in ('/api/team-members', '/api/data/team'):
        response = client.get(path)
        assert response.status_code == 403
        assert response.get_json() == {'error': 'Access denied'}


def test_team_visible_when_contact_date_unset(client, roster):
    response = client.get('/api/team-members')

    assert response.status_code == 200
    assert response.get_json()['teamMembers'][0]['name'] == 'Anna Nowak'


def test_team_visible_after_contact_date(client, set_setting, roster):
    set_setting('CONTACT_DATE', '2000-01-01T00:00:00Z')

    assert client.get('/api/data/team').status_code == 200


def test_payment_data_denied_when_date_unset(client):
    response = client.get('/api/payments?userId=u-1')

    assert response.status_code == 403
    assert response.get_json() == {'error': 'Access denied'}


def test_payment_data_denied_before_date(client, set_setting):
    set_setting('PAYMENT_OPEN_DATE', '2999-01-01T00:00:00Z')

    assert client.get('/api/data/payment?userId=u-1').status_code == 403
    assert client.post('/api/payments', json={}).status_code == 403


def test_admin_cookie_passes_payment_gate(client, set_setting):
    set_setting('PAYMENT_OPEN_DATE', '2999-01-01T00:00:00Z')
    client.set_cookie('admin-auth', 'token')

    response = client.get('/api/payments?userId=u-1')

    assert response.status_code == 200
    assert response.get_json() == {'data': None}


def test_admin_cookie_does_not_open_unconfigured_payments(client):
    client.set_cookie('admin-auth', 'token')

    assert client.get('/api/payments?userId=u-1').status_code == 403


def test_admin_cookie_does_not_open_contacts(client, set_setting, roster):
    set_setting('CONTACT_DATE', '2999-01-01T00:00:00Z')
    client.set_cookie('admin-auth', 'token')

    assert client.get('/api/team-members').status_code == 403


def test_check_endpoints_and_other_routes_pass_through(client, set_setting):
    set_setting('CONTACT_DATE', '2999-01-01T00:00:00Z')
    set_setting('PAYMENT_OPEN_DATE', '2999-01-01T00:00:00Z')

    assert client.get('/api/check-access/contacts').status_code == 200
    assert client.get('/api/check-access/payment').status_code == 200
    assert client.get('/api/registrations?userId=u-1').status_code == 200
    assert client.get('/api/status?userId=u-1').status_code == 200


def test_storage_failure_in_gate_is_server_error(client, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from wtyczka_app.models import AppSettings

    def broken(key):
        raise OperationalError('SELECT value FROM app_settings', {}, Exception('disk I/O error'))

    monkeypatch.setattr(AppSettings, 'get_raw', broken)

    response = client.get('/api/team-members')

    assert response.status_code == 500
    assert response.get_json() == {'ok': False, 'error': 'Server error'}


def test_team_view_checks_gate_without_middleware(app, set_setting, roster):
    from wtyczka_app.modules.access_gate.exceptions import GateClosedError
    from wtyczka_app.modules.team.routes.api import list_team_members

    set_setting('CONTACT_DATE', '2999-01-01T00:00:00Z')

    with app.test_request_context('/api/team-members'):
        with pytest.raises(GateClosedError):
            list_team_members()


def test_payment_views_check_gate_without_middleware(app, set_setting):
    from wtyczka_app.modules.access_gate.exceptions import GateClosedError
    from wtyczka_app.modules.payments.routes.api import create_payment, get_payment

    set_setting('PAYMENT_OPEN_DATE', '2999-01-01T00:00:00Z')

    with app.test_request_context('/api/payments?userId=u-1'):
        with pytest.raises(GateClosedError):
            get_payment()
    with app.test_request_context('/api/payments', method='POST', json={}):
        with pytest.raises(GateClosedError):
            create_payment()

    with app.test_request_context('/api/payments?userId=u-1', headers={'Cookie': 'admin-auth=token'}):
        response, status = get_payment()
        assert status == 200
        assert response.get_json() == {'data': None}
