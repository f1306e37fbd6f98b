import json

from wtyczka_app.models import AppSettings, TeamMember, db


def test_team_members_are_ordered(client):
    db.session.add_all([
        TeamMember(name='Ola', role='Media', email='ola@example.com', display_order=2),
        TeamMember(name='Piotr', role='Szef', email='piotr@example.com', display_order=1,
                   facebook_url='https://facebook.com/piotr'),
    ])
    db.session.commit()

    members = client.get('/api/team-members').get_json()['teamMembers']

    assert [member['name'] for member in members] == ['Piotr', 'Ola']
    assert members[0]['facebookUrl'] == 'https://facebook.com/piotr'
    assert members[1]['photoUrl'] == ''
    assert set(members[0]) == {'id', 'name', 'role', 'photoUrl', 'email', 'facebookUrl'}


def test_team_import_command(app, tmp_path):
    roster = tmp_path / 'roster.json'
    roster.write_text(json.dumps([
        {'name': 'Piotr', 'role': 'Szef', 'email': 'piotr@example.com'},
        {'name': 'Ola', 'email': 'ola@example.com', 'photoUrl': '/img/ola.jpg'},
    ]), encoding='utf-8')
    runner = app.test_cli_runner()

    result = runner.invoke(args=['team', 'import', str(roster)])
    assert result.exit_code == 0
    assert 'Imported 2 team members' in result.output

    runner.invoke(args=['team', 'import', str(roster)])
    assert TeamMember.query.count() == 4

    runner.invoke(args=['team', 'import', str(roster), '--replace'])
    assert TeamMember.query.count() == 2

    listing = runner.invoke(args=['team', 'list'])
    assert 'Piotr' in listing.output


def stored_setting(key):
    # Read through a fresh session so the identity map cannot answer.
    db.session.remove()
    return AppSettings.get_raw(key)


def test_settings_commands(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=['settings', 'set', 'PAYMENT_OPEN_DATE', '2025-09-15T10:00:00+02:00'])
    assert result.exit_code == 0
    assert stored_setting('PAYMENT_OPEN_DATE') == '2025-09-15T10:00:00+02:00'

    assert 'PAYMENT_OPEN_DATE=2025-09-15T10:00:00+02:00' in runner.invoke(
        args=['settings', 'get', 'PAYMENT_OPEN_DATE']).output

    assert 'removed' in runner.invoke(args=['settings', 'unset', 'PAYMENT_OPEN_DATE']).output
    assert stored_setting('PAYMENT_OPEN_DATE') is None
    assert 'is not set' in runner.invoke(args=['settings', 'get', 'PAYMENT_OPEN_DATE']).output


def test_settings_change_takes_effect_without_restart(app, client):
    runner = app.test_cli_runner()

    runner.invoke(args=['settings', 'set', 'CONTACT_DATE', '2999-01-01T00:00:00Z'])
    assert client.get('/api/team-members').status_code == 403

    runner.invoke(args=['settings', 'unset', 'CONTACT_DATE'])
    assert client.get('/api/team-members').status_code == 200


def test_gates_status_command(app, set_setting):
    set_setting('CONTACT_DATE', '2000-01-01T00:00:00Z')
    set_setting('PAYMENT_OPEN_DATE', '2999-01-01T00:00:00Z')
    runner = app.test_cli_runner()

    output = runner.invoke(args=['gates', 'status']).output.splitlines()
    assert output[0].split()[:2] == ['contacts', 'open']
    assert output[1].split()[:2] == ['payment-form', 'closed']
    assert output[2].split()[:2] == ['payment', 'closed']
    assert 'days left' in output[2]

    admin_output = runner.invoke(args=['gates', 'status', '--admin']).output.splitlines()
    assert admin_output[2].split()[:2] == ['payment', 'open']
