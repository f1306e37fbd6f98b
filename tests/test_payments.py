import pytest

from wtyczka_app.models import Payment


@pytest.fixture(autouse=True)
def payments_open(set_setting):
    set_setting('PAYMENT_OPEN_DATE', '2000-01-01T00:00:00Z')


def payment_form(**overrides):
    form = {
        'studentStatus': 'politechnika',
        'emergencyContactName': 'Maria Kowalska',
        'emergencyContactPhone': '+48 600 100 300',
        'emergencyContactRelation': 'Matka',
        'needsTransport': True,
        'medicalConditions': '',
        'medications': '',
        'paymentConfirmationFile': {
            'url': '/api/files/u-1/1727000000000-abc-potwierdzenie.pdf',
            'fileName': '1727000000000-abc-potwierdzenie.pdf',
            'fileSize': 2048,
            'fileType': 'application/pdf',
        },
        'transferConfirmation': True,
        'ageConfirmation': True,
        'cancellationPolicy': True,
    }
    form.update(overrides)
    return form


def pay(client, user_id='u-1', **overrides):
    return client.post('/api/payments', json={'user': {'id': user_id}, 'payment': payment_form(**overrides)})


def test_payment_requires_registration(client):
    response = pay(client)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Registration required before payment'


def test_create_and_fetch_payment(client, register):
    register()

    response = pay(client)
    assert response.status_code == 201

    data = client.get('/api/payments?userId=u-1').get_json()['data']
    assert data['userId'] == 'u-1'
    assert data['studentStatus'] == 'politechnika'
    assert data['needsTransport'] is True
    assert data['qualified'] is False
    confirmation = data['paymentConfirmationFile']
    assert confirmation['fileName'] == '1727000000000-abc-potwierdzenie.pdf'
    assert confirmation['uploadedAt']

    assert client.get('/api/data/payment?userId=u-1').get_json()['data']['id'] == data['id']


def test_duplicate_payment_conflicts(client, register):
    register()
    pay(client)

    assert pay(client).status_code == 409
    assert Payment.query.count() == 1


@pytest.mark.parametrize('field, value', [
    ('studentStatus', 'retired'),
    ('emergencyContactName', 'M'),
    ('emergencyContactPhone', '600'),
    ('transferConfirmation', False),
    ('ageConfirmation', False),
    ('cancellationPolicy', False),
])
def test_invalid_payment_fields(client, register, field, value):
    register()

    response = pay(client, **{field: value})

    assert response.status_code == 400
    assert field in response.get_json()['details']['errors']


def test_confirmation_file_is_optional(client, register):
    register()

    assert pay(client, paymentConfirmationFile=None).status_code == 201
    assert client.get('/api/payments?userId=u-1').get_json()['data']['paymentConfirmationFile'] is None


def test_status_becomes_pending_after_payment(client, register):
    register()
    pay(client)

    assert client.get('/api/status?userId=u-1').get_json()['status'] == 'pending'
