import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wtyczka_app import create_app, db
from wtyczka_app.core.config import Config
from wtyczka_app.models import AppSettings


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'
    PAYMENT_FORM_PASSWORD = 'Wtyczka2025!'
    ADMIN_COOKIE_SECURE = False
    GATE_NAIVE_TIMEZONE = 'UTC'


@pytest.fixture
def app(tmp_path):
    class _Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(_Config)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def set_setting(app):
    """Store an AppSettings value the way an operator would."""

    def _set(key, value):
        AppSettings.set(key, value)
        db.session.commit()

    return _set


def registration_form(**overrides):
    form = {
        'name': 'Jan',
        'surname': 'Kowalski',
        'dob': '2003-05-14',
        'phoneNumber': '+48 600 100 200',
        'pesel': '03251412345',
        'gender': 'male',
        'faculty': 'w4',
        'studentNumber': '264512',
        'studyField': 'Informatyka',
        'studyLevel': 'bachelor',
        'studyYear': 1,
        'dietName': 'standard',
        'tshirtSize': 'L',
        'aboutWtyczka': 'friend',
        'invoice': False,
        'regAccept': True,
        'rodoAccept': True,
    }
    form.update(overrides)
    return form


@pytest.fixture
def register(client):
    """POST a registration; keyword arguments override form fields."""

    def _register(user_id='u-1', email='jan@example.com', **overrides):
        return client.post('/api/registrations', json={
            'user': {'id': user_id, 'email': email},
            'registration': registration_form(**overrides),
        })

    return _register
