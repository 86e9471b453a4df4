import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from config import TestingConfig
from models import db
from storage import get_storage


@pytest.fixture(params=['database', 'memory'])
def app(request):
    app = create_app(TestingConfig, STORAGE_BACKEND=request.param)

    with app.app_context():
        yield app
        db.session.remove()
        if app.config['STORAGE_BACKEND'] == 'database':
            db.drop_all()


@pytest.fixture
def storage(app):
    return get_storage()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def make_user(storage):
    def _make_user(username='testuser', password='password'):
        return storage.create_user(username, generate_password_hash(password, method='scrypt'))
    return _make_user


@pytest.fixture
def auth_client(client, make_user):
    user = make_user()
    client.post('/api/auth/login', json={'username': 'testuser', 'password': 'password'})
    return client, user
