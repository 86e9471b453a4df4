from app import create_app
from config import TestingConfig
from storage import get_storage


def test_signup(client):
    response = client.post('/api/auth/signup', json={
        'username': 'newuser', 'password': 'newpassword', 'firstName': 'New', 'email': 'new@example.com',
    })
    assert response.status_code == 201
    assert response.json['username'] == 'newuser'
    assert response.json['firstName'] == 'New'
    assert 'password_hash' not in response.json
    assert get_storage().get_user_by_username('newuser') is not None

    # Signed in straight away
    assert client.get('/api/auth/user').json['username'] == 'newuser'


def test_signup_existing_user(client):
    client.post('/api/auth/signup', json={'username': 'existing', 'password': 'password'})
    client.post('/api/auth/logout')

    response = client.post('/api/auth/signup', json={'username': 'existing', 'password': 'password'})
    assert response.status_code == 400
    assert response.json['errors'] == {'username': ['Username already exists']}


def test_signup_invalid(client):
    response = client.post('/api/auth/signup', json={'username': 'ab', 'password': '123'})
    assert response.status_code == 400
    assert set(response.json['errors']) == {'username', 'password'}


def test_login(client):
    client.post('/api/auth/signup', json={'username': 'loginuser', 'password': 'password'})
    client.post('/api/auth/logout')

    response = client.post('/api/auth/login', json={'username': 'loginuser', 'password': 'password'})
    assert response.status_code == 200
    assert response.json['username'] == 'loginuser'


def test_login_invalid(client):
    client.post('/api/auth/signup', json={'username': 'loginuser', 'password': 'password'})
    client.post('/api/auth/logout')

    response = client.post('/api/auth/login', json={'username': 'loginuser', 'password': 'wrong'})
    assert response.status_code == 401
    assert response.json['message'] == 'Invalid username or password'

    response = client.post('/api/auth/login', json={'username': 'nobody', 'password': 'password'})
    assert response.status_code == 401


def test_logout(auth_client):
    client, _ = auth_client
    assert client.post('/api/auth/logout').status_code == 204
    assert client.get('/api/auth/user').status_code == 401


def test_current_user(auth_client):
    client, user = auth_client
    response = client.get('/api/auth/user')
    assert response.status_code == 200
    assert response.json['id'] == user.id
    assert response.json['username'] == 'testuser'


def test_csrf_token_required_when_enabled():
    app = create_app(TestingConfig, STORAGE_BACKEND='memory', WTF_CSRF_ENABLED=True)
    with app.test_client() as client:
        response = client.post('/api/auth/signup', json={'username': 'csrfuser', 'password': 'password'})
        assert response.status_code == 400
        assert 'CSRF' in response.json['message']

        token = client.get('/api/auth/csrf').json['csrfToken']
        response = client.post('/api/auth/signup', json={'username': 'csrfuser', 'password': 'password'},
                               headers={'X-CSRFToken': token})
        assert response.status_code == 201


def test_corrupt_session_user_id_is_anonymous(client):
    with client.session_transaction() as session:
        session['_user_id'] = 'not-a-number'

    response = client.get('/api/auth/user')
    assert response.status_code == 401
