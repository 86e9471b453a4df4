from datetime import date

from storage import get_storage


def test_analytics_requires_login(client):
    assert client.get('/api/analytics').status_code == 401


def test_analytics_empty(auth_client):
    client, _ = auth_client
    response = client.get('/api/analytics')
    assert response.status_code == 200
    assert response.json['totalHabits'] == 0
    assert response.json['completedToday'] == 0
    assert response.json['overallCompletionRate'] == 0
    assert response.json['categoryStats'] == {}
    assert len(response.json['weeklyProgress']) == 7
    assert response.json['weeklyProgress'][-1] == {'date': date.today().isoformat(), 'completionRate': 0}


def test_analytics_snapshot(auth_client):
    client, _ = auth_client
    ids = []
    for name, category in [('Water', 'Health'), ('Sleep', 'Health'), ('Run', 'Fitness')]:
        ids.append(client.post('/api/habits', json={'name': name, 'category': category}).json['id'])
    today = date.today().isoformat()
    client.post(f'/api/habits/{ids[0]}/toggle', json={'date': today, 'completed': True})
    client.post(f'/api/habits/{ids[1]}/toggle', json={'date': today, 'completed': False})

    data = client.get('/api/analytics').json
    assert data['totalHabits'] == 3
    assert data['completedToday'] == 1
    assert data['overallCompletionRate'] == 50
    assert data['categoryStats'] == {'Health': 2, 'Fitness': 1}
    assert data['weeklyProgress'][-1] == {'date': today, 'completionRate': 33}
    dates = [entry['date'] for entry in data['weeklyProgress']]
    assert dates == sorted(dates)


def test_analytics_scoped_to_owner(auth_client, make_user):
    client, _ = auth_client
    other = make_user('other')
    get_storage().create_habit(other.id, 'Secret', 'Other')

    assert client.get('/api/analytics').json['totalHabits'] == 0
