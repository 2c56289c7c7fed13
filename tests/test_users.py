"""
Own-profile endpoints for logins.
"""
from conftest import STUDENT_PASSWORD


def test_read_me(client, student_headers):
    response = client.get('/api/users/me', headers=student_headers)

    assert response.status_code == 200
    body = response.json()
    assert body['username'] == 'student'
    assert 'password_hash' not in body


def test_update_me(client, admin_headers):
    response = client.put(
        '/api/users/me',
        json={'display_name': 'Warden', 'email': 'warden@hostel.com'},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()['display_name'] == 'Warden'
    assert response.json()['email'] == 'warden@hostel.com'


def test_email_taken_by_another_login(client, admin_headers, student_headers):
    client.put('/api/users/me', json={'email': 'taken@hostel.com'}, headers=student_headers)

    response = client.put('/api/users/me', json={'email': 'taken@hostel.com'}, headers=admin_headers)

    assert response.status_code == 409


def test_student_password_change_needs_current(client, student_headers):
    response = client.post(
        '/api/users/change-password',
        json={'current_password': 'wrong', 'new_password': 'new-secret'},
        headers=student_headers,
    )

    assert response.status_code == 401
    assert response.json()['error']['message'] == 'Current password incorrect'


def test_student_password_change(client, student_headers, student_user):
    response = client.post(
        '/api/users/change-password',
        json={'current_password': STUDENT_PASSWORD, 'new_password': 'new-secret'},
        headers=student_headers,
    )
    assert response.status_code == 200

    login = client.post('/api/auth/login', json={'id': 'student', 'password': 'new-secret', 'role': 'student'})
    assert login.status_code == 200


def test_admin_resets_without_current(client, admin_headers):
    response = client.post(
        '/api/users/change-password',
        json={'new_password': 'rotated'},
        headers=admin_headers,
    )
    assert response.status_code == 200

    login = client.post('/api/auth/login', json={'id': 'admin', 'password': 'rotated', 'role': 'admin'})
    assert login.status_code == 200
