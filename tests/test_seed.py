"""
Default login seeding.
"""
from hostelmanix.db.seed import seed_users
from hostelmanix.models import Student, User


def test_seed_creates_default_logins(client, db_session):
    seed_users(db_session)
    db_session.commit()

    response = client.post('/api/auth/login', json={'id': 'admin', 'password': 'admin123', 'role': 'admin'})
    assert response.status_code == 200

    response = client.post('/api/auth/login', json={'id': 'STU001', 'password': 'student123', 'role': 'student'})
    assert response.status_code == 200
    assert response.json()['user']['student_info']['email'] == 'student@hostel.com'


def test_seed_is_idempotent(db_session):
    seed_users(db_session)
    db_session.commit()
    seed_users(db_session)
    db_session.commit()

    assert db_session.query(User).count() == 2
    assert db_session.query(Student).count() == 1
