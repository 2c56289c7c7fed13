"""
Student directory endpoints, including room membership side effects.
"""
from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.repositories.room_repository import RoomRepository


def create_room(client, headers, number, **fields):
    body = {'room_number': number, 'floor': number // 100, 'capacity': 2, **fields}
    response = client.post('/api/rooms', json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_student(client, headers, user, student_id, **fields):
    body = {'student_id': student_id, 'name': f'Student {student_id}', 'user_id': user.id, **fields}
    return client.post('/api/students', json=body, headers=headers)


class TestStudentRoomLifecycle:

    def test_assign_move_unassign_delete(self, client, admin_headers, make_user):
        room_101 = create_room(client, admin_headers, 101)
        room_102 = create_room(client, admin_headers, 102)
        user = make_user('stu200', student_id='STU200')

        response = create_student(client, admin_headers, user, 'STU200', room_id=room_101['id'])
        assert response.status_code == 201
        student = response.json()
        assert student['room_id'] == room_101['id']
        assert student['user']['username'] == 'stu200'
        assert 'X-Room-Sync-Warning' not in response.headers

        room = client.get(f"/api/rooms/{room_101['id']}", headers=admin_headers).json()
        assert room['student_ids'] == [student['id']]
        assert room['occupants'] == 1
        assert room['status'] == 'occupied'
        assert room['students'][0]['student_id'] == 'STU200'

        response = client.put(
            f"/api/students/{student['id']}",
            json={'room_id': room_102['id']},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()['room_id'] == room_102['id']

        room = client.get(f"/api/rooms/{room_101['id']}", headers=admin_headers).json()
        assert room['student_ids'] == []
        assert room['occupants'] == 0
        assert room['status'] == 'vacant'
        room = client.get(f"/api/rooms/{room_102['id']}", headers=admin_headers).json()
        assert room['student_ids'] == [student['id']]
        assert room['status'] == 'occupied'

        in_room = client.get(f"/api/students/room/{room_102['id']}", headers=admin_headers).json()
        assert [s['student_id'] for s in in_room] == ['STU200']

        response = client.delete(f"/api/students/{student['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()['message'] == 'Student deleted successfully'

        room = client.get(f"/api/rooms/{room_102['id']}", headers=admin_headers).json()
        assert room['student_ids'] == []
        assert room['status'] == 'vacant'

    def test_room_fills_and_empties(self, client, admin_headers, make_user):
        room = create_room(client, admin_headers, 101, capacity=2)
        first = create_student(
            client, admin_headers, make_user('stu-a', student_id='STU-A'), 'STU-A', room_id=room['id']
        ).json()
        second = create_student(
            client, admin_headers, make_user('stu-b', student_id='STU-B'), 'STU-B', room_id=room['id']
        ).json()

        body = client.get(f"/api/rooms/{room['id']}", headers=admin_headers).json()
        assert body['student_ids'] == [first['id'], second['id']]
        assert body['occupants'] == 2
        assert body['status'] == 'occupied'

        client.delete(f"/api/students/{first['id']}", headers=admin_headers)
        body = client.get(f"/api/rooms/{room['id']}", headers=admin_headers).json()
        assert body['student_ids'] == [second['id']]
        assert body['occupants'] == 1
        assert body['status'] == 'occupied'

        client.delete(f"/api/students/{second['id']}", headers=admin_headers)
        body = client.get(f"/api/rooms/{room['id']}", headers=admin_headers).json()
        assert body['student_ids'] == []
        assert body['occupants'] == 0
        assert body['status'] == 'vacant'

    def test_null_room_id_unassigns(self, client, admin_headers, make_user):
        room = create_room(client, admin_headers, 101)
        user = make_user('stu200', student_id='STU200')
        student = create_student(client, admin_headers, user, 'STU200', room_id=room['id']).json()

        response = client.put(f"/api/students/{student['id']}", json={'room_id': None}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()['room_id'] is None
        room = client.get(f"/api/rooms/{room['id']}", headers=admin_headers).json()
        assert room['occupants'] == 0

    def test_blank_room_id_unassigns(self, client, admin_headers, make_user):
        room = create_room(client, admin_headers, 101)
        user = make_user('stu200', student_id='STU200')
        student = create_student(client, admin_headers, user, 'STU200', room_id=room['id']).json()

        response = client.put(f"/api/students/{student['id']}", json={'room_id': ''}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()['room_id'] is None
        body = client.get(f"/api/rooms/{room['id']}", headers=admin_headers).json()
        assert body['student_ids'] == []
        assert body['status'] == 'vacant'
        report = client.get('/api/rooms/consistency', headers=admin_headers).json()
        assert report['consistent'] is True
        assert report['dangling_students'] == []

    def test_blank_room_id_on_create_means_no_room(self, client, admin_headers, make_user):
        user = make_user('stu200', student_id='STU200')

        response = create_student(client, admin_headers, user, 'STU200', room_id='  ')

        assert response.status_code == 201
        assert response.json()['room_id'] is None
        report = client.get('/api/rooms/consistency', headers=admin_headers).json()
        assert report['consistent'] is True

    def test_failed_room_sync_sets_warning_header(self, client, admin_headers, make_user, monkeypatch):
        room = create_room(client, admin_headers, 101)
        user = make_user('stu200', student_id='STU200')

        def failing_update(self, entity, data, commit=True):
            raise DatabaseError("simulated write failure", table="rooms")

        monkeypatch.setattr(RoomRepository, 'update', failing_update)
        response = create_student(client, admin_headers, user, 'STU200', room_id=room['id'])
        monkeypatch.undo()

        assert response.status_code == 201
        assert response.headers['X-Room-Sync-Warning']
        assert response.json()['room_id'] == room['id']

        report = client.get('/api/rooms/consistency', headers=admin_headers).json()
        assert report['consistent'] is False
        assert report['drifted_rooms'][0]['room_number'] == 101


class TestStudentWrites:

    def test_duplicate_student_id_conflicts(self, client, admin_headers, make_user, student_profile):
        user = make_user('other', student_id='STU999')

        response = create_student(client, admin_headers, user, 'STU001')

        assert response.status_code == 409
        assert response.json()['error']['code'] == 'DUPLICATE_ENTRY'

    def test_unknown_user_is_not_found(self, client, admin_headers):
        response = client.post(
            '/api/students',
            json={'student_id': 'STU300', 'name': 'Nobody', 'user_id': 'missing-user'},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_unknown_fields_are_rejected(self, client, admin_headers, make_user):
        user = make_user('stu200', student_id='STU200')

        response = create_student(client, admin_headers, user, 'STU200', occupants=3)

        assert response.status_code == 422

    def test_student_cannot_create_profiles(self, client, student_headers, make_user):
        user = make_user('stu200', student_id='STU200')

        response = create_student(client, student_headers, user, 'STU200')

        assert response.status_code == 403

    def test_requires_token(self, client):
        response = client.get('/api/students')

        assert response.status_code == 401
        assert response.json()['error']['message'] == 'No token provided'

    def test_invalid_token(self, client):
        response = client.get('/api/students', headers={'Authorization': 'Bearer not-a-token'})

        assert response.status_code == 401
        assert response.json()['error']['code'] == 'TOKEN_INVALID'


class TestStudentReads:

    def test_lookup_by_student_id(self, client, student_headers, student_profile):
        response = client.get('/api/students/by-student-id/STU001', headers=student_headers)

        assert response.status_code == 200
        assert response.json()['id'] == student_profile.id
        assert response.json()['name'] == 'John Doe'

    def test_unknown_student_id(self, client, student_headers):
        response = client.get('/api/students/by-student-id/NOPE', headers=student_headers)

        assert response.status_code == 404

    def test_own_profile(self, client, student_headers, student_profile):
        response = client.get('/api/students/me', headers=student_headers)

        assert response.status_code == 200
        assert response.json()['student_id'] == 'STU001'

    def test_update_own_profile(self, client, student_headers, student_profile):
        response = client.put(
            '/api/students/me',
            json={'phone': '5550001111', 'branch': 'Mechanical'},
            headers=student_headers,
        )

        assert response.status_code == 200
        assert response.json()['phone'] == '5550001111'
        assert response.json()['branch'] == 'Mechanical'

    def test_students_cannot_move_themselves(self, client, student_headers, student_profile):
        response = client.put('/api/students/me', json={'room_id': 'some-room'}, headers=student_headers)

        assert response.status_code == 422

    def test_list_students(self, client, admin_headers, student_profile, make_student):
        make_student('STU002')

        response = client.get('/api/students', headers=admin_headers)

        assert response.status_code == 200
        assert {s['student_id'] for s in response.json()} == {'STU001', 'STU002'}

    def test_read_by_internal_id(self, client, admin_headers, student_profile):
        response = client.get(f'/api/students/{student_profile.id}', headers=admin_headers)

        assert response.status_code == 200
        assert response.json()['student_id'] == 'STU001'

    def test_unknown_internal_id(self, client, admin_headers):
        response = client.get('/api/students/missing-id', headers=admin_headers)

        assert response.status_code == 404
        assert response.json()['error']['code'] == 'STUDENT_NOT_FOUND'
