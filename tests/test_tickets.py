"""
Leaves, complaints, maintenance requests, fees and the mess menu.
"""
from decimal import Decimal

import pytest

LEAVE = {
    'name': 'John Doe',
    'hostel_no': 'STU001',
    'leave_type': 'Home',
    'visit_place': 'Pune',
    'start_date': '2026-02-01',
    'start_time': '09:00',
    'end_date': '2026-02-03',
    'end_time': '18:00',
    'reason': 'Family function',
    'mobile': '1234567890',
    'days': 3,
}


class TestLeaves:

    def test_apply_and_review(self, client, student_headers, admin_headers, admin_user, student_profile):
        response = client.post('/api/leaves', json=LEAVE, headers=student_headers)
        assert response.status_code == 201
        leave = response.json()
        assert leave['status'] == 'Pending'
        assert leave['student_id'] == student_profile.id

        response = client.put(
            f"/api/leaves/{leave['id']}",
            json={'status': 'Approved', 'review_notes': 'Enjoy'},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()['status'] == 'Approved'
        assert response.json()['reviewed_by'] == admin_user.id
        assert response.json()['reviewed_at'] is not None

    def test_students_cannot_review(self, client, student_headers, student_profile):
        leave = client.post('/api/leaves', json=LEAVE, headers=student_headers).json()

        response = client.put(f"/api/leaves/{leave['id']}", json={'status': 'Approved'}, headers=student_headers)

        assert response.status_code == 403

    def test_end_before_start(self, client, student_headers, student_profile):
        response = client.post(
            '/api/leaves',
            json={**LEAVE, 'end_date': '2026-01-30'},
            headers=student_headers,
        )

        assert response.status_code == 422

    def test_admin_files_by_hostel_no(self, client, admin_headers, student_profile):
        response = client.post('/api/leaves', json=LEAVE, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()['student']['student_id'] == 'STU001'

    def test_list_for_student(self, client, student_headers, student_profile):
        client.post('/api/leaves', json=LEAVE, headers=student_headers)

        response = client.get('/api/leaves/student/STU001', headers=student_headers)

        assert len(response.json()) == 1

    def test_delete(self, client, student_headers, student_profile):
        leave = client.post('/api/leaves', json=LEAVE, headers=student_headers).json()

        response = client.delete(f"/api/leaves/{leave['id']}", headers=student_headers)

        assert response.status_code == 200
        assert client.get(f"/api/leaves/{leave['id']}", headers=student_headers).status_code == 404


class TestComplaints:

    def test_submit_and_resolve(self, client, student_headers, admin_headers, admin_user, student_profile):
        response = client.post(
            '/api/complaints',
            json={'title': 'No hot water', 'category': 'room-maintenance', 'description': 'Since Monday'},
            headers=student_headers,
        )
        assert response.status_code == 201
        complaint = response.json()
        assert complaint['status'] == 'pending'
        assert complaint['resolved_at'] is None

        response = client.put(
            f"/api/complaints/{complaint['id']}",
            json={'status': 'resolved', 'resolution_message': 'Geyser replaced'},
            headers=admin_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'resolved'
        assert body['resolved_by'] == admin_user.id
        assert body['resolved_at'] is not None

    def test_unknown_category(self, client, student_headers, student_profile):
        response = client.post(
            '/api/complaints',
            json={'title': 'x', 'category': 'noise', 'description': 'y'},
            headers=student_headers,
        )

        assert response.status_code == 422

    def test_login_without_profile(self, client, admin_headers):
        response = client.post(
            '/api/complaints',
            json={'title': 'x', 'category': 'other', 'description': 'y'},
            headers=admin_headers,
        )

        assert response.status_code == 404


class TestMaintenance:

    def test_raise_and_resolve(self, client, student_headers, admin_headers, student_profile):
        response = client.post(
            '/api/maintenance',
            json={'room': 101, 'problem_type': 'plumbing', 'title': 'Leak', 'description': 'Tap leaking'},
            headers=student_headers,
        )
        assert response.status_code == 201
        request = response.json()
        assert request['status'] == 'open'

        response = client.put(
            f"/api/maintenance/{request['id']}",
            json={'status': 'in-progress'},
            headers=admin_headers,
        )
        assert response.json()['status'] == 'in-progress'
        assert response.json()['resolved_at'] is None

        response = client.put(
            f"/api/maintenance/{request['id']}",
            json={'status': 'resolved', 'resolution_notes': 'Washer replaced'},
            headers=admin_headers,
        )
        assert response.json()['status'] == 'resolved'
        assert response.json()['resolved_at'] is not None

        listed = client.get('/api/maintenance/student/STU001', headers=student_headers).json()
        assert [r['title'] for r in listed] == ['Leak']


class TestFees:

    def test_create_and_pay(self, client, admin_headers, student_headers, student_profile):
        response = client.post(
            '/api/fees',
            json={'student_id': student_profile.id, 'amount': '5000.00', 'due_date': '2026-03-31'},
            headers=admin_headers,
        )
        assert response.status_code == 201
        fee = response.json()
        assert Decimal(str(fee['amount'])) == Decimal('5000')
        assert fee['status'] == 'pending'

        response = client.put(
            f"/api/fees/{fee['id']}",
            json={'status': 'paid', 'paid_date': '2026-03-01', 'payment_method': 'upi'},
            headers=admin_headers,
        )
        assert response.json()['status'] == 'paid'
        assert response.json()['paid_date'] == '2026-03-01'

        listed = client.get('/api/fees/student/STU001', headers=student_headers).json()
        assert [f['id'] for f in listed] == [fee['id']]

    def test_negative_amount(self, client, admin_headers, student_profile):
        response = client.post(
            '/api/fees',
            json={'student_id': student_profile.id, 'amount': '-1', 'due_date': '2026-03-31'},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_unknown_student(self, client, admin_headers):
        response = client.post(
            '/api/fees',
            json={'student_id': 'missing', 'amount': '10', 'due_date': '2026-03-31'},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_students_cannot_charge(self, client, student_headers, student_profile):
        response = client.post(
            '/api/fees',
            json={'student_id': student_profile.id, 'amount': '10', 'due_date': '2026-03-31'},
            headers=student_headers,
        )

        assert response.status_code == 403


class TestMessMenu:

    @pytest.fixture
    def monday(self, client, admin_headers):
        response = client.post(
            '/api/mess-menu',
            json={'day': 'Monday', 'breakfast': 'Poha', 'lunch': 'Dal rice', 'dinner': 'Roti sabzi'},
            headers=admin_headers,
        )
        assert response.status_code == 201
        return response.json()

    def test_upsert_replaces_day(self, client, admin_headers, monday):
        response = client.post(
            '/api/mess-menu',
            json={'day': 'monday', 'breakfast': 'Idli', 'lunch': 'Dal rice', 'dinner': 'Khichdi'},
            headers=admin_headers,
        )

        assert response.json()['id'] == monday['id']
        week = client.get('/api/mess-menu', headers=admin_headers).json()
        assert [(m['day'], m['breakfast']) for m in week] == [('monday', 'Idli')]

    def test_week_in_calendar_order(self, client, admin_headers, monday):
        client.post(
            '/api/mess-menu',
            json={'day': 'sunday', 'breakfast': 'Puri', 'lunch': 'Biryani', 'dinner': 'Soup'},
            headers=admin_headers,
        )
        client.post(
            '/api/mess-menu',
            json={'day': 'wednesday', 'breakfast': 'Upma', 'lunch': 'Rajma', 'dinner': 'Paneer'},
            headers=admin_headers,
        )

        week = client.get('/api/mess-menu', headers=admin_headers).json()

        assert [m['day'] for m in week] == ['monday', 'wednesday', 'sunday']

    def test_read_day_case_insensitive(self, client, student_headers, monday):
        response = client.get('/api/mess-menu/MONDAY', headers=student_headers)

        assert response.status_code == 200
        assert response.json()['lunch'] == 'Dal rice'

    def test_missing_day(self, client, student_headers):
        response = client.get('/api/mess-menu/friday', headers=student_headers)

        assert response.status_code == 404
        assert response.json()['error']['message'] == 'Menu not found for this day'

    def test_update_and_delete(self, client, admin_headers, monday):
        response = client.put('/api/mess-menu/monday', json={'dinner': 'Pulao'}, headers=admin_headers)
        assert response.json()['dinner'] == 'Pulao'
        assert response.json()['breakfast'] == 'Poha'

        assert client.delete('/api/mess-menu/monday', headers=admin_headers).status_code == 200
        assert client.get('/api/mess-menu/monday', headers=admin_headers).status_code == 404

    def test_students_cannot_edit(self, client, student_headers):
        response = client.post(
            '/api/mess-menu',
            json={'day': 'monday', 'breakfast': 'a', 'lunch': 'b', 'dinner': 'c'},
            headers=student_headers,
        )

        assert response.status_code == 403
