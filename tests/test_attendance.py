"""
Attendance marking: one record per student and day, latest status wins.
"""
import pytest

from hostelmanix.core.exceptions import DuplicateEntryError
from hostelmanix.models import AttendanceRecord
from hostelmanix.models.enums import AttendanceStatus
from hostelmanix.repositories.attendance_repository import AttendanceRepository


def mark(client, headers, status, day='2026-01-15', student_id='STU001'):
    return client.post(
        '/api/attendance',
        json={'student_id': student_id, 'date': day, 'status': status},
        headers=headers,
    )


class TestMark:

    def test_first_mark_creates(self, client, admin_headers, admin_user, student_profile):
        response = mark(client, admin_headers, 'present')

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'present'
        assert body['date'] == '2026-01-15'
        assert body['student_id'] == student_profile.id
        assert body['marked_by'] == admin_user.id
        assert body['student']['student_id'] == 'STU001'

    def test_second_mark_overwrites(self, client, admin_headers, student_profile):
        first = mark(client, admin_headers, 'present').json()

        response = mark(client, admin_headers, 'absent')

        assert response.status_code == 200
        assert response.json()['id'] == first['id']
        assert response.json()['status'] == 'absent'

        records = client.get('/api/attendance/student/STU001', headers=admin_headers).json()
        assert len(records) == 1
        assert records[0]['status'] == 'absent'

    def test_different_days_are_separate(self, client, admin_headers, student_profile):
        mark(client, admin_headers, 'present', day='2026-01-15')
        mark(client, admin_headers, 'late', day='2026-01-16')

        records = client.get('/api/attendance/student/STU001', headers=admin_headers).json()

        assert [r['date'] for r in records] == ['2026-01-16', '2026-01-15']

    def test_unknown_student(self, client, admin_headers):
        response = mark(client, admin_headers, 'present', student_id='NOPE')

        assert response.status_code == 404

    def test_invalid_status(self, client, admin_headers, student_profile):
        response = mark(client, admin_headers, 'sleeping')

        assert response.status_code == 422

    def test_storage_rejects_duplicate_day(self, db_session, student_profile):
        from datetime import date

        repository = AttendanceRepository(db_session)
        repository.create(
            AttendanceRecord(student_id=student_profile.id, date=date(2026, 1, 15), status=AttendanceStatus.PRESENT)
        )

        with pytest.raises(DuplicateEntryError):
            repository.create(
                AttendanceRecord(student_id=student_profile.id, date=date(2026, 1, 15), status=AttendanceStatus.ABSENT)
            )


class TestBulkAndQueries:

    def test_bulk_reports_per_student(self, client, admin_headers, student_profile, make_student):
        make_student('STU002')
        mark(client, admin_headers, 'absent', student_id='STU002')

        response = client.post(
            '/api/attendance/bulk',
            json={'student_ids': ['STU001', 'STU002', 'NOPE'], 'date': '2026-01-15', 'status': 'present'},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body['total'] == 3
        assert body['successful'] == 2
        assert body['failed'] == 1
        actions = {item['key']: item['action'] for item in body['results']}
        assert actions == {'STU001': 'created', 'STU002': 'updated', 'NOPE': None}

    def test_bulk_needs_students(self, client, admin_headers):
        response = client.post(
            '/api/attendance/bulk',
            json={'student_ids': [], 'date': '2026-01-15', 'status': 'present'},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_date_range_filter(self, client, admin_headers, student_profile):
        for day in ('2026-01-10', '2026-01-15', '2026-01-20'):
            mark(client, admin_headers, 'present', day=day)

        response = client.get(
            '/api/attendance',
            params={'student_id': 'STU001', 'start_date': '2026-01-12', 'end_date': '2026-01-20'},
            headers=admin_headers,
        )

        assert [r['date'] for r in response.json()] == ['2026-01-20', '2026-01-15']

    def test_stats(self, client, admin_headers, student_profile):
        mark(client, admin_headers, 'present', day='2026-01-10')
        mark(client, admin_headers, 'present', day='2026-01-11')
        mark(client, admin_headers, 'late', day='2026-01-12')

        response = client.get('/api/attendance/student/STU001/stats', headers=admin_headers)

        assert response.json() == {'total': 3, 'present': 2, 'absent': 0, 'late': 1, 'rate': 66.7}

    def test_update_and_delete(self, client, admin_headers, student_profile):
        record = mark(client, admin_headers, 'present').json()

        response = client.put(f"/api/attendance/{record['id']}", json={'status': 'late'}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()['status'] == 'late'

        response = client.delete(f"/api/attendance/{record['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert client.get('/api/attendance', headers=admin_headers).json() == []

    def test_deleting_student_removes_records(self, client, admin_headers, student_profile):
        mark(client, admin_headers, 'present')

        client.delete(f'/api/students/{student_profile.id}', headers=admin_headers)

        assert client.get('/api/attendance', headers=admin_headers).json() == []
