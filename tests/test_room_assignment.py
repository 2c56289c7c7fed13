"""
Room assignment coordination: membership, derived fields and drift repair.
"""
import pytest

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.enums import RoomStatus
from hostelmanix.repositories.room_repository import RoomRepository
from hostelmanix.schemas.student import StudentCreate, StudentUpdate
from hostelmanix.services.base.service_result import ErrorCode, ErrorSeverity
from hostelmanix.services.room import RoomAssignmentService
from hostelmanix.services.student import ROOM_SYNC_WARNING, StudentService


@pytest.fixture
def service(db_session):
    return RoomAssignmentService(db_session)


@pytest.fixture
def students(db_session, make_user):
    """StudentService plus a helper that creates a profile through it"""
    student_service = StudentService(db_session)

    def create(student_id, room_id=None):
        user = make_user(f'login-{student_id.lower()}', student_id=student_id)
        result = student_service.create_student(
            StudentCreate(student_id=student_id, name=f'Student {student_id}', user_id=user.id, room_id=room_id)
        )
        assert result.is_success, result.error
        return result

    student_service.create = create
    return student_service


def fail_updates_for(monkeypatch, *room_ids):
    """Make room updates raise for the given rooms only"""
    original = RoomRepository.update

    def update(self, entity, data, commit=True):
        if entity.id in room_ids:
            raise DatabaseError("simulated write failure", table="rooms")
        return original(self, entity, data, commit)

    monkeypatch.setattr(RoomRepository, 'update', update)


class TestAttach:

    def test_create_with_room_lists_student(self, db_session, make_room, students):
        room = make_room(101)

        student = students.create('STU100', room_id=room.id).data
        db_session.refresh(room)

        assert room.student_ids == [student.id]
        assert room.occupants == 1
        assert room.status == RoomStatus.OCCUPIED

    def test_create_without_room_touches_nothing(self, db_session, make_room, students):
        room = make_room(101)

        result = students.create('STU100')
        db_session.refresh(room)

        assert result.data.room_id is None
        assert room.student_ids == []
        assert room.status == RoomStatus.VACANT
        assert ROOM_SYNC_WARNING not in result.metadata

    def test_attach_is_idempotent(self, db_session, make_room, students, service):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data

        result = service.assign_on_create(student.id, room.id)
        db_session.refresh(room)

        assert result.is_success
        assert result.data.steps[0].skipped_reason == 'already listed'
        assert room.student_ids == [student.id]
        assert room.occupants == 1

    def test_attach_preserves_order_and_ignores_capacity(self, db_session, make_room, students):
        room = make_room(101, capacity=1)

        first = students.create('STU100', room_id=room.id).data
        second = students.create('STU101', room_id=room.id).data
        db_session.refresh(room)

        assert room.student_ids == [first.id, second.id]
        assert room.occupants == 2

    def test_attach_overrides_maintenance(self, db_session, make_room, students):
        room = make_room(101, status=RoomStatus.MAINTENANCE)

        students.create('STU100', room_id=room.id)
        db_session.refresh(room)

        assert room.status == RoomStatus.OCCUPIED

    def test_attach_to_missing_room_keeps_pointer(self, students, service):
        result = students.create('STU100', room_id='no-such-room')

        assert result.is_success
        assert result.data.room_id == 'no-such-room'
        assert ROOM_SYNC_WARNING not in result.metadata

        report = service.find_drift().data
        assert not report.consistent
        assert [s.student_id for s in report.dangling_students] == ['STU100']


class TestReassign:

    def test_move_between_rooms(self, db_session, make_room, students):
        old_room = make_room(101)
        new_room = make_room(102)
        student = students.create('STU100', room_id=old_room.id).data

        result = students.update_student(student.id, StudentUpdate(room_id=new_room.id))
        db_session.refresh(old_room)
        db_session.refresh(new_room)

        assert result.is_success
        assert result.data.room_id == new_room.id
        assert old_room.student_ids == []
        assert old_room.occupants == 0
        assert old_room.status == RoomStatus.VACANT
        assert new_room.student_ids == [student.id]
        assert new_room.status == RoomStatus.OCCUPIED

    def test_detach_keeps_remaining_members(self, db_session, make_room, students):
        room = make_room(101)
        first = students.create('STU100', room_id=room.id).data
        second = students.create('STU101', room_id=room.id).data

        students.update_student(first.id, StudentUpdate(room_id=None))
        db_session.refresh(room)

        assert room.student_ids == [second.id]
        assert room.occupants == 1
        assert room.status == RoomStatus.OCCUPIED

    def test_detach_last_member_vacates_maintenance_room(self, db_session, make_room, students):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data
        room.status = RoomStatus.MAINTENANCE
        db_session.commit()

        students.update_student(student.id, StudentUpdate(room_id=None))
        db_session.refresh(room)

        assert room.status == RoomStatus.VACANT

    def test_unchanged_room_is_a_no_op(self, make_room, students, service):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data

        result = service.reassign_on_update(student.id, room.id, room.id)

        assert result.is_success
        assert result.data.steps == []

    def test_omitted_room_id_keeps_assignment(self, db_session, make_room, students):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data

        result = students.update_student(student.id, StudentUpdate(name='Renamed'))
        db_session.refresh(room)

        assert result.data.name == 'Renamed'
        assert result.data.room_id == room.id
        assert room.student_ids == [student.id]

    def test_blank_room_id_unassigns(self, db_session, make_room, students, service):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data

        result = students.update_student(student.id, StudentUpdate(room_id=''))
        db_session.refresh(room)

        assert result.data.room_id is None
        assert room.student_ids == []
        assert service.find_drift().data.consistent


class TestDelete:

    def test_delete_detaches_from_room(self, db_session, make_room, students):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data

        result = students.delete_student(student.id)
        db_session.refresh(room)

        assert result.is_success
        assert room.student_ids == []
        assert room.occupants == 0
        assert room.status == RoomStatus.VACANT
        assert students.get_by_student_id('STU100').is_success is False

    def test_failed_detach_on_delete_still_deletes(self, db_session, monkeypatch, make_room, students, service):
        room = make_room(101)
        student = students.create('STU100', room_id=room.id).data
        fail_updates_for(monkeypatch, room.id)

        result = students.delete_student(student.id)
        monkeypatch.undo()
        db_session.refresh(room)

        assert result.is_success
        assert students.get_by_student_id('STU100').is_success is False
        failed = result.metadata[ROOM_SYNC_WARNING]['failed_steps']
        assert [step['action'] for step in failed] == ['detach']
        assert failed[0]['room_id'] == room.id
        assert room.student_ids == [student.id]

        report = service.find_drift().data
        assert not report.consistent
        assert [drift.room_id for drift in report.drifted_rooms] == [room.id]

    def test_delete_without_room_leaves_rooms_alone(self, db_session, make_room, students):
        empty = make_room(101)
        full = make_room(102)
        resident = students.create('STU100', room_id=full.id).data
        roomless = students.create('STU200').data

        result = students.delete_student(roomless.id)
        db_session.refresh(empty)
        db_session.refresh(full)

        assert result.is_success
        assert ROOM_SYNC_WARNING not in result.metadata
        assert (empty.student_ids, empty.occupants, empty.status) == ([], 0, RoomStatus.VACANT)
        assert (full.student_ids, full.occupants, full.status) == ([resident.id], 1, RoomStatus.OCCUPIED)


class TestSyncFailures:

    def test_failed_attach_keeps_student_and_warns(self, db_session, monkeypatch, make_room, students, service):
        room = make_room(101)
        fail_updates_for(monkeypatch, room.id)

        result = students.create('STU100', room_id=room.id)
        monkeypatch.undo()

        assert result.is_success
        warning = result.metadata[ROOM_SYNC_WARNING]
        assert warning['failed_steps'][0]['action'] == 'attach'
        assert warning['failed_steps'][0]['room_id'] == room.id

        stored = students.get_by_student_id('STU100').data
        assert stored.room_id == room.id
        db_session.refresh(room)
        assert room.student_ids == []

        report = service.find_drift().data
        assert not report.consistent
        assert report.drifted_rooms[0].expected_student_ids == [stored.id]

    def test_failed_detach_does_not_block_attach(self, db_session, monkeypatch, make_room, students):
        old_room = make_room(101)
        new_room = make_room(102)
        student = students.create('STU100', room_id=old_room.id).data
        fail_updates_for(monkeypatch, old_room.id)

        result = students.update_student(student.id, StudentUpdate(room_id=new_room.id))
        monkeypatch.undo()
        db_session.refresh(old_room)
        db_session.refresh(new_room)

        assert result.is_success
        assert result.data.room_id == new_room.id
        failed = result.metadata[ROOM_SYNC_WARNING]['failed_steps']
        assert [step['action'] for step in failed] == ['detach']
        assert old_room.student_ids == [student.id]
        assert new_room.student_ids == [student.id]

    def test_sync_result_is_a_warning(self, monkeypatch, make_room, students, service):
        room = make_room(101)
        student = students.create('STU100').data
        fail_updates_for(monkeypatch, room.id)

        result = service.assign_on_create(student.id, room.id)

        assert not result.is_success
        assert result.error.severity == ErrorSeverity.WARNING
        assert result.error.code == ErrorCode.OPERATION_FAILED


class TestDriftAndReconcile:

    def test_consistent_database(self, make_room, students, service):
        room = make_room(101)
        students.create('STU100', room_id=room.id)

        report = service.find_drift().data

        assert report.consistent
        assert report.rooms_checked == 1
        assert report.drifted_rooms == []

    def test_reconcile_rebuilds_membership(self, db_session, make_room, make_student, service):
        room = make_room(101, student_ids=['ghost'])
        kept = make_student('STU100', room_id=room.id)
        room.student_ids = ['ghost', kept.id]
        room.occupants = 5
        db_session.commit()
        added = make_student('STU101', room_id=room.id)

        result = service.reconcile()
        db_session.refresh(room)

        assert result.is_success
        assert result.data.repaired_room_ids == [room.id]
        assert room.student_ids == [kept.id, added.id]
        assert room.occupants == 2
        assert room.status == RoomStatus.OCCUPIED
        assert service.find_drift().data.consistent

    def test_reconcile_leaves_maintenance_status(self, db_session, make_room, make_student, service):
        room = make_room(101, status=RoomStatus.MAINTENANCE)
        make_student('STU100', room_id=room.id)

        service.reconcile()
        db_session.refresh(room)

        assert room.occupants == 1
        assert room.status == RoomStatus.MAINTENANCE

    def test_reconcile_empties_room_without_pointers(self, db_session, make_room, service):
        room = make_room(101, status=RoomStatus.OCCUPIED, student_ids=['gone'])

        service.reconcile()
        db_session.refresh(room)

        assert room.student_ids == []
        assert room.occupants == 0
        assert room.status == RoomStatus.VACANT

    def test_reconcile_leaves_dangling_pointers(self, make_student, service):
        student = make_student('STU100', room_id='missing-room')

        result = service.reconcile()

        assert result.data.rooms_repaired == 0
        assert student.room_id == 'missing-room'
        assert len(service.find_drift().data.dangling_students) == 1
