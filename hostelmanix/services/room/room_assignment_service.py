"""
Room assignment coordination.

A student's ``room_id`` is the source of truth for where they live. Each
room keeps a back-reference list of student ids plus two fields derived
from it (``occupants`` and ``status``). This service keeps the room side
in step whenever a student is created, moved or deleted.

Room updates are best effort: they run after the student write has been
committed and are never allowed to undo it. A failed room update is
logged together with the inconsistency it leaves behind and reported to
the caller as a warning. ``find_drift`` and ``reconcile`` detect and
repair whatever such failures (or concurrent writers) leave behind.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.models.enums import RoomStatus
from hostelmanix.models.room import Room
from hostelmanix.repositories.room_repository import RoomRepository
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.schemas.room import ConsistencyReport, ReconcileReport, RoomDrift
from hostelmanix.schemas.summary import StudentBrief
from hostelmanix.services.base.base_service import BaseService
from hostelmanix.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)


@dataclass
class RoomSyncStep:
    """Outcome of one attach or detach against one room."""

    action: str
    room_id: str
    student_id: str
    applied: bool = False
    skipped_reason: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "action": self.action,
            "room_id": self.room_id,
            "student_id": self.student_id,
            "error": self.error,
        }


@dataclass
class RoomSyncReport:
    steps: List[RoomSyncStep] = field(default_factory=list)

    @property
    def failed_steps(self) -> List[RoomSyncStep]:
        return [step for step in self.steps if step.failed]


class RoomAssignmentService(BaseService[Room, RoomRepository]):
    """
    Keeps ``Room.student_ids``, ``Room.occupants`` and ``Room.status``
    consistent with student room pointers.

    Derived fields are always recomputed from the membership list, never
    incremented. Capacity is advisory and never enforced. Attaching a
    student marks the room occupied even if an admin had put it under
    maintenance.
    """

    resource_name = "Room"

    def __init__(self, db_session: Session):
        super().__init__(RoomRepository(db_session), db_session)
        self.student_repository = StudentRepository(db_session)

    # -------------------------------------------------------------------------
    # Student lifecycle hooks
    # -------------------------------------------------------------------------

    def assign_on_create(self, student_pk: str, room_id: Optional[str]) -> ServiceResult[RoomSyncReport]:
        """Attach a freshly created student to the room they were created with."""
        report = RoomSyncReport()
        if room_id:
            report.steps.append(self._attach(student_pk, room_id))
        return self._to_result(report)

    def reassign_on_update(
        self,
        student_pk: str,
        old_room_id: Optional[str],
        new_room_id: Optional[str],
    ) -> ServiceResult[RoomSyncReport]:
        """
        Move a student's membership from ``old_room_id`` to ``new_room_id``.

        Detach and attach are independent: a failure in one does not stop
        the other. Nothing is read or written when the room is unchanged.
        """
        report = RoomSyncReport()
        if old_room_id == new_room_id:
            return self._to_result(report)

        if old_room_id:
            report.steps.append(self._detach(student_pk, old_room_id))
        if new_room_id:
            report.steps.append(self._attach(student_pk, new_room_id))
        return self._to_result(report)

    def detach_on_delete(self, student_pk: str, room_id: Optional[str]) -> ServiceResult[RoomSyncReport]:
        """Remove a student that is about to be deleted from their room."""
        report = RoomSyncReport()
        if room_id:
            report.steps.append(self._detach(student_pk, room_id))
        return self._to_result(report)

    # -------------------------------------------------------------------------
    # Consistency check and repair
    # -------------------------------------------------------------------------

    def find_drift(self) -> ServiceResult[ConsistencyReport]:
        """Compare every room's stored membership against student pointers."""
        try:
            rooms = self.repository.list_all()
            assigned = self.student_repository.list_assigned()
        except DatabaseError as e:
            return self._handle_exception(e, "check room consistency")

        expected = self._expected_members(rooms, assigned)
        room_ids = {room.id for room in rooms}

        drifted = [
            self._describe_drift(room, expected.get(room.id, []))
            for room in rooms
            if self._has_drift(room, expected.get(room.id, []))
        ]
        dangling = [
            StudentBrief.model_validate(student)
            for student in assigned
            if student.room_id not in room_ids
        ]

        report = ConsistencyReport(
            consistent=not drifted and not dangling,
            rooms_checked=len(rooms),
            drifted_rooms=drifted,
            dangling_students=dangling,
        )
        if not report.consistent:
            self._logger.warning(
                f"Room consistency check found {len(drifted)} drifted room(s) "
                f"and {len(dangling)} dangling student pointer(s)"
            )
        return ServiceResult.success(report)

    def reconcile(self) -> ServiceResult[ReconcileReport]:
        """
        Rebuild each drifted room's membership from student pointers.

        Students already listed keep their position; missing ones are
        appended. Rooms under maintenance keep that status. Student
        pointers to missing rooms are left untouched.
        """
        try:
            rooms = self.repository.list_all()
            assigned = self.student_repository.list_assigned()
            expected = self._expected_members(rooms, assigned)

            repaired: List[str] = []
            for room in rooms:
                members = expected.get(room.id, [])
                if not self._has_drift(room, members):
                    continue
                before = list(room.student_ids or [])
                self.repository.update(
                    room,
                    {
                        "student_ids": members,
                        "occupants": len(members),
                        "status": self._expected_status(room, members),
                    },
                )
                repaired.append(room.id)
                self._logger.info(
                    f"Reconciled room {room.room_number} ({room.id}): {before} -> {members}"
                )
        except DatabaseError as e:
            return self._handle_exception(e, "reconcile rooms")

        return ServiceResult.success(
            ReconcileReport(
                rooms_checked=len(rooms),
                rooms_repaired=len(repaired),
                repaired_room_ids=repaired,
            ),
            message=f"Repaired {len(repaired)} room(s)",
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _attach(self, student_pk: str, room_id: str) -> RoomSyncStep:
        step = RoomSyncStep(action="attach", room_id=room_id, student_id=student_pk)
        try:
            room = self.repository.find_by_id(room_id)
            if room is None:
                step.skipped_reason = "room not found"
                self._logger.info(f"Room {room_id} not found; student {student_pk} left unattached")
                return step

            current = list(room.student_ids or [])
            if student_pk in current:
                step.skipped_reason = "already listed"
                return step

            members = current + [student_pk]
            changes = {"student_ids": members, "occupants": len(members)}
            if members:
                changes["status"] = RoomStatus.OCCUPIED
            self.repository.update(room, changes)
            step.applied = True
            self._logger.info(
                f"Attached student {student_pk} to room {room.room_number} "
                f"({len(members)}/{room.capacity})"
            )
        except DatabaseError as e:
            step.error = e.message
            self._logger.error(
                f"Room sync failed: student {student_pk} points at room {room_id} "
                f"but the room does not list it: {e.message}",
                extra={"room_id": room_id, "student_id": student_pk, "action": "attach"},
            )
        return step

    def _detach(self, student_pk: str, room_id: str) -> RoomSyncStep:
        step = RoomSyncStep(action="detach", room_id=room_id, student_id=student_pk)
        try:
            room = self.repository.find_by_id(room_id)
            if room is None:
                step.skipped_reason = "room not found"
                self._logger.info(f"Room {room_id} not found; nothing to detach student {student_pk} from")
                return step

            members = [sid for sid in (room.student_ids or []) if sid != student_pk]
            changes = {"student_ids": members, "occupants": len(members)}
            if not members:
                changes["status"] = RoomStatus.VACANT
            self.repository.update(room, changes)
            step.applied = True
            self._logger.info(
                f"Detached student {student_pk} from room {room.room_number} "
                f"({len(members)}/{room.capacity})"
            )
        except DatabaseError as e:
            step.error = e.message
            self._logger.error(
                f"Room sync failed: room {room_id} may still list student {student_pk} "
                f"which no longer points at it: {e.message}",
                extra={"room_id": room_id, "student_id": student_pk, "action": "detach"},
            )
        return step

    def _to_result(self, report: RoomSyncReport) -> ServiceResult[RoomSyncReport]:
        failed = report.failed_steps
        if not failed:
            return ServiceResult.success(report)
        return ServiceResult(
            is_success=False,
            data=report,
            error=ServiceError(
                code=ErrorCode.OPERATION_FAILED,
                message="Room assignment could not be fully synchronised",
                severity=ErrorSeverity.WARNING,
                details={"failed_steps": [step.to_dict() for step in failed]},
            ),
            message="Room assignment could not be fully synchronised",
            metadata={},
        )

    @staticmethod
    def _expected_members(rooms, assigned) -> Dict[str, List[str]]:
        """
        Membership each room should have, keyed by room id.

        Students already in a room's stored list keep their order; others
        follow in creation order.
        """
        pointing: Dict[str, List[str]] = {}
        for student in assigned:
            pointing.setdefault(student.room_id, []).append(student.id)

        expected: Dict[str, List[str]] = {}
        for room in rooms:
            wanted = pointing.get(room.id, [])
            wanted_set = set(wanted)
            kept: List[str] = []
            for sid in room.student_ids or []:
                if sid in wanted_set and sid not in kept:
                    kept.append(sid)
            expected[room.id] = kept + [sid for sid in wanted if sid not in kept]
        return expected

    @staticmethod
    def _expected_status(room: Room, members: List[str]) -> RoomStatus:
        if room.status == RoomStatus.MAINTENANCE:
            return RoomStatus.MAINTENANCE
        return RoomStatus.OCCUPIED if members else RoomStatus.VACANT

    def _has_drift(self, room: Room, members: List[str]) -> bool:
        stored = list(room.student_ids or [])
        return (
            stored != members
            or room.occupants != len(stored)
            or room.status != self._expected_status(room, members)
        )

    def _describe_drift(self, room: Room, members: List[str]) -> RoomDrift:
        return RoomDrift(
            room_id=room.id,
            room_number=room.room_number,
            stored_student_ids=list(room.student_ids or []),
            expected_student_ids=members,
            stored_occupants=room.occupants,
            status=room.status,
            expected_status=self._expected_status(room, members),
        )
