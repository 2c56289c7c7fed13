"""
HostelManix - Test Configuration and Fixtures
"""
import os
from typing import Callable, Dict, Generator, Optional

# Configure the application before it is imported
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['ENVIRONMENT'] = 'testing'
os.environ['LOG_TO_FILE'] = 'false'
os.environ['PASSWORD_BCRYPT_ROUNDS'] = '4'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hostelmanix.api.deps import get_db
from hostelmanix.core.security import AuthContext, get_jwt_manager, get_password_hasher
from hostelmanix.main import app
from hostelmanix.models import Base, Room, Student, User
from hostelmanix.models.enums import RoomStatus, UserRole

test_engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(
    bind=test_engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

ADMIN_PASSWORD = 'admin123'
STUDENT_PASSWORD = 'student123'


@pytest.fixture(scope='function')
def db_session() -> Generator[Session, None, None]:
    """Fresh schema and session for each test"""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client sharing the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    def _make_user(
        username: str,
        password: str = STUDENT_PASSWORD,
        role: UserRole = UserRole.STUDENT,
        student_id: Optional[str] = None,
    ) -> User:
        user = User(
            username=username,
            password_hash=get_password_hasher().hash(password),
            role=role,
            student_id=student_id,
        )
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user


@pytest.fixture
def make_student(db_session: Session, make_user) -> Callable[..., Student]:
    """Student profile with its own login; room membership is left alone"""
    def _make_student(student_id: str, name: str = 'Test Student', room_id: Optional[str] = None) -> Student:
        user = make_user(f'user-{student_id.lower()}', student_id=student_id)
        student = Student(student_id=student_id, name=name, user_id=user.id, room_id=room_id)
        db_session.add(student)
        db_session.commit()
        return student
    return _make_student


@pytest.fixture
def make_room(db_session: Session) -> Callable[..., Room]:
    def _make_room(
        room_number: int,
        capacity: int = 2,
        status: RoomStatus = RoomStatus.VACANT,
        student_ids: Optional[list] = None,
    ) -> Room:
        student_ids = list(student_ids or [])
        room = Room(
            room_number=room_number,
            block='A',
            floor=room_number // 100,
            capacity=capacity,
            occupants=len(student_ids),
            status=status,
            student_ids=student_ids,
        )
        db_session.add(room)
        db_session.commit()
        return room
    return _make_room


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user('admin', password=ADMIN_PASSWORD, role=UserRole.ADMIN)


@pytest.fixture
def student_user(db_session: Session, make_user) -> User:
    """The STU001 login together with its profile"""
    user = make_user('student', student_id='STU001')
    db_session.add(
        Student(
            student_id='STU001',
            name='John Doe',
            email='student@hostel.com',
            phone='1234567890',
            user_id=user.id,
        )
    )
    db_session.commit()
    return user


@pytest.fixture
def student_profile(db_session: Session, student_user: User) -> Student:
    return db_session.query(Student).filter_by(user_id=student_user.id).one()


def auth_headers_for(user: User) -> Dict[str, str]:
    context = AuthContext(user_id=user.id, role=user.role, student_id=user.student_id)
    token = get_jwt_manager().create_access_token(user.id, additional_claims=context.to_claims())
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_headers(admin_user: User) -> Dict[str, str]:
    return auth_headers_for(admin_user)


@pytest.fixture
def student_headers(student_user: User) -> Dict[str, str]:
    return auth_headers_for(student_user)


@pytest.fixture
def headers_for() -> Callable[[User], Dict[str, str]]:
    return auth_headers_for
