"""
Authentication service: login, registration and token issuance.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostelmanix.core.exceptions import DatabaseError
from hostelmanix.core.security import AuthContext, get_jwt_manager, get_password_hasher
from hostelmanix.core.security.jwt_handler import JWTManager
from hostelmanix.core.security.password_hasher import PasswordHasher
from hostelmanix.models.enums import UserRole
from hostelmanix.models.user import User
from hostelmanix.repositories.student_repository import StudentRepository
from hostelmanix.repositories.user_repository import UserRepository
from hostelmanix.schemas.auth import LoginRequest, LoginUser, RegisterRequest, TokenResponse
from hostelmanix.schemas.student import StudentResponse
from hostelmanix.services.base import BaseService, ServiceResult


class AuthenticationService(BaseService[User, UserRepository]):
    """
    Authenticates admins and students.

    The login identifier matches either a username or the student id a
    login is linked to, always within the requested role.
    """

    resource_name = "User"

    def __init__(
        self,
        db_session: Session,
        password_hasher: Optional[PasswordHasher] = None,
        jwt_manager: Optional[JWTManager] = None,
    ):
        super().__init__(UserRepository(db_session), db_session)
        self.student_repository = StudentRepository(db_session)
        self.password_hasher = password_hasher or get_password_hasher()
        self.jwt = jwt_manager or get_jwt_manager()

    # -------------------------------------------------------------------------
    # Login
    # -------------------------------------------------------------------------

    def login(self, request: LoginRequest) -> ServiceResult[TokenResponse]:
        if not request.id or not request.password or not request.role:
            return ServiceResult.validation_failure("All fields are required")

        role_name = request.role.strip().lower()
        try:
            role = UserRole(role_name)
        except ValueError:
            return self._invalid_credentials(request.role)

        user = self.repository.find_by_login_and_role(request.id, role)
        if not user or not self.password_hasher.verify(request.password, user.password_hash):
            self._logger.warning(f"Failed {role.value} login for '{request.id}'")
            return self._invalid_credentials(request.role)

        context = AuthContext(user_id=user.id, role=user.role, student_id=user.student_id)
        token = self.jwt.create_access_token(user.id, additional_claims=context.to_claims())

        student_info = None
        if user.role == UserRole.STUDENT and user.student_id:
            student = self.student_repository.find_by_student_id(user.student_id)
            if student:
                student_info = StudentResponse.model_validate(student)

        self._logger.info(f"User {user.username} ({user.id}) logged in as {user.role.value}")
        return ServiceResult.success(
            TokenResponse(
                token=token,
                user=LoginUser(
                    id=user.id,
                    username=user.username,
                    role=user.role,
                    student_id=user.student_id,
                    display_name=user.display_name,
                    student_info=student_info,
                ),
            ),
            message="Login successful",
        )

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def registration_open(self) -> bool:
        """Anyone may register while no login exists yet."""
        return self.repository.count() == 0

    def register(self, request: RegisterRequest) -> ServiceResult[User]:
        if self.repository.find_by_username(request.username):
            return ServiceResult.conflict("User already exists", details={"username": request.username})
        if request.student_id and self.repository.find_by_student_id(request.student_id):
            return ServiceResult.conflict("User already exists", details={"student_id": request.student_id})

        user = User(
            username=request.username,
            password_hash=self.password_hasher.hash(request.password),
            role=request.role,
            student_id=request.student_id or None,
        )
        try:
            self.repository.create(user)
        except DatabaseError as e:
            return self._handle_exception(e, "register user", request.username)

        self._logger.info(f"Registered {user.role.value} user {user.username} ({user.id})")
        return ServiceResult.success(user, message="User created successfully")

    @staticmethod
    def _invalid_credentials(role: str) -> ServiceResult:
        return ServiceResult.unauthorized(f"Incorrect {role} ID or Password")
