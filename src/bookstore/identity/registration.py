"""User registration and account administration: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.identity.permissions import UserRole
from bookstore.identity.user import User
from bookstore.shared.soft_delete import find_live, get_live
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

USER_NOT_FOUND = "Không tìm thấy người dùng"


@bookstore.command(part_of="User")
class RegisterUser:
    """Create a user account. Credentials are handled by the session layer."""

    email: String(required=True, max_length=254)
    name: String(required=True, max_length=100)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)


@bookstore.command(part_of="User")
class ChangeUserRole:
    user_id: Identifier(required=True)
    role: String(required=True, choices=UserRole)


@bookstore.command(part_of="User")
class DeleteUser:
    user_id: Identifier(required=True)


@bookstore.command_handler(part_of=User)
class ManageUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        email = command.email.strip().lower()
        if any(str(u.email.address).lower() == email for u in find_live(User)):
            raise ValidationError({"email": ["Email đã được sử dụng"]})

        user = User.register(email=email, name=command.name, role=command.role)
        current_domain.repository_for(User).add(user)
        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return str(user.id)

    @handle(ChangeUserRole)
    def change_user_role(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)
        user.change_role(command.role)
        repo.add(user)
        logger.info("user_role_changed", user_id=str(user.id), role=command.role)

    @handle(DeleteUser)
    def delete_user(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)
        user.delete()
        repo.add(user)
        logger.info("user_deleted", user_id=str(user.id))
