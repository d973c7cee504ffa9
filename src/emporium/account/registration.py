"""Account sign-up: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from emporium.account.account import Account, Role
from emporium.auth.passwords import hash_password
from emporium.domain import emporium


@emporium.command(part_of="Account")
class SignUp:
    """Register a new account. `role` defaults to customer."""

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, min_length=6, max_length=128)
    phone_number: String(required=True, max_length=20)
    role: String(choices=Role)


@emporium.command_handler(part_of=Account)
class SignUpHandler:
    @handle(SignUp)
    def sign_up(self, command):
        repo = current_domain.repository_for(Account)

        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already exists"]})
        if repo.find_by_phone_number(command.phone_number) is not None:
            raise ValidationError({"phone_number": ["Phone number already in use"]})

        account = Account.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password_hash=hash_password(command.password),
            phone_number=command.phone_number,
            role=command.role,
        )
        repo.add(account)
        return str(account.id)
