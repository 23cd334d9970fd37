from worksync.application.commands.users.create_user_command import CreateUserCommand
from worksync.application.commands.users.update_user_command import UpdateUserCommand

__all__ = ["CreateUserCommand", "UpdateUserCommand"]
