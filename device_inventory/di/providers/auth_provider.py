from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

AUTH_USE_CASES = (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories backed by the user repository.
        """
        for use_case_class in AUTH_USE_CASES:
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    user_repository=container.get(UserRepository),
                )
            )
