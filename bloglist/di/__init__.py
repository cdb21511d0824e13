from .base_container import BaseContainer
from .container import DIContainer, register_use_cases

__all__ = [
    "BaseContainer",
    "DIContainer",
    "register_use_cases",
]
