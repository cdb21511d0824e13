# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at startup
    
    The container lives on app.state so tests can inject their own.
    """
    return request.app.state.container
