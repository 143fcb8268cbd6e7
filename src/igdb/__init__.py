"""Typed client for the IGDB video game database API."""

from .models import *  # noqa: F403
from .models import __all__ as _models_all
from .services import *  # noqa: F403
from .services import __all__ as _services_all

__version__ = "1.0.0"

__all__ = [*_models_all, *_services_all]
