"""Pydantic v2 schemas shared between the API and its clients."""

from .process import *  # noqa: F401,F403
from .sessions import *  # noqa: F401,F403
