"""Typed REST client core for the *arr media-management backends."""

from __future__ import annotations

from arrkit.client import ArrClient
from arrkit.config import ClientConfig
from arrkit.errors import ErrorKind, RequestError, is_not_found
from arrkit.fields import FieldInput, FieldKind, FieldOutput, SelectOption
from arrkit.paths import Endpoint, build_endpoint
from arrkit.resources import Resource

__version__ = "0.1.0"

__all__ = [
    "ArrClient",
    "ClientConfig",
    "Endpoint",
    "ErrorKind",
    "FieldInput",
    "FieldKind",
    "FieldOutput",
    "RequestError",
    "Resource",
    "SelectOption",
    "build_endpoint",
    "is_not_found",
]
