"""Re-exports the ``User`` table so auth code does not reach into ``database`` directly."""

from database.models import User  # noqa: F401

__all__ = ["User"]
