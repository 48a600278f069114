"""HTTP clients for UniPlan."""

from uniplan.clients.http import HTTPClient

__all__ = ["HTTPClient"]
