"""Backend access: the read contract and an in-memory implementation."""

from neighbors_light.backend.interface import Backend, BackendError, fetch_snapshot
from neighbors_light.backend.memory import InMemoryBackend
from neighbors_light.backend.sample_data import create_sample_backend

__all__ = [
    "Backend",
    "BackendError",
    "fetch_snapshot",
    "InMemoryBackend",
    "create_sample_backend",
]
