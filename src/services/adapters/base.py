"""
Base Service Adapter.

Abstract base class for collaborator adapters supporting demo/live modes.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from src.core.enums import IntegrationMode

# Adapters share the integration mode switch with settings
AdapterMode = IntegrationMode


T = TypeVar("T", bound=BaseModel)


class BaseAdapter(ABC, Generic[T]):
    """
    Abstract base class for collaborator adapters.

    Provides a common read interface for records held either in
    memory (demo) or in an external system (live).
    """

    id_field: str = "id"

    def __init__(self, mode: AdapterMode = AdapterMode.DEMO):
        """
        Initialize adapter.

        Args:
            mode: Operating mode (demo or live)
        """
        self._mode = mode
        self._demo_data: dict[int, T] = {}

    @property
    def mode(self) -> AdapterMode:
        """Get current operating mode."""
        return self._mode

    def set_mode(self, mode: AdapterMode) -> None:
        """Set operating mode."""
        self._mode = mode

    def is_demo_mode(self) -> bool:
        """Check if running in demo mode."""
        return self._mode == AdapterMode.DEMO

    def _require_demo_mode(self) -> None:
        if not self.is_demo_mode():
            raise NotImplementedError("Live mode not yet implemented")

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get entity by ID."""
        self._require_demo_mode()
        return self._demo_data.get(entity_id)

    async def list_all(
        self,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[T]:
        """List entities with pagination and equality filters."""
        self._require_demo_mode()
        entities = list(self._demo_data.values())
        if filters:
            entities = [
                e for e in entities
                if all(getattr(e, key, None) == value for key, value in filters.items())
            ]
        return entities[offset:offset + limit]

    @abstractmethod
    def seed_defaults(self) -> None:
        """Load the default demo records."""

    def clear_demo_data(self) -> None:
        """Clear all demo data."""
        self._demo_data.clear()

    def seed_demo_data(self, entities: list[T]) -> None:
        """
        Seed demo data.

        Args:
            entities: List of entities keyed by the adapter's id field
        """
        for entity in entities:
            entity_id = getattr(entity, self.id_field, None)
            if entity_id is not None:
                self._demo_data[entity_id] = entity

    def get_demo_count(self) -> int:
        """Get count of demo data entries."""
        return len(self._demo_data)
