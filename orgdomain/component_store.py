"""Storage for component instances attached to organisations."""

from __future__ import annotations

import abc
import uuid
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class ComponentStoreError(Exception):
    """Raised when a component is missing or of an unexpected type."""


class _Component(Protocol):
    id: uuid.UUID
    organization_id: uuid.UUID
    data: Any


class ComponentStore(abc.ABC):
    """Asynchronous store of components, keyed by component id."""

    @abc.abstractmethod
    async def store_component(self, component: _Component) -> None:
        """Store ``component``, replacing any with the same id."""

    @abc.abstractmethod
    async def get_component(
        self, component_id: uuid.UUID, data_type: type[T]
    ) -> _Component | None:
        """Return the component, None if absent; raise if its data is not ``data_type``."""

    @abc.abstractmethod
    async def get_organization_components(
        self, organization_id: uuid.UUID, data_type: type[T]
    ) -> list[_Component]:
        """Return an organisation's components whose data is ``data_type``."""

    @abc.abstractmethod
    async def update_component(self, component: _Component) -> None:
        """Replace an existing component; raise if it is not stored."""

    @abc.abstractmethod
    async def delete_component(self, component_id: uuid.UUID) -> None:
        """Remove a component; raise if it is not stored."""


class InMemoryComponentStore(ComponentStore):
    """Component store held in a dictionary."""

    def __init__(self) -> None:
        self._storage: dict[uuid.UUID, _Component] = {}

    async def store_component(self, component: _Component) -> None:
        self._storage[component.id] = component

    async def get_component(
        self, component_id: uuid.UUID, data_type: type[T]
    ) -> _Component | None:
        component = self._storage.get(component_id)
        if component is None:
            return None
        if not isinstance(component.data, data_type):
            raise ComponentStoreError("Component type mismatch")
        return component

    async def get_organization_components(
        self, organization_id: uuid.UUID, data_type: type[T]
    ) -> list[_Component]:
        return [
            component
            for component in self._storage.values()
            if isinstance(component.data, data_type)
            and component.organization_id == organization_id
        ]

    async def update_component(self, component: _Component) -> None:
        if component.id not in self._storage:
            raise ComponentStoreError("Component not found")
        self._storage[component.id] = component

    async def delete_component(self, component_id: uuid.UUID) -> None:
        if self._storage.pop(component_id, None) is None:
            raise ComponentStoreError("Component not found")