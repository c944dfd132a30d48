from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.aggregates.observation import Observation
    from domain.value_objects.complex_view import ComplexView


class ComplexObsHandler(Protocol):
    """Port for storing and retrieving an observation's complex data.

    Variants are selected by configuration; see
    ``infrastructure.complex_obs_handlers.factory``.
    """

    @property
    def supported_views(self) -> tuple[ComplexView, ...]: ...

    def supports_view(self, view: ComplexView | str) -> bool: ...

    def save_obs(self, obs: Observation) -> Observation:
        """Persist the observation's in-memory complex data and point the record at it.

        Raises:
            StorageError: if the data cannot be written. The pointer is left unchanged.

        """
        ...

    def get_obs(self, obs: Observation, view: ComplexView | str) -> Observation | None:
        """Attach the stored complex data to the observation in the requested view.

        Returns None when the view is not supported. Read failures are logged and
        leave ``complex_data`` unset rather than raising.
        """
        ...
