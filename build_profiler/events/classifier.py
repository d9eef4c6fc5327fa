"""Maps raw host events to normalized start/end events."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..models import (
    DependencyResolutionRequest,
    DependencyResolutionResult,
    Event,
    ExecutionEvent,
    ExecutionEventType,
    MavenExecutionRequest,
    MavenExecutionResult,
    RepositoryEvent,
    RepositoryEventType,
    SettingsBuildingRequest,
    SettingsBuildingResult,
    ToolchainsBuildingRequest,
    ToolchainsBuildingResult,
    UnsupportedEvent,
)

LOGGER = logging.getLogger(__name__)

Classification = Union[Event, UnsupportedEvent]


class EventClassifier:
    """Classifies events of the statically known shapes; anything else is unsupported."""

    # (event shape, identifier, is_start); a None identifier is observed but not measured
    REQUEST_RESULT_EVENTS: Tuple[Tuple[Type[Any], Optional[str], bool], ...] = (
        (SettingsBuildingRequest, "maven:settings-building", True),
        (SettingsBuildingResult, "maven:settings-building", False),
        (ToolchainsBuildingRequest, "maven:toolchains-building", True),
        (ToolchainsBuildingResult, "maven:toolchains-building", False),
        (DependencyResolutionRequest, "maven:dependency-resolution", True),
        (DependencyResolutionResult, "maven:dependency-resolution", False),
        (MavenExecutionRequest, None, True),
        (MavenExecutionResult, None, False),
    )

    REPOSITORY_EVENTS: Dict[RepositoryEventType, Tuple[str, bool]] = {
        RepositoryEventType.ARTIFACT_DOWNLOADING: ("maven:repository:artifact-download", True),
        RepositoryEventType.ARTIFACT_DOWNLOADED: ("maven:repository:artifact-download", False),
        RepositoryEventType.ARTIFACT_DEPLOYING: ("maven:repository:artifact-deployment", True),
        RepositoryEventType.ARTIFACT_DEPLOYED: ("maven:repository:artifact-deployment", False),
    }

    MOJO_EVENTS: Dict[ExecutionEventType, bool] = {
        ExecutionEventType.MOJO_STARTED: True,
        ExecutionEventType.MOJO_SUCCEEDED: False,
        ExecutionEventType.MOJO_FAILED: False,
    }

    @staticmethod
    def classify(raw_event: Any) -> Classification:
        """Return the normalized ``Event`` for ``raw_event`` or an ``UnsupportedEvent``."""

        if isinstance(raw_event, RepositoryEvent):
            return EventClassifier._classify_repository_event(raw_event)
        if isinstance(raw_event, ExecutionEvent):
            return EventClassifier._classify_execution_event(raw_event)

        for event_type, identifier, is_start in EventClassifier.REQUEST_RESULT_EVENTS:
            if isinstance(raw_event, event_type):
                return Event(identifier=identifier, is_start=is_start)

        return UnsupportedEvent(type_name=type_name_of(raw_event))

    @staticmethod
    def _classify_repository_event(event: RepositoryEvent) -> Event:
        mapped = EventClassifier.REPOSITORY_EVENTS.get(event.type)
        if mapped is None:
            return Event(identifier=None, is_start=True)
        identifier, is_start = mapped
        return Event(identifier=identifier, is_start=is_start)

    @staticmethod
    def _classify_execution_event(event: ExecutionEvent) -> Classification:
        is_start = EventClassifier.MOJO_EVENTS.get(event.type)
        if is_start is None:
            return Event(identifier=None, is_start=True)

        if event.mojo_execution is None:
            LOGGER.warning("Could not determine execution event identifier for %s", event.type.value)
            return UnsupportedEvent(type_name=type_name_of(event))

        return Event(identifier=event.mojo_execution.identifier, is_start=is_start)


def type_name_of(raw_event: Any) -> str:
    """Fully qualified name of the concrete type of ``raw_event``."""

    event_type = type(raw_event)
    return f"{event_type.__module__}.{event_type.__qualname__}"
