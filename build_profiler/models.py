"""Pydantic models for host build events, classification results and report inputs."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SettingsBuildingRequest(BaseModel):
    """Emitted before user and global settings are read."""

    user_settings_file: Optional[str] = None
    global_settings_file: Optional[str] = None


class SettingsBuildingResult(BaseModel):
    """Emitted once the effective settings have been built."""

    problems: List[str] = Field(default_factory=list)


class ToolchainsBuildingRequest(BaseModel):
    """Emitted before toolchain definitions are read."""

    user_toolchains_file: Optional[str] = None
    global_toolchains_file: Optional[str] = None


class ToolchainsBuildingResult(BaseModel):
    """Emitted once the effective toolchains have been built."""

    problems: List[str] = Field(default_factory=list)


class DependencyResolutionRequest(BaseModel):
    """Emitted before the dependencies of a project are resolved."""

    project: Optional[str] = None


class DependencyResolutionResult(BaseModel):
    """Emitted once the dependencies of a project are resolved."""

    resolved_dependencies: List[str] = Field(default_factory=list)
    collection_errors: List[str] = Field(default_factory=list)


class MavenExecutionRequest(BaseModel):
    """Emitted when the overall build starts."""

    goals: List[str] = Field(default_factory=list)


class MavenExecutionResult(BaseModel):
    """Emitted when the overall build finishes."""

    exceptions: List[str] = Field(default_factory=list)


class RepositoryEventType(str, Enum):
    """Discriminant of a repository event."""

    ARTIFACT_DESCRIPTOR_INVALID = "ARTIFACT_DESCRIPTOR_INVALID"
    ARTIFACT_DESCRIPTOR_MISSING = "ARTIFACT_DESCRIPTOR_MISSING"
    METADATA_INVALID = "METADATA_INVALID"
    ARTIFACT_RESOLVING = "ARTIFACT_RESOLVING"
    ARTIFACT_RESOLVED = "ARTIFACT_RESOLVED"
    METADATA_RESOLVING = "METADATA_RESOLVING"
    METADATA_RESOLVED = "METADATA_RESOLVED"
    ARTIFACT_DOWNLOADING = "ARTIFACT_DOWNLOADING"
    ARTIFACT_DOWNLOADED = "ARTIFACT_DOWNLOADED"
    METADATA_DOWNLOADING = "METADATA_DOWNLOADING"
    METADATA_DOWNLOADED = "METADATA_DOWNLOADED"
    ARTIFACT_INSTALLING = "ARTIFACT_INSTALLING"
    ARTIFACT_INSTALLED = "ARTIFACT_INSTALLED"
    METADATA_INSTALLING = "METADATA_INSTALLING"
    METADATA_INSTALLED = "METADATA_INSTALLED"
    ARTIFACT_DEPLOYING = "ARTIFACT_DEPLOYING"
    ARTIFACT_DEPLOYED = "ARTIFACT_DEPLOYED"
    METADATA_DEPLOYING = "METADATA_DEPLOYING"
    METADATA_DEPLOYED = "METADATA_DEPLOYED"


class RepositoryEvent(BaseModel):
    """Repository activity (resolution, transfer, installation, deployment)."""

    type: RepositoryEventType
    artifact: Optional[str] = Field(default=None, description="Artifact coordinates, when applicable")
    repository: Optional[str] = None


class ExecutionEventType(str, Enum):
    """Discriminant of a lifecycle execution event."""

    PROJECT_DISCOVERY_STARTED = "ProjectDiscoveryStarted"
    SESSION_STARTED = "SessionStarted"
    SESSION_ENDED = "SessionEnded"
    PROJECT_SKIPPED = "ProjectSkipped"
    PROJECT_STARTED = "ProjectStarted"
    PROJECT_SUCCEEDED = "ProjectSucceeded"
    PROJECT_FAILED = "ProjectFailed"
    MOJO_SKIPPED = "MojoSkipped"
    MOJO_STARTED = "MojoStarted"
    MOJO_SUCCEEDED = "MojoSucceeded"
    MOJO_FAILED = "MojoFailed"
    FORK_STARTED = "ForkStarted"
    FORK_SUCCEEDED = "ForkSucceeded"
    FORK_FAILED = "ForkFailed"
    FORKED_PROJECT_STARTED = "ForkedProjectStarted"
    FORKED_PROJECT_SUCCEEDED = "ForkedProjectSucceeded"
    FORKED_PROJECT_FAILED = "ForkedProjectFailed"


class MojoExecution(BaseModel):
    """Descriptor of a single plugin goal execution."""

    group_id: str
    artifact_id: str
    goal: str
    execution_id: str

    @property
    def identifier(self) -> str:
        """Key under which durations of this execution are aggregated."""

        return f"{self.group_id}:{self.artifact_id}:{self.goal}@{self.execution_id}"


class ExecutionEvent(BaseModel):
    """Lifecycle event; plugin events carry the execution they describe."""

    type: ExecutionEventType
    mojo_execution: Optional[MojoExecution] = None


class Event(BaseModel):
    """Normalized classification of a raw event.

    ``identifier`` is ``None`` for events that are observed but not measured.
    """

    model_config = ConfigDict(frozen=True)

    identifier: Optional[str] = None
    is_start: bool


class UnsupportedEvent(BaseModel):
    """Classification result for an event of unknown shape."""

    model_config = ConfigDict(frozen=True)

    type_name: str


class RegistrySnapshot(BaseModel):
    """Read-only view of everything recorded, taken at shutdown."""

    executions: Dict[str, List[int]] = Field(
        default_factory=dict,
        description="Duration samples in milliseconds keyed by identifier",
    )
    unsupported: List[str] = Field(default_factory=list, description="Sorted unsupported type names")

    @field_validator("executions")
    @classmethod
    def ensure_samples_present(cls, value: Dict[str, List[int]]) -> Dict[str, List[int]]:
        """Guard against identifiers without samples or with negative samples."""

        for identifier, samples in value.items():
            if not samples:
                raise ValueError(f"identifier '{identifier}' has no samples")
            if any(sample < 0 for sample in samples):
                raise ValueError(f"identifier '{identifier}' has a negative sample")
        return value


class ExecutionSummary(BaseModel):
    """Aggregated statistics for one identifier."""

    identifier: str
    count: int = Field(..., ge=1)
    total_ms: int = Field(..., ge=0)
    min_ms: int = Field(..., ge=0)
    max_ms: int = Field(..., ge=0)
    avg_ms: int = Field(..., ge=0, description="Truncated integer average")
