"""Replays a simulated multi-module build through the profiler and logs the report."""

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

# Add project directory to Python path
PROJECT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_DIR))

from build_profiler.config import get_settings
from build_profiler.models import (
    DependencyResolutionRequest,
    DependencyResolutionResult,
    ExecutionEvent,
    ExecutionEventType,
    MavenExecutionRequest,
    MavenExecutionResult,
    MojoExecution,
    RepositoryEvent,
    RepositoryEventType,
    SettingsBuildingRequest,
    SettingsBuildingResult,
    ToolchainsBuildingRequest,
    ToolchainsBuildingResult,
)
from build_profiler.services import Profiler

MODULES = ["core", "api", "web"]
GOALS = [
    ("org.apache.maven.plugins", "maven-resources-plugin", "resources", "default-resources", 0.02),
    ("org.apache.maven.plugins", "maven-compiler-plugin", "compile", "default-compile", 0.08),
    ("org.apache.maven.plugins", "maven-surefire-plugin", "test", "default-test", 0.12),
    ("org.apache.maven.plugins", "maven-jar-plugin", "jar", "default-jar", 0.03),
]


def pause(seconds: float) -> None:
    time.sleep(seconds)


def build_module(profiler: Profiler, module: str) -> None:
    profiler.on_event(DependencyResolutionRequest(project=module))
    profiler.on_event(RepositoryEvent(type=RepositoryEventType.ARTIFACT_RESOLVING, artifact=f"com.example:{module}"))
    profiler.on_event(RepositoryEvent(type=RepositoryEventType.ARTIFACT_DOWNLOADING, artifact=f"com.example:{module}"))
    pause(0.05)
    profiler.on_event(RepositoryEvent(type=RepositoryEventType.ARTIFACT_DOWNLOADED, artifact=f"com.example:{module}"))
    profiler.on_event(DependencyResolutionResult())

    profiler.on_event(ExecutionEvent(type=ExecutionEventType.PROJECT_STARTED))
    for group_id, artifact_id, goal, execution_id, duration in GOALS:
        execution = MojoExecution(group_id=group_id, artifact_id=artifact_id, goal=goal, execution_id=execution_id)
        profiler.on_event(ExecutionEvent(type=ExecutionEventType.MOJO_STARTED, mojo_execution=execution))
        pause(duration)
        profiler.on_event(ExecutionEvent(type=ExecutionEventType.MOJO_SUCCEEDED, mojo_execution=execution))
    profiler.on_event(ExecutionEvent(type=ExecutionEventType.PROJECT_SUCCEEDED))


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    profiler = Profiler(settings=settings)
    profiler.on_event(MavenExecutionRequest(goals=["install"]))
    profiler.on_event(SettingsBuildingRequest(user_settings_file="~/.m2/settings.xml"))
    pause(0.01)
    profiler.on_event(SettingsBuildingResult())
    profiler.on_event(ToolchainsBuildingRequest())
    profiler.on_event(ToolchainsBuildingResult())

    with ThreadPoolExecutor(max_workers=len(MODULES)) as pool:
        list(pool.map(lambda module: build_module(profiler, module), MODULES))

    profiler.on_event({"type": "custom-extension-event"})
    profiler.on_event(MavenExecutionResult())
    profiler.close()


if __name__ == "__main__":
    run()
