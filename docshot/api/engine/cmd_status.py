"""Engine status API command.

CLI: docshot engine status
"""

from collections.abc import Iterator
from typing import Any

import requests

from ...utils.get_logger import get_logger
from .._output_schemas.engine import EngineStatusOutput
from ..config.DocshotConfig import DocshotConfig
from ..StageResult import StageResult
from .EngineClient import EngineClient

# section -> [(label, endpoint, params)]
STATUS_COUNTS: dict[str, list[tuple[str, str, dict[str, Any]]]] = {
    "deployments": [
        ("deployments", "/deployment", {}),
        ("process_definitions", "/process-definition", {}),
        ("decision_definitions", "/decision-definition", {}),
    ],
    "runtime": [
        ("running_instances", "/process-instance", {}),
        ("tasks", "/task", {}),
        ("jobs", "/job", {}),
        ("failed_jobs", "/job", {"withException": "true"}),
        ("incidents", "/incident", {}),
    ],
    "history": [
        ("historic_instances", "/history/process-instance", {}),
    ],
    "identity": [
        ("users", "/user", {}),
        ("groups", "/group", {}),
    ],
}


def cmd_status() -> StageResult:
    """Report deployment, runtime, history and identity counts of the engine."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("engine.status")
        yield (0.1, "Loading configuration...")
        engine_cfg = DocshotConfig.load().engine
        sections: dict[str, dict[str, int | None]] = {name: {} for name in STATUS_COUNTS}
        warnings: list[str] = []

        with EngineClient(engine_cfg) as client:
            yield (0.2, f"Connecting to {engine_cfg.rest_url}...")
            try:
                client.engines()
            except (requests.RequestException, ValueError) as exc:
                logger.warning("Cannot connect to %s: %s", engine_cfg.rest_url, exc)
                result_obj.output = EngineStatusOutput(
                    errors=[f"Cannot connect to Operaton: {exc}"],
                    rest_url=engine_cfg.rest_url,
                    deployments={},
                    runtime={},
                    history={},
                    identity={},
                ).model_dump(mode="python")
                result_obj.result = f"Cannot connect to Operaton at {engine_cfg.rest_url}"
                result_obj.success = False
                return

            total = sum(len(counts) for counts in STATUS_COUNTS.values())
            done = 0
            for section, counts in STATUS_COUNTS.items():
                for label, endpoint, params in counts:
                    yield (0.3 + 0.7 * done / total, f"Counting {label.replace('_', ' ')}...")
                    done += 1
                    try:
                        sections[section][label] = client.count(endpoint, params)
                    except (requests.RequestException, ValueError) as exc:
                        sections[section][label] = None
                        warnings.append(f"{label}: {exc}")

        yield (1.0, "Complete")
        result_obj.output = EngineStatusOutput(
            warnings=warnings,
            rest_url=engine_cfg.rest_url,
            **sections,
        ).model_dump(mode="python")
        runtime = {label: "?" if value is None else value for label, value in sections["runtime"].items()}
        result_obj.result = (
            f"Engine status: {runtime['running_instances']} running instances, "
            f"{runtime['tasks']} tasks, {runtime['incidents']} incidents"
        )
        result_obj.success = True

    return StageResult(announce="Fetching Operaton environment status...", progress_callback=do_work)
