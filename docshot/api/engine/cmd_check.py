"""Engine check API command.

CLI: docshot engine check
"""

from collections.abc import Iterator

import requests

from ...utils.get_logger import get_logger
from .._output_schemas.engine import EngineCheckOutput
from ..config.DocshotConfig import DocshotConfig
from ..StageResult import StageResult
from .EngineClient import EngineClient

WEBAPPS = ("cockpit", "tasklist", "admin")


def _rest_failure_hint(exc: requests.RequestException) -> str:
    response = getattr(exc, "response", None)
    if response is not None:
        if response.status_code == 401:
            return "REST API returned 401: check username/password (OPERATON_USERNAME, OPERATON_PASSWORD)"
        return f"REST API returned status {response.status_code}"
    if isinstance(exc, requests.ConnectionError):
        return f"Cannot connect to REST API: is Operaton running and OPERATON_REST_URL correct? ({exc})"
    if isinstance(exc, requests.Timeout):
        return f"REST API timed out: {exc}"
    return f"REST API error: {exc}"


def _webapp_state(status_code: int) -> str:
    if status_code in (401, 302):
        return "login required"
    if status_code < 400:
        return "accessible"
    return "not accessible"


def cmd_check() -> StageResult:
    """Check that the engine REST API and web apps are reachable."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("engine.check")
        yield (0.1, "Loading configuration...")
        engine_cfg = DocshotConfig.load().engine

        errors: list[str] = []
        warnings: list[str] = []
        engines: list[str] = []
        version = "unknown"
        webapps: dict[str, str] = {}

        with EngineClient(engine_cfg) as client:
            yield (0.2, f"Checking REST API: {engine_cfg.rest_url}")
            try:
                engines = client.engines()
                rest_ok = True
            except (requests.RequestException, ValueError) as exc:
                rest_ok = False
                hint = _rest_failure_hint(exc) if isinstance(exc, requests.RequestException) else str(exc)
                errors.append(hint)
                logger.warning("REST check failed for %s: %s", engine_cfg.rest_url, exc)

            if rest_ok:
                yield (0.4, "Checking version info...")
                try:
                    version = client.version()
                except (requests.RequestException, ValueError) as exc:
                    warnings.append(f"Could not determine version: {exc}")

                for i, app in enumerate(WEBAPPS):
                    yield (0.5 + 0.15 * i, f"Checking {app}...")
                    try:
                        webapps[app] = _webapp_state(client.webapp_status(app))
                    except requests.RequestException as exc:
                        webapps[app] = "not accessible"
                        warnings.append(f"{app}: {exc}")

        yield (1.0, "Complete")
        result_obj.output = EngineCheckOutput(
            errors=errors,
            warnings=warnings,
            rest_url=engine_cfg.rest_url,
            web_url=engine_cfg.web_url,
            rest_ok=rest_ok,
            engines=engines,
            version=version,
            webapps=webapps,
        ).model_dump(mode="python")
        if rest_ok:
            result_obj.result = f"Connection successful: {', '.join(engines) or 'no engines'} (version {version})"
        else:
            result_obj.result = f"Connection failed: {engine_cfg.rest_url}"
        result_obj.success = rest_ok

    return StageResult(announce="Checking Operaton connection...", progress_callback=do_work)
