"""Output schemas for engine commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class EngineCheckOutput(BaseOutputSchema):
    """Output schema for engine check command.

    ``webapps`` maps app name to ``"accessible"``, ``"login required"`` or
    ``"not accessible"``; it is empty when the REST API check failed.
    """

    rest_url: str = Field(..., description="Engine REST base URL")
    web_url: str = Field(..., description="Web application base URL")
    rest_ok: bool = Field(..., description="Whether the REST API answered")
    engines: list[str] = Field(..., description="Engine names reported by the REST API")
    version: str = Field(..., description="Engine version, 'unknown' if undeterminable")
    webapps: dict[str, str] = Field(..., description="Web app name -> reachability")


class EngineStatusOutput(BaseOutputSchema):
    """Output schema for engine status command. A count is None when it could not be fetched."""

    rest_url: str = Field(..., description="Engine REST base URL")
    deployments: dict[str, int | None] = Field(..., description="Deployment and definition counts")
    runtime: dict[str, int | None] = Field(..., description="Running instance, task, job and incident counts")
    history: dict[str, int | None] = Field(..., description="Historic counts")
    identity: dict[str, int | None] = Field(..., description="User and group counts")


schema_registry.register_output_schema("engine", "check", EngineCheckOutput)
schema_registry.register_output_schema("engine", "status", EngineStatusOutput)
