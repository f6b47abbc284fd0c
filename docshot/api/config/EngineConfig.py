"""Engine REST API configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EngineConfig(BaseModel):
    """Connection settings for the Operaton engine and its web apps."""

    model_config = ConfigDict(extra="forbid")

    rest_url: str = Field("https://operaton-doc.open-regels.nl/engine-rest", description="Engine REST base URL")
    web_url: str = Field("https://operaton-doc.open-regels.nl", description="Web application base URL")
    username: str = Field("demo", description="Basic auth user")
    password: str = Field("demo", description="Basic auth password")
    timeout_secs: float = Field(10.0, gt=0, description="Per-request timeout")

    @field_validator("rest_url", "web_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
