from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictInt, ValidationError, ValidationInfo, field_validator, model_validator


class ScanRequestError(ValueError):
    """Raised when a scan request is rejected before any probing starts."""


class ScanLimits(BaseModel):
    """
    Policy bounds applied to incoming requests.
    Kept out of the scanner so deployments can tighten or relax them.
    """
    max_port_range: int = Field(1000, ge=1)
    min_concurrency: int = Field(1, ge=1)
    max_concurrency: int = Field(100, ge=1)
    min_timeout_ms: int = Field(100, gt=0)
    max_timeout_ms: int = Field(10000, gt=0)


DEFAULT_LIMITS = ScanLimits()


class ScanRequest(BaseModel):
    """
    Validation model for scan parameters.
    Limits come from the validation context (`{"limits": ScanLimits}`),
    falling back to DEFAULT_LIMITS.
    """
    model_config = {"frozen": True}

    host: str = "localhost"
    start_port: StrictInt
    end_port: StrictInt
    timeout: StrictInt = 2000
    concurrency: StrictInt = 50

    @field_validator("host")
    @classmethod
    def validate_host(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Host is required")
        return v

    @field_validator("start_port", "end_port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Ports must be between 1 and 65535")
        return v

    @model_validator(mode="after")
    def validate_policy(self, info: ValidationInfo):
        limits = (info.context or {}).get("limits") or DEFAULT_LIMITS

        if self.start_port > self.end_port:
            raise ValueError("Start port must be less than or equal to end port")

        if self.port_count > limits.max_port_range:
            raise ValueError(f"Maximum port range is {limits.max_port_range} ports")

        if not limits.min_timeout_ms <= self.timeout <= limits.max_timeout_ms:
            raise ValueError(
                f"Timeout must be between {limits.min_timeout_ms} and {limits.max_timeout_ms} ms"
            )

        if not limits.min_concurrency <= self.concurrency <= limits.max_concurrency:
            raise ValueError(
                f"Concurrency must be between {limits.min_concurrency} and {limits.max_concurrency}"
            )
        return self

    @property
    def port_count(self) -> int:
        return self.end_port - self.start_port + 1


def _first_error_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, Exception):
        return str(cause)
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error['msg']}" if loc else error["msg"]


def parse_request(payload: Dict[str, Any], limits: Optional[ScanLimits] = None) -> ScanRequest:
    """
    Builds a validated ScanRequest from a raw request body.
    A missing or empty host defaults to localhost; missing timeout and
    concurrency take their defaults.
    """
    data = {k: v for k, v in payload.items() if v is not None}
    if not data.get("host"):
        data["host"] = "localhost"

    try:
        return ScanRequest.model_validate(data, context={"limits": limits or DEFAULT_LIMITS})
    except ValidationError as e:
        raise ScanRequestError(_first_error_message(e)) from e
