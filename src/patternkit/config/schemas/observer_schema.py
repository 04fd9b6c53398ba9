"""Observer fan-out configuration schema."""

from pydantic import BaseModel, Field


class ObserverConfig(BaseModel):
    """Delivery policy for subjects built from configuration."""

    isolate_subscriber_errors: bool = Field(
        False,
        description="Log a failing subscriber and keep delivering instead of propagating",
    )
