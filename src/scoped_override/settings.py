"""Override settings loaded from environment variables."""

import os

from pydantic import BaseModel

from scoped_override.utils import coerce_boolean

ENV_CHECK_KIND = "SCOPED_OVERRIDE_CHECK_KIND"
ENV_LOG_VALUES = "SCOPED_OVERRIDE_LOG_VALUES"


class OverrideSettings(BaseModel):
    """Behaviour switches for scoped overrides.

    Attributes:
        check_kind: Reject a replacement whose container kind differs from the target's.
        log_values: Include container contents in debug log records.
    """

    check_kind: bool = False
    log_values: bool = False


def load_settings(env: dict[str, str] | None = None) -> OverrideSettings:
    """Build settings from environment variables.

    Args:
        env: Environment variable dict. If None, uses os.environ.
    """
    if env is None:
        env = dict(os.environ)

    return OverrideSettings(
        check_kind=coerce_boolean(env.get(ENV_CHECK_KIND, "")),
        log_values=coerce_boolean(env.get(ENV_LOG_VALUES, "")),
    )
