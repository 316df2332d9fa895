"""Observability configuration using Logfire.

Domain services open a span per operation and emit structured events:

    import logfire

    with logfire.span("noice_service.give_noice", post_id=str(post_id)):
        logfire.info("Noice given", post_id=str(post_id), total=total)
"""

from typing import Any

import logfire

from noiceboard.config import Settings
from noiceboard.util.error import ConfigurationError


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Console-only unless a token is configured. Set
    OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending, or control it
    explicitly with OBSERVABILITY__SEND_TO_LOGFIRE.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    if send_to_logfire and not settings.observability.logfire_token:
        raise ConfigurationError(
            "observability.send_to_logfire is enabled but no logfire_token is set"
        )

    config_kwargs: dict[str, Any] = {
        "service_name": "noiceboard",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
