"""Logfire setup for the comment engine.

Pipelines and the HTTP adapter emit spans and structured events through
the module-level logfire API; this module only decides where they go.
"""

import logfire

from buzz.config import ObservabilitySettings, Settings

SERVICE_NAME = "buzz-comments"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when a Logfire token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            verbose=settings.debug,
        ),
        # The bearer token travels in the Authorization header
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["auth_token"]),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_httpx() -> None:
    """Trace every comment API request made through httpx."""
    logfire.instrument_httpx()
