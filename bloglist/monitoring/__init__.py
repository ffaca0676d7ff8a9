from bloglist.monitoring.logging import (
    RequestIdFilter,
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_secrets,
    sanitize_event_dict,
)

__all__ = [
    "RequestIdFilter",
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_secrets",
    "sanitize_event_dict",
]
