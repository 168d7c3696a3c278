from .base import Transport
from .http import HttpTransport, build_request_body, extract_envelope_text

from jobscan.config import PipelineConfig
from jobscan.log import get_logger

log = get_logger(__name__)

__all__ = [
    "Transport", "HttpTransport", "build_request_body",
    "extract_envelope_text", "get_transport",
]


def get_transport(config: PipelineConfig, sleep=None) -> Transport:
    kwargs = {"sleep": sleep} if sleep is not None else {}
    transport = HttpTransport(
        config.credential_mode,
        max_attempts=config.max_attempts,
        timeout=config.timeout,
        **kwargs,
    )
    log.debug("Using %s transport (credential via %s)", config.model, config.credential_mode)
    return transport
