"""Logging setup for the generator script and applications embedding the client."""
import logging
import sys
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [resource=%(resource)s request_id=%(request_id)s] - %(message)s"


class ContextFormatter(logging.Formatter):
    """Formatter that tolerates records without resource or request_id extras."""
    def format(self, record):
        if not hasattr(record, 'resource'):
            record.resource = '-'
        if not hasattr(record, 'request_id'):
            record.request_id = '-'
        return super().format(record)


def log_context(resource: Optional[str] = None, request_id: Optional[str] = None) -> Dict[str, str]:
    """Build the ``extra`` mapping read by ContextFormatter."""
    return {"resource": resource or "-", "request_id": request_id or "-"}


def resource_name(path: str) -> str:
    """First path segment of an API path: ``/customers/cus_1`` -> ``customers``."""
    return path.strip("/").split("/", 1)[0] or "-"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout. The library never calls this on import."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
