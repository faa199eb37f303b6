"""Health check."""

from .. import __version__

SERVICE_NAME = "sherlock-indexer"


def health() -> dict:
    """Report service liveness."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": __version__,
    }
