from prometheus_client import start_http_server
import time
import os
import structlog

log = structlog.get_logger(__name__)

DEFAULT_PORT = 8082

def start_metrics_server(port: int = DEFAULT_PORT, block: bool = True):
    """Starts the Prometheus metrics HTTP server."""
    actual_port = int(os.environ.get("APP_METRICS_PORT", port))
    log.info("Starting Prometheus metrics server", port=actual_port)
    try:
        start_http_server(actual_port)
    except OSError as e:
        log.error("Failed to start metrics server. Port likely in use.", port=actual_port, error=str(e), exc_info=True)
        raise
    log.info("Prometheus metrics server started", port=actual_port)
    while block:
        time.sleep(60)


if __name__ == "__main__":
    start_metrics_server()
