"""
Service context extraction for log traceability.

Identifies which projector process emitted a log line when several
consumers write to the same sink.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'conference-order-projection')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostnames are unique per task, fall back to PID for local runs
    host = os.getenv('HOSTNAME') or socket.gethostname()
    instance = f'{host[:12]}-{os.getpid()}' if host else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
