"""
Service context extraction for logging.

Identifies the running process in log lines so output from several
terminals or containers can be told apart.
"""

from functools import lru_cache
import os

from cinema_ticketing.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{os.getpid()}'
