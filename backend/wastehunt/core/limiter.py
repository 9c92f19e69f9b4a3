# wastehunt/core/limiter.py
from slowapi import Limiter
from slowapi.util import get_remote_address
from wastehunt.core.config import settings

# Счётчики в памяти процесса; для нескольких воркеров нужен storage_uri на Redis
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
