from .client import EdenredClient
from .session import build_http_client
from .models import Account, Movement

__all__ = ["EdenredClient", "build_http_client", "Account", "Movement"]
