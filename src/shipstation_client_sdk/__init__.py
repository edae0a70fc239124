from .clients.stores_client import StoresClient, build_store_list_params
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServiceError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from .http_client import HttpClient
from .models_stores import (
    Marketplace,
    RefreshStoreRequest,
    Store,
    StoreIdRequest,
    StoreRefreshStatusResponse,
    StoreStatusMapping,
    SuccessResponse,
)
from .session import ApiSession

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiSession",
    "ClientConfig",
    "ConfigError",
    "ConflictError",
    "DecodeError",
    "ForbiddenError",
    "HttpClient",
    "Marketplace",
    "NotFoundError",
    "RateLimitError",
    "RefreshStoreRequest",
    "ServiceError",
    "Store",
    "StoreIdRequest",
    "StoreRefreshStatusResponse",
    "StoreStatusMapping",
    "StoresClient",
    "SuccessResponse",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "build_store_list_params",
    "load_config",
]
