from .clients import (
    ApiKeysClient,
    ConfigsClient,
    GuardrailsClient,
    IntegrationsClient,
    McpIntegrationsClient,
    McpServersClient,
    PromptCollectionsClient,
    PromptPartialsClient,
    PromptsClient,
    ProvidersClient,
    RateLimitsPoliciesClient,
    UsageLimitsPoliciesClient,
    UsersClient,
    WorkspacesClient,
)
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    DeserializationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ReadAfterWriteError,
    ResourceNotFoundError,
    ResponseReadError,
    SerializationError,
    ServerError,
    TransportError,
    ValidationError,
)
from .http_client import HttpClient
from .models import RateLimit, RequestModel, ResponseModel, UsageLimits, WorkspaceRateLimits, WorkspaceUsageLimits
from .models_api_keys import ApiKey, ApiKeySubType, ApiKeyType, CreateApiKeyRequest, UpdateApiKeyRequest
from .models_configs import Config, CreateConfigRequest, UpdateConfigRequest
from .models_workspaces import (
    AddWorkspaceMemberRequest,
    CreateWorkspaceRequest,
    UpdateWorkspaceMemberRequest,
    UpdateWorkspaceRequest,
    Workspace,
    WorkspaceMember,
)
from .session import AdminSession

__all__ = [
    "AddWorkspaceMemberRequest",
    "AdminSession",
    "ApiError",
    "ApiKey",
    "ApiKeySubType",
    "ApiKeyType",
    "ApiKeysClient",
    "AuthError",
    "ClientConfig",
    "Config",
    "ConfigError",
    "ConfigsClient",
    "ConflictError",
    "CreateApiKeyRequest",
    "CreateConfigRequest",
    "CreateWorkspaceRequest",
    "DeserializationError",
    "ForbiddenError",
    "GuardrailsClient",
    "HttpClient",
    "IntegrationsClient",
    "McpIntegrationsClient",
    "McpServersClient",
    "NotFoundError",
    "PromptCollectionsClient",
    "PromptPartialsClient",
    "PromptsClient",
    "ProvidersClient",
    "RateLimit",
    "RateLimitError",
    "RateLimitsPoliciesClient",
    "ReadAfterWriteError",
    "RequestModel",
    "ResourceNotFoundError",
    "ResponseModel",
    "ResponseReadError",
    "SerializationError",
    "ServerError",
    "TransportError",
    "UpdateApiKeyRequest",
    "UpdateConfigRequest",
    "UpdateWorkspaceMemberRequest",
    "UpdateWorkspaceRequest",
    "UsageLimits",
    "UsageLimitsPoliciesClient",
    "UsersClient",
    "ValidationError",
    "Workspace",
    "WorkspaceMember",
    "WorkspaceRateLimits",
    "WorkspacesClient",
    "WorkspaceUsageLimits",
    "load_config",
]
