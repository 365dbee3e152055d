from .api_keys_client import ApiKeysClient
from .configs_client import ConfigsClient
from .guardrails_client import GuardrailsClient
from .integrations_client import IntegrationsClient
from .mcp_integrations_client import McpIntegrationsClient
from .mcp_servers_client import McpServersClient
from .policies_client import RateLimitsPoliciesClient, UsageLimitsPoliciesClient
from .prompt_collections_client import PromptCollectionsClient
from .prompt_partials_client import PromptPartialsClient
from .prompts_client import PromptsClient
from .providers_client import ProvidersClient
from .users_client import UsersClient
from .workspaces_client import WorkspacesClient

__all__ = [
    "ApiKeysClient",
    "ConfigsClient",
    "GuardrailsClient",
    "IntegrationsClient",
    "McpIntegrationsClient",
    "McpServersClient",
    "PromptCollectionsClient",
    "PromptPartialsClient",
    "PromptsClient",
    "ProvidersClient",
    "RateLimitsPoliciesClient",
    "UsageLimitsPoliciesClient",
    "UsersClient",
    "WorkspacesClient",
]
