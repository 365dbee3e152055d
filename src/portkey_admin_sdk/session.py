from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from .clients.api_keys_client import ApiKeysClient
from .clients.configs_client import ConfigsClient
from .clients.guardrails_client import GuardrailsClient
from .clients.integrations_client import IntegrationsClient
from .clients.mcp_integrations_client import McpIntegrationsClient
from .clients.mcp_servers_client import McpServersClient
from .clients.policies_client import RateLimitsPoliciesClient, UsageLimitsPoliciesClient
from .clients.prompt_collections_client import PromptCollectionsClient
from .clients.prompt_partials_client import PromptPartialsClient
from .clients.prompts_client import PromptsClient
from .clients.providers_client import ProvidersClient
from .clients.users_client import UsersClient
from .clients.workspaces_client import WorkspacesClient
from .config import ClientConfig
from .http_client import HttpClient


@dataclass
class AdminSession:
    """Entry point for the admin API.

    Every resource client handed out by a session shares its ``HttpClient``
    and so its connection pool.
    """

    config: ClientConfig
    http: HttpClient | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = HttpClient(config=self.config)

    @classmethod
    def connect(
        cls,
        base_url: str,
        api_key: str,
        *,
        session: requests.Session | None = None,
        **options: Any,
    ) -> "AdminSession":
        config = ClientConfig(api_base_url=base_url, api_key=api_key, **options)
        return cls(config=config, http=HttpClient(config=config, session=session))

    def with_timeout(self, seconds: float) -> "AdminSession":
        return AdminSession(config=self.config, http=self._http().with_timeout(seconds))

    def _http(self) -> HttpClient:
        if self.http is None:
            raise RuntimeError("HTTP client not initialized")
        return self.http

    def workspaces_client(self) -> WorkspacesClient:
        return WorkspacesClient(http=self._http())

    def users_client(self) -> UsersClient:
        return UsersClient(http=self._http())

    def integrations_client(self) -> IntegrationsClient:
        return IntegrationsClient(http=self._http())

    def api_keys_client(self) -> ApiKeysClient:
        return ApiKeysClient(http=self._http())

    def providers_client(self) -> ProvidersClient:
        return ProvidersClient(http=self._http())

    def configs_client(self) -> ConfigsClient:
        return ConfigsClient(http=self._http())

    def prompts_client(self) -> PromptsClient:
        return PromptsClient(http=self._http())

    def prompt_partials_client(self) -> PromptPartialsClient:
        return PromptPartialsClient(http=self._http())

    def prompt_collections_client(self) -> PromptCollectionsClient:
        return PromptCollectionsClient(http=self._http())

    def guardrails_client(self) -> GuardrailsClient:
        return GuardrailsClient(http=self._http())

    def usage_limits_policies_client(self) -> UsageLimitsPoliciesClient:
        return UsageLimitsPoliciesClient(http=self._http())

    def rate_limits_policies_client(self) -> RateLimitsPoliciesClient:
        return RateLimitsPoliciesClient(http=self._http())

    def mcp_integrations_client(self) -> McpIntegrationsClient:
        return McpIntegrationsClient(http=self._http())

    def mcp_servers_client(self) -> McpServersClient:
        return McpServersClient(http=self._http())

    def close(self) -> None:
        self._http().close()

    def __enter__(self) -> "AdminSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
