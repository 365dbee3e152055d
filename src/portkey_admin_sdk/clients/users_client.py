from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_users import CreateUserInviteRequest, UpdateUserRequest, User, UserInvite
from .base import BaseClient


@dataclass
class UsersClient(BaseClient):
    def get_user(self, user_id: str) -> User:
        return self._fetch(User, f"/admin/users/{user_id}")

    def list_users(self) -> list[User]:
        return self._fetch_list(User, "/admin/users")

    def update_user(self, user_id: str, payload: UpdateUserRequest | Mapping[str, Any]) -> User:
        body = self._send("PUT", f"/admin/users/{user_id}", payload, UpdateUserRequest)
        return parse_response(body, User)

    def delete_user(self, user_id: str) -> None:
        self._request("DELETE", f"/admin/users/{user_id}")

    # Invites

    def invite_user(self, payload: CreateUserInviteRequest | Mapping[str, Any]) -> UserInvite:
        body = self._send("POST", "/admin/users/invites", payload, CreateUserInviteRequest)
        return parse_response(body, UserInvite)

    def get_invite(self, invite_id: str) -> UserInvite:
        return self._fetch(UserInvite, f"/admin/users/invites/{invite_id}")

    def list_invites(self) -> list[UserInvite]:
        return self._fetch_list(UserInvite, "/admin/users/invites")

    def delete_invite(self, invite_id: str) -> None:
        self._request("DELETE", f"/admin/users/invites/{invite_id}")
