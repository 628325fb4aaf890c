"""HTTP client for the Traduora REST API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Literal

import httpx
from pydantic import BaseModel

from traduora_sync.adapters.http_resilience import ResilientClient
from traduora_sync.config.traduora import ClientCredentials, PasswordLogin
from traduora_sync.domain.diff import Added, Removed, Updated
from traduora_sync.domain.errors import RemoteError
from traduora_sync.domain.translations import TranslationMap

from .schema import (
    ErrorResponse,
    TermPayload,
    TermResponse,
    TermsResponse,
    TokenResponse,
    TranslationsResponse,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from traduora_sync.config.http_resilience import ResilienceConfig
    from traduora_sync.config.traduora import TraduoraConfig
    from traduora_sync.domain.diff import Change

log = getLogger(__name__)

API_PREFIX = "/api/v1"

type HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class TraduoraClient:
    """Fetch and mutate the terms of one project locale.

    The bearer token and the term-id index of the last fetch are kept on the
    instance; every public call runs its own event loop around a fresh
    ``ResilientClient``.
    """

    config: TraduoraConfig
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _token: str | None = field(default=None, init=False, repr=False)
    _term_ids: dict[str, str] = field(default_factory=dict[str, str], init=False, repr=False)

    def fetch_terms(self) -> TranslationMap:
        return asyncio.run(self._fetch_terms_async())

    def apply_change(self, change: Change) -> None:
        asyncio.run(self._apply_change_async(change))

    def __call__(self, change: Change) -> None:
        self.apply_change(change)

    @property
    def _project_path(self) -> str:
        return f"{API_PREFIX}/projects/{self.config.project_id}"

    @property
    def _translations_path(self) -> str:
        return f"{self._project_path}/translations/{self.config.locale}"

    async def _fetch_terms_async(self) -> TranslationMap:
        async with self.client_factory(self.config.resilience()) as client:
            terms = await self._list_terms(client)
            response = await self._send(client, "GET", self._translations_path)
            translations = _parse(response, TranslationsResponse)

        values = {translation.term_id: translation.value for translation in translations.data}
        log.info(
            "Fetched %s terms and %s translations for locale %s",
            len(terms),
            len(translations.data),
            self.config.locale,
        )
        # terms without a translation in this locale still exist remotely
        return TranslationMap((term.value, values.get(term.id, "")) for term in terms)

    async def _apply_change_async(self, change: Change) -> None:
        async with self.client_factory(self.config.resilience()) as client:
            match change:
                case Added(key=key, value=value):
                    response = await self._send(
                        client, "POST", f"{self._project_path}/terms", json={"value": key}
                    )
                    term = _parse(response, TermResponse).data
                    self._term_ids[key] = term.id
                    await self._set_translation(client, term.id, value)
                case Removed(key=key):
                    term_id = await self._term_id(client, key)
                    await self._send(client, "DELETE", f"{self._project_path}/terms/{term_id}")
                    self._term_ids.pop(key, None)
                case Updated(key=key, new_value=value):
                    term_id = await self._term_id(client, key)
                    await self._set_translation(client, term_id, value)

    async def _list_terms(self, client: ResilientClient) -> list[TermPayload]:
        response = await self._send(client, "GET", f"{self._project_path}/terms")
        terms = _parse(response, TermsResponse).data
        self._term_ids = {term.value: term.id for term in terms}
        return terms

    async def _term_id(self, client: ResilientClient, key: str) -> str:
        term_id = self._term_ids.get(key)
        if term_id is None:
            await self._list_terms(client)
            term_id = self._term_ids.get(key)
        if term_id is None:
            raise RemoteError(f"Term {key!r} does not exist in project {self.config.project_id}")
        return term_id

    async def _set_translation(self, client: ResilientClient, term_id: str, value: str) -> None:
        await self._send(
            client,
            "PATCH",
            self._translations_path,
            json={"termId": term_id, "value": value},
        )

    async def _authenticate(self, client: ResilientClient) -> str:
        if self._token is not None:
            return self._token

        credentials = self.config.credentials
        match credentials:
            case PasswordLogin(username=username, password=password):
                body = {"grant_type": "password", "username": username, "password": password}
                who = username
            case ClientCredentials(client_id=client_id, client_secret=client_secret):
                body = {
                    "grant_type": "client_credentials",
                    "client_id": client_id,
                    "client_secret": client_secret,
                }
                who = client_id

        try:
            response = await client.post(f"{API_PREFIX}/auth/token", json=body)
        except httpx.HTTPError as exc:
            raise RemoteError(
                f"Login failed for Traduora instance {self.config.host} ({who}): {exc}"
            ) from exc
        if response.is_error:
            message = _error_message(response)
            log.error(f"Traduora login failed for {who}: {message}")
            raise RemoteError(
                f"Login failed for Traduora instance {self.config.host} ({who}): {message}",
                status_code=response.status_code,
            )
        self._token = _parse(response, TokenResponse).access_token
        return self._token

    async def _send(
        self,
        client: ResilientClient,
        method: HttpMethod,
        path: str,
        *,
        json: object = None,
    ) -> httpx.Response:
        response = await self._send_once(client, method, path, json=json)
        if response.status_code == httpx.codes.UNAUTHORIZED:
            log.debug("Token rejected for %s %s, logging in again", method, path)
            self._token = None
            response = await self._send_once(client, method, path, json=json)
        if response.is_error:
            message = _error_message(response)
            log.error(f"Traduora API error {response.status_code} on {method} {path}: {message}")
            raise RemoteError(
                f"{method} {path} failed with status {response.status_code}: {message}",
                status_code=response.status_code,
            )
        return response

    async def _send_once(
        self,
        client: ResilientClient,
        method: HttpMethod,
        path: str,
        *,
        json: object,
    ) -> httpx.Response:
        token = await self._authenticate(client)
        headers = {"Authorization": f"Bearer {token}"}
        log.debug("%s %s", method, path)
        try:
            match method:
                case "GET":
                    return await client.get(path, headers=headers)
                case "DELETE":
                    return await client.delete(path, headers=headers)
                case "POST":
                    return await client.post(path, headers=headers, json=json)
                case "PATCH":
                    return await client.patch(path, headers=headers, json=json)
        except httpx.HTTPError as exc:
            raise RemoteError(f"{method} {path} failed: {exc}") from exc


def _parse[M: BaseModel](response: httpx.Response, model: type[M]) -> M:
    try:
        return model.model_validate(response.json())
    except ValueError as exc:
        raise RemoteError(
            f"Unexpected Traduora response payload from {response.request.url.path}",
            status_code=response.status_code,
        ) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        error = ErrorResponse.model_validate(response.json())
    except ValueError:
        return response.reason_phrase or "unknown error"
    return error.error.message or error.error.code or response.reason_phrase


def build_traduora_client(config: TraduoraConfig) -> TraduoraClient:
    return TraduoraClient(config=config)

