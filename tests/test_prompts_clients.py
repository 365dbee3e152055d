from __future__ import annotations

import json

import pytest
import responses

from portkey_admin_sdk.clients.prompt_collections_client import PromptCollectionsClient
from portkey_admin_sdk.clients.prompt_partials_client import PromptPartialsClient
from portkey_admin_sdk.clients.prompts_client import PromptsClient
from portkey_admin_sdk.exceptions import DeserializationError
from portkey_admin_sdk.http_client import HttpClient

from conftest import BASE_URL


@responses.activate
def test_create_prompt_always_sends_parameters(http: HttpClient) -> None:
    responses.add(responses.POST, f"{BASE_URL}/prompts", status=200, json={"id": "p-1", "slug": "greeting", "version_id": "v1"})

    created = PromptsClient(http=http).create_prompt(
        {"name": "Greeting", "collection_id": "col-1", "string": "Hello {{name}}", "virtual_key": "vk-1"}
    )

    assert created.slug == "greeting"
    assert json.loads(responses.calls[0].request.body) == {
        "name": "Greeting",
        "collection_id": "col-1",
        "string": "Hello {{name}}",
        "virtual_key": "vk-1",
        "parameters": {},
    }


@responses.activate
def test_get_prompt_with_version(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/prompts/greeting", status=200, json={"id": "p-1", "slug": "greeting", "prompt_version": 2})
    client = PromptsClient(http=http)

    prompt = client.get_prompt("greeting", version=2)
    client.get_prompt("greeting")

    assert prompt.prompt_version == 2
    assert responses.calls[0].request.url == f"{BASE_URL}/prompts/greeting?version=2"
    assert responses.calls[1].request.url == f"{BASE_URL}/prompts/greeting"


@responses.activate
def test_list_prompts_filters(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/prompts", status=200, json={"data": []})

    assert PromptsClient(http=http).list_prompts(workspace_id="ws-1", collection_id="col-1") == []

    assert responses.calls[0].request.url == f"{BASE_URL}/prompts?workspace_id=ws-1&collection_id=col-1"


@pytest.mark.parametrize("body", ["", "{}"])
@responses.activate
def test_update_prompt_accepts_empty_response(http: HttpClient, body: str) -> None:
    responses.add(responses.PUT, f"{BASE_URL}/prompts/greeting", status=200, body=body)

    result = PromptsClient(http=http).update_prompt("greeting", {"name": "Renamed"})

    assert result.prompt_version_id is None
    assert json.loads(responses.calls[0].request.body) == {"name": "Renamed", "parameters": None}


@responses.activate
def test_update_prompt_rejects_malformed_response(http: HttpClient) -> None:
    responses.add(responses.PUT, f"{BASE_URL}/prompts/greeting", status=200, body="{not json")

    with pytest.raises(DeserializationError):
        PromptsClient(http=http).update_prompt("greeting", {"string": "Hi"})


@responses.activate
def test_make_default_and_delete(http: HttpClient) -> None:
    responses.add(responses.PUT, f"{BASE_URL}/prompts/greeting/makeDefault", status=200)
    responses.add(responses.DELETE, f"{BASE_URL}/prompts/greeting", status=200)
    client = PromptsClient(http=http)

    client.make_default("greeting", 3)
    client.delete_prompt("greeting")

    assert json.loads(responses.calls[0].request.body) == {"version": 3}
    assert responses.calls[1].request.method == "DELETE"


@responses.activate
def test_partials_use_partials_path(http: HttpClient) -> None:
    responses.add(responses.POST, f"{BASE_URL}/prompts/partials", status=200, json={"id": "pp-1", "slug": "footer"})
    responses.add(responses.PUT, f"{BASE_URL}/prompts/partials/footer", status=200, json={"prompt_partial_version_id": "v2"})
    responses.add(responses.PUT, f"{BASE_URL}/prompts/partials/footer/makeDefault", status=200)
    responses.add(responses.GET, f"{BASE_URL}/prompts/partials", status=200, json={"data": [{"id": "pp-1", "slug": "footer"}]})
    client = PromptPartialsClient(http=http)

    created = client.create_partial({"name": "Footer", "string": "Thanks!"})
    client.update_partial(created.slug, {"string": "Thank you!"})
    client.make_default(created.slug, 2)
    partials = client.list_partials("ws-1")

    assert [p.slug for p in partials] == ["footer"]
    assert responses.calls[3].request.url == f"{BASE_URL}/prompts/partials?workspace_id=ws-1"


@responses.activate
def test_collection_update_reads_back(http: HttpClient) -> None:
    responses.add(responses.PUT, f"{BASE_URL}/collections/col-1", status=200)
    responses.add(responses.GET, f"{BASE_URL}/collections/col-1", status=200, json={"id": "col-1", "name": "Support"})

    collection = PromptCollectionsClient(http=http).update_collection("col-1", {"name": "Support"})

    assert collection.name == "Support"
    assert len(responses.calls) == 2
