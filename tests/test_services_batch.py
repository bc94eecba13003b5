from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from hubspot_crm import AsyncHubspot, Hubspot, OptionNotDesired


class DealProperties(BaseModel):
    dealname: str | None = None
    dealstage: str | None = None


def _batch_result(*records: dict[str, Any]) -> dict[str, Any]:
    return {
        "status": "COMPLETE",
        "results": list(records),
        "requestedAt": "2024-01-01T00:00:00Z",
        "startedAt": "2024-01-01T00:00:01Z",
        "completedAt": "2024-01-01T00:00:02Z",
        "links": {"self": "https://api.hubapi.com/batch/1"},
    }


def _record(id: str, **properties: Any) -> dict[str, Any]:
    return {"id": id, "properties": properties, "archived": False}


@pytest.mark.parametrize("ids", [["1"], ["3", "1", "2"], ["5", "5", "4"]])
def test_archive_sends_ids_in_caller_order(hubspot: Hubspot, recorder, ids: list[str]) -> None:
    recorder.reply(204)

    assert hubspot.objects.deals.batch.archive(ids) is None

    req = recorder.last
    assert req.method == "DELETE"
    assert req.url.path == "/crm/v3/objects/deals/batch/archive"
    assert recorder.last_json() == {"inputs": [{"id": i} for i in ids]}


def test_create_posts_one_input_per_properties_value(hubspot: Hubspot, recorder) -> None:
    recorder.reply(201, _batch_result(_record("10", dealname="B"), _record("11", dealname="A")))

    objects = [DealProperties(dealname="B"), DealProperties(dealname="A")]
    result = hubspot.objects.deals.batch.create(objects)

    req = recorder.last
    assert req.method == "POST"
    assert req.url.path == "/crm/v4/objects/deals"
    assert recorder.last_json() == {
        "inputs": [
            {"properties": {"dealname": "B", "dealstage": None}},
            {"properties": {"dealname": "A", "dealstage": None}},
        ]
    }
    assert result.status == "COMPLETE"
    assert [r.properties.dealname for r in result.results] == ["B", "A"]
    assert result.links == {"self": "https://api.hubapi.com/batch/1"}


def test_read_sends_selection_values_in_body(hubspot: Hubspot, recorder) -> None:
    recorder.reply(200, _batch_result(_record("2", dealname="Two"), _record("1", dealname="One")))

    result = hubspot.objects.deals.batch.read(["2", "1"], DealProperties())

    req = recorder.last
    assert req.method == "POST"
    assert req.url.path == "/crm/v3/objects/deals/batch/read"
    assert req.url.query == b""
    assert recorder.last_json() == {
        "properties": {"dealname": None, "dealstage": None},
        "properties_with_history": {},
        "associations": {},
        "archived": False,
        "inputs": [{"id": "2"}, {"id": "1"}],
    }
    assert [r.id for r in result.results] == ["2", "1"]
    assert isinstance(result.results[0].properties, DealProperties)
    assert result.results[0].associations == OptionNotDesired()


def test_read_passes_archived_and_plain_selections(hubspot: Hubspot, recorder) -> None:
    recorder.reply(200, _batch_result(_record("1", dealname="One")))

    result = hubspot.objects.deals.batch.read(
        ["1"], ["dealname"], ["dealstage"], ["companies"], archived=True
    )

    body = recorder.last_json()
    assert body["properties"] == ["dealname"]
    assert body["properties_with_history"] == ["dealstage"]
    assert "propertiesWithHistory" not in body
    assert body["associations"] == ["companies"]
    assert body["archived"] is True
    assert result.results[0].properties == {"dealname": "One"}


def test_update_replicates_properties_per_id(hubspot: Hubspot, recorder) -> None:
    recorder.reply(200, _batch_result(_record("3", dealstage="won"), _record("4", dealstage="won")))

    result = hubspot.objects.deals.batch.update(["3", "4"], {"dealstage": "won"})

    req = recorder.last
    assert req.method == "PATCH"
    assert req.url.path == "/crm/v3/objects/deals/batch/update"
    assert recorder.last_json() == {
        "inputs": [
            {"id": "3", "properties": {"dealstage": "won"}},
            {"id": "4", "properties": {"dealstage": "won"}},
        ]
    }
    assert [r.id for r in result.results] == ["3", "4"]


async def test_async_batch_operations(async_hubspot: AsyncHubspot, recorder) -> None:
    recorder.reply(204)
    recorder.reply(201, _batch_result(_record("1", dealname="A")))
    recorder.reply(200, _batch_result(_record("1", dealname="A")))
    recorder.reply(200, _batch_result(_record("1", dealstage="lost")))

    batch = async_hubspot.objects.deals.batch

    await batch.archive(["9", "8"])
    assert recorder.last_json() == {"inputs": [{"id": "9"}, {"id": "8"}]}

    created = await batch.create([DealProperties(dealname="A")])
    assert recorder.last.url.path == "/crm/v4/objects/deals"
    assert created.results[0].properties.dealname == "A"

    read = await batch.read(["1"], DealProperties(), archived=None)
    assert recorder.last_json()["archived"] is False
    assert read.results[0].id == "1"

    updated = await batch.update(["1"], DealProperties(dealstage="lost"))
    assert recorder.last_json() == {
        "inputs": [{"id": "1", "properties": {"dealname": None, "dealstage": "lost"}}]
    }
    assert updated.results[0].properties.dealstage == "lost"
