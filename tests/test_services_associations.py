from __future__ import annotations

from datetime import datetime, timezone

import pytest

from hubspot_crm import (
    AssociationCreationDetails,
    AssociationLinks,
    AsyncHubspot,
    EngagementType,
    Hubspot,
    HubspotRecord,
    NoteProperties,
    ObjectType,
    OptionNotDesired,
)

OWNER = {
    "id": "41629779",
    "email": "owner@example.com",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "userId": 9586504,
    "createdAt": "2019-12-25T13:01:35.228Z",
    "updatedAt": "2023-08-22T13:40:26.790Z",
    "archived": False,
    "teams": [{"id": "368389", "name": "Sales", "primary": True}],
}

CREATED_ASSOCIATION = {
    "fromObjectTypeId": "0-3",
    "fromObjectId": 15,
    "toObjectTypeId": "0-2",
    "toObjectId": 30,
    "labels": ["Primary"],
}


# =============================================================================
# Associations
# =============================================================================


def test_list_sends_paging_only(hubspot: Hubspot, recorder) -> None:
    recorder.reply(
        200,
        {
            "results": [
                {
                    "toObjectId": 30,
                    "associationTypes": [
                        {"category": "HUBSPOT_DEFINED", "typeId": 5, "label": None},
                        {"category": "USER_DEFINED", "typeId": 12, "label": "Primary"},
                    ],
                }
            ],
            "paging": {"next": {"after": "MzA="}},
        },
    )

    page = hubspot.objects.deals.associations.list(
        "15", ObjectType.COMPANIES, limit=500, after="MjA="
    )

    req = recorder.last
    assert req.method == "GET"
    assert req.url.path == "/crm/v4/objects/deals/15/associations/companies"
    assert list(req.url.params.multi_items()) == [("limit", "500"), ("after", "MjA=")]

    link = page.results[0]
    assert link.to_object_id == "30"
    assert [t.type_id for t in link.association_types] == ["5", "12"]
    assert link.association_types[1].label == "Primary"
    assert page.next_cursor == "MzA="


def test_list_without_paging_has_no_query(hubspot: Hubspot, recorder) -> None:
    recorder.reply(200, {"results": []})

    page = hubspot.objects.contacts.associations.list("1", "p_custom")

    assert recorder.last.url.path == "/crm/v4/objects/contacts/1/associations/p_custom"
    assert recorder.last.url.query == b""
    assert page.has_next is False


def test_create_puts_label_list(hubspot: Hubspot, recorder) -> None:
    recorder.reply(200, CREATED_ASSOCIATION)

    result = hubspot.objects.deals.associations.create(
        "15",
        ObjectType.COMPANIES,
        "30",
        [
            AssociationCreationDetails(category="HUBSPOT_DEFINED", type_id="5"),
            AssociationCreationDetails(category="USER_DEFINED", type_id="12"),
        ],
    )

    req = recorder.last
    assert req.method == "PUT"
    assert req.url.path == "/crm/v4/objects/deals/15/associations/companies/30"
    assert recorder.last_json() == [
        {"category": "HUBSPOT_DEFINED", "type_id": "5"},
        {"category": "USER_DEFINED", "type_id": "12"},
    ]
    assert result.from_object_id == "15"
    assert result.to_object_id == "30"
    assert result.labels == ["Primary"]


def test_delete_removes_all_labels(hubspot: Hubspot, recorder) -> None:
    recorder.reply(204)

    assert hubspot.objects.deals.associations.delete("15", "companies", "30") is None

    req = recorder.last
    assert req.method == "DELETE"
    assert req.url.path == "/crm/v4/objects/deals/15/associations/companies/30"


async def test_async_associations(async_hubspot: AsyncHubspot, recorder) -> None:
    recorder.reply(200, {"results": [{"toObjectId": "7"}]})
    recorder.reply(200, CREATED_ASSOCIATION)
    recorder.reply(204)

    associations = async_hubspot.objects.companies.associations

    page = await associations.list("3", ObjectType.CONTACTS, limit=1)
    assert list(recorder.last.url.params.multi_items()) == [("limit", "1")]
    assert page.results[0].association_types == []

    await associations.create(
        "3",
        ObjectType.CONTACTS,
        "7",
        [AssociationCreationDetails(category="HUBSPOT_DEFINED", type_id="2")],
    )
    assert recorder.last.method == "PUT"
    assert recorder.last_json() == [{"category": "HUBSPOT_DEFINED", "type_id": "2"}]

    await associations.delete("3", ObjectType.CONTACTS, "7")
    assert recorder.last.method == "DELETE"


# =============================================================================
# Owners
# =============================================================================


@pytest.mark.parametrize(("archived", "expected"), [(False, "false"), (True, "true")])
def test_owner_read_sends_archived_flag(
    hubspot: Hubspot, recorder, archived: bool, expected: str
) -> None:
    recorder.reply(200, OWNER)

    owner = hubspot.owners.read("41629779", archived=archived)

    req = recorder.last
    assert req.method == "GET"
    assert req.url.path == "/crm/v3/owners/41629779"
    assert list(req.url.params.multi_items()) == [("archived", expected)]
    assert owner.first_name == "Ada"
    assert owner.user_id == 9586504
    assert owner.teams is not None
    assert owner.teams[0].primary is True


async def test_async_owner_read(async_hubspot: AsyncHubspot, recorder) -> None:
    recorder.reply(200, {**OWNER, "teams": None})

    owner = await async_hubspot.owners.read("41629779")

    assert recorder.last.url.query == b"archived=false"
    assert owner.email == "owner@example.com"
    assert owner.teams is None


# =============================================================================
# Notes
# =============================================================================


def test_note_created_with_built_in_associations(hubspot: Hubspot, recorder) -> None:
    recorder.reply(
        201,
        {
            "id": "555",
            "properties": {
                "hs_note_body": "Called about renewal",
                "hs_timestamp": "2024-03-01T09:30:00Z",
            },
            "createdAt": "2024-03-01T09:30:01Z",
            "updatedAt": "2024-03-01T09:30:01Z",
            "archived": False,
        },
    )

    note = (
        HubspotRecord.with_properties_and_associations(
            NoteProperties(
                body="Called about renewal",
                timestamp=datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
            )
        )
        .attach_built_in_associations(AssociationLinks.NOTE_TO_CONTACT, ["101", "102"])
        .attach_built_in_associations(AssociationLinks.NOTE_TO_DEAL, ["900"])
    )

    created = hubspot.engagements.notes.basic.create(note)

    req = recorder.last
    assert req.method == "POST"
    assert req.url.path == "/crm/v3/objects/notes"
    body = recorder.last_json()
    assert body["properties"] == {
        "hs_note_body": "Called about renewal",
        "hs_timestamp": "2024-03-01T09:30:00Z",
        "hubspot_owner_id": None,
    }
    assert [(a["to"]["id"], a["types"][0]["associationTypeId"]) for a in body["associations"]] == [
        ("101", "202"),
        ("102", "202"),
        ("900", "214"),
    ]

    assert created.id == "555"
    assert created.properties.body == "Called about renewal"
    assert created.associations == OptionNotDesired()
    assert created.properties_with_history == OptionNotDesired()


def test_notes_resolve_to_engagement_path(hubspot: Hubspot) -> None:
    assert hubspot.engagements.notes.basic.path() == EngagementType.NOTES.to_path() == "notes"
