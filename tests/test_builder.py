from __future__ import annotations

import httpx
import pytest

from hubspot_crm import (
    AsyncHubspot,
    Hubspot,
    HubspotBuilder,
    HubspotBuilderError,
    MissingDomainError,
    MissingPortalIdError,
    MissingTokenError,
)


def _no_network(request: httpx.Request) -> httpx.Response:
    pytest.fail(f"Unexpected network call: {request.method} {request.url!s}")


def test_build_with_all_options() -> None:
    hubspot = (
        Hubspot.builder()
        .domain("api.hubapi.com")
        .token("pat-na1-test")
        .portal_id("1888283")
        .timeout(5.0)
        .transport(httpx.MockTransport(_no_network))
        .build()
    )
    with hubspot:
        assert isinstance(hubspot, Hubspot)
        assert hubspot.portal_id == "1888283"


@pytest.mark.parametrize(
    ("builder", "error"),
    [
        (HubspotBuilder().token("t").portal_id("1"), MissingDomainError),
        (HubspotBuilder().domain("api.hubapi.com").portal_id("1"), MissingTokenError),
        (HubspotBuilder().domain("api.hubapi.com").token("t"), MissingPortalIdError),
        (HubspotBuilder().domain("").token("t").portal_id("1"), MissingDomainError),
        (HubspotBuilder().domain("api.hubapi.com").token("").portal_id("1"), MissingTokenError),
        (HubspotBuilder().domain("api.hubapi.com").token("t").portal_id(""), MissingPortalIdError),
    ],
)
def test_build_rejects_missing_or_empty_options(builder: HubspotBuilder, error: type) -> None:
    with pytest.raises(error) as exc_info:
        builder.build()
    assert isinstance(exc_info.value, HubspotBuilderError)


def test_missing_option_errors_name_the_option() -> None:
    with pytest.raises(MissingTokenError) as exc_info:
        HubspotBuilder().domain("api.hubapi.com").portal_id("1").build()
    assert "token" in str(exc_info.value)


def test_direct_construction_validates_like_builder() -> None:
    with pytest.raises(MissingPortalIdError):
        Hubspot(token="pat-na1-test")


def test_from_env_reads_settings() -> None:
    builder = HubspotBuilder.from_env(
        {"HUBSPOT_TOKEN": "pat-env", "HUBSPOT_PORTAL_ID": "42"}
    ).transport(httpx.MockTransport(_no_network))

    with builder.build() as hubspot:
        assert hubspot.portal_id == "42"
        assert hubspot._http.domain == "api.hubapi.com"


def test_from_env_without_token_fails_at_build() -> None:
    builder = HubspotBuilder.from_env({"HUBSPOT_DOMAIN": "api.hubapi.eu", "HUBSPOT_PORTAL_ID": "1"})
    with pytest.raises(MissingTokenError):
        builder.build()


async def test_build_async_shares_validation_and_options() -> None:
    with pytest.raises(MissingDomainError):
        HubspotBuilder().token("t").portal_id("1").build_async()

    hubspot = (
        HubspotBuilder()
        .domain("api.hubapi.com")
        .token("pat-na1-test")
        .portal_id("7")
        .async_transport(httpx.MockTransport(_no_network))
        .build_async()
    )
    async with hubspot:
        assert isinstance(hubspot, AsyncHubspot)
        assert hubspot.portal_id == "7"
