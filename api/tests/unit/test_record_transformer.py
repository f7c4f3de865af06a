from __future__ import annotations

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from crm_etl.application.services.record_transformer import RecordTransformer
from crm_etl.domain.entities.company import Company
from crm_etl.infrastructure.external.hubspot.types import HubSpotRecord


def _record(external_id: str = "100", **props: Optional[str]) -> HubSpotRecord:
    return HubSpotRecord(external_id=external_id, properties=dict(props))


def test_company_fields_are_trimmed() -> None:
    data = RecordTransformer().transform_company(_record(name="  Acme  ", domain=" acme.io "))

    assert data.external_id == "100"
    assert data.name == "Acme"
    assert data.domain == "acme.io"


@pytest.mark.parametrize("name, domain", [(None, None), ("", "   "), ("   ", "")])
def test_company_missing_fields_get_defaults(name: Optional[str], domain: Optional[str]) -> None:
    data = RecordTransformer().transform_company(_record(name=name, domain=domain))

    assert data.name == "Unknown Company"
    assert data.domain == "unknown.com"


@pytest.mark.asyncio
async def test_contact_fields_are_trimmed_and_blank_optionals_are_none() -> None:
    data = await RecordTransformer().transform_contact(
        _record(email="  ana@example.com ", firstname=" Ana ", lastname="   ")
    )

    assert data is not None
    assert data.email == "ana@example.com"
    assert data.firstname == "Ana"
    assert data.lastname is None
    assert data.company_id is None
    assert data.company_external_id is None


@pytest.mark.asyncio
@pytest.mark.parametrize("email", [None, "", "    "])
async def test_contact_without_email_is_skipped(email: Optional[str]) -> None:
    lookup = AsyncMock()

    data = await RecordTransformer().transform_contact(
        _record(email=email, associatedcompanyid="9"), lookup
    )

    assert data is None
    lookup.assert_not_awaited()


@pytest.mark.asyncio
async def test_contact_company_reference_is_resolved() -> None:
    company = Company(id="local-uuid", external_id="9", name="Acme", domain="acme.io")
    lookup = AsyncMock(return_value=company)

    data = await RecordTransformer().transform_contact(
        _record(email="ana@example.com", associatedcompanyid=" 9 "), lookup
    )

    lookup.assert_awaited_once_with("9")
    assert data.company_id == "local-uuid"
    assert data.has_unresolved_company is False


@pytest.mark.asyncio
async def test_contact_unknown_company_leaves_reference_empty() -> None:
    data = await RecordTransformer().transform_contact(
        _record(email="ana@example.com", associatedcompanyid="404"), AsyncMock(return_value=None)
    )

    assert data is not None
    assert data.company_id is None
    assert data.company_external_id == "404"
    assert data.has_unresolved_company is True


@pytest.mark.asyncio
async def test_contact_lookup_failure_is_not_an_error() -> None:
    lookup = AsyncMock(side_effect=RuntimeError("db caida"))

    data = await RecordTransformer().transform_contact(
        _record(email="ana@example.com", associatedcompanyid="9"), lookup
    )

    assert data is not None
    assert data.company_id is None
    assert data.has_unresolved_company is True


@pytest.mark.asyncio
async def test_contact_without_reference_does_not_lookup() -> None:
    lookup = AsyncMock()

    data = await RecordTransformer().transform_contact(
        _record(email="ana@example.com", associatedcompanyid=""), lookup
    )

    assert data.company_external_id is None
    lookup.assert_not_awaited()
