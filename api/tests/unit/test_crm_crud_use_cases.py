"""
Tests de los casos de uso CRUD de empresas y contactos.
"""
from __future__ import annotations

import pytest

from crm_etl.application.dto.company_dto import CompanyCreateDTO, CompanyUpdateDTO
from crm_etl.application.dto.contact_dto import ContactCreateDTO, ContactUpdateDTO
from crm_etl.application.use_cases.company_use_cases import CompanyUseCases
from crm_etl.application.use_cases.contact_use_cases import ContactUseCases
from crm_etl.infrastructure.repositories.company_repository import CompanyRepository
from crm_etl.infrastructure.repositories.contact_repository import ContactRepository
from crm_etl.shared.exceptions.domain import (
    EntityAlreadyExistsException,
    EntityNotFoundException,
    ValidationException,
)


MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def company_use_cases(db_session) -> CompanyUseCases:
    return CompanyUseCases(CompanyRepository(db_session))


@pytest.fixture
def contact_use_cases(db_session) -> ContactUseCases:
    return ContactUseCases(ContactRepository(db_session), CompanyRepository(db_session))


@pytest.mark.asyncio
async def test_create_and_get_company(company_use_cases: CompanyUseCases) -> None:
    created = await company_use_cases.create_company(
        CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io")
    )

    fetched = await company_use_cases.get_company(created.id)

    assert fetched.hubspot_id == "c-1"
    assert fetched.name == "Acme"
    assert await company_use_cases.count_companies() == 1


@pytest.mark.asyncio
async def test_create_company_rejects_duplicate_hubspot_id(company_use_cases: CompanyUseCases) -> None:
    dto = CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io")
    await company_use_cases.create_company(dto)

    with pytest.raises(EntityAlreadyExistsException):
        await company_use_cases.create_company(dto)


@pytest.mark.asyncio
async def test_get_company_validates_id(company_use_cases: CompanyUseCases) -> None:
    with pytest.raises(ValidationException):
        await company_use_cases.get_company("no-es-uuid")

    with pytest.raises(EntityNotFoundException):
        await company_use_cases.get_company(MISSING_ID)


@pytest.mark.asyncio
async def test_update_company_partial_and_collision(company_use_cases: CompanyUseCases) -> None:
    acme = await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io"))
    await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-2", name="Globex", domain="globex.com"))

    updated = await company_use_cases.update_company(acme.id, CompanyUpdateDTO(name="Acme Labs"))
    assert updated.name == "Acme Labs"
    assert updated.domain == "acme.io"

    with pytest.raises(EntityAlreadyExistsException):
        await company_use_cases.update_company(acme.id, CompanyUpdateDTO(hubspot_id="c-2"))

    # Reasignar su propio hubspot_id no es colision
    same = await company_use_cases.update_company(acme.id, CompanyUpdateDTO(hubspot_id="c-1"))
    assert same.hubspot_id == "c-1"


@pytest.mark.asyncio
async def test_delete_company(company_use_cases: CompanyUseCases) -> None:
    created = await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io"))

    await company_use_cases.delete_company(created.id)

    with pytest.raises(EntityNotFoundException):
        await company_use_cases.delete_company(created.id)


@pytest.mark.asyncio
async def test_create_contact_validations(
    company_use_cases: CompanyUseCases, contact_use_cases: ContactUseCases
) -> None:
    acme = await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io"))

    created = await contact_use_cases.create_contact(
        ContactCreateDTO(hubspot_id="p-1", email=" ana@acme.io ", firstname="Ana", company_id=acme.id)
    )
    assert created.email == "ana@acme.io"
    assert created.company_id == acme.id

    with pytest.raises(ValidationException):
        await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-2", email="sin-arroba"))

    with pytest.raises(EntityAlreadyExistsException):
        await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-1", email="otro@acme.io"))

    with pytest.raises(EntityAlreadyExistsException):
        await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-3", email="ana@acme.io"))

    with pytest.raises(EntityNotFoundException):
        await contact_use_cases.create_contact(
            ContactCreateDTO(hubspot_id="p-4", email="eva@acme.io", company_id=MISSING_ID)
        )

    with pytest.raises(ValidationException):
        await contact_use_cases.create_contact(
            ContactCreateDTO(hubspot_id="p-5", email="eva@acme.io", company_id="123")
        )


@pytest.mark.asyncio
async def test_update_contact(
    company_use_cases: CompanyUseCases, contact_use_cases: ContactUseCases
) -> None:
    acme = await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io"))
    ana = await contact_use_cases.create_contact(
        ContactCreateDTO(hubspot_id="p-1", email="ana@acme.io", company_id=acme.id)
    )
    await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-2", email="luis@acme.io"))

    updated = await contact_use_cases.update_contact(ana.id, ContactUpdateDTO(lastname="Diaz"))
    assert updated.lastname == "Diaz"
    assert updated.company_id == acme.id

    detached = await contact_use_cases.update_contact(ana.id, ContactUpdateDTO(company_id=None))
    assert detached.company_id is None

    with pytest.raises(EntityAlreadyExistsException):
        await contact_use_cases.update_contact(ana.id, ContactUpdateDTO(email="luis@acme.io"))

    with pytest.raises(EntityAlreadyExistsException):
        await contact_use_cases.update_contact(ana.id, ContactUpdateDTO(hubspot_id="p-2"))

    with pytest.raises(ValidationException):
        await contact_use_cases.update_contact(ana.id, ContactUpdateDTO(email="mal"))


@pytest.mark.asyncio
async def test_list_contacts_by_company(
    company_use_cases: CompanyUseCases, contact_use_cases: ContactUseCases
) -> None:
    acme = await company_use_cases.create_company(CompanyCreateDTO(hubspot_id="c-1", name="Acme", domain="acme.io"))
    await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-1", email="ana@acme.io", company_id=acme.id))
    await contact_use_cases.create_contact(ContactCreateDTO(hubspot_id="p-2", email="eva@otra.io"))

    contacts = await contact_use_cases.list_by_company(acme.id)

    assert [c.hubspot_id for c in contacts] == ["p-1"]
    assert len(await contact_use_cases.list_contacts()) == 2

    with pytest.raises(EntityNotFoundException):
        await contact_use_cases.list_by_company(MISSING_ID)
