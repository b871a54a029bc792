from uuid import uuid4

import pytest
from pydantic import ValidationError

from xenia.app.use_cases.properties import (
    CreatePropertyUseCase,
    DeactivatePropertyUseCase,
    GetPropertyUseCase,
    PropertyCreate,
    PropertyUpdate,
    UpdatePropertyUseCase,
)
from xenia.domain.entities import Property, PropertyOwner

ORG_ID = uuid4()


@pytest.fixture
def villa():
    return Property(id=uuid4(), org_id=ORG_ID, name="Villa Demo", code="VD-1")


@pytest.mark.asyncio
async def test_create_property_defaults_to_active(mock_uow):
    result = await CreatePropertyUseCase(mock_uow).execute(
        ORG_ID, PropertyCreate(name="Casa Azul")
    )

    assert result.is_ok()
    assert result.value.org_id == ORG_ID
    assert result.value.name == "Casa Azul"
    assert result.value.is_active is True
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_with_owner_of_the_organization(mock_uow):
    owner = PropertyOwner(id=uuid4(), org_id=ORG_ID, name="Marta Ruiz")
    mock_uow.property_owners.get_in_org.return_value = owner

    result = await CreatePropertyUseCase(mock_uow).execute(
        ORG_ID, PropertyCreate(name="Casa Azul", owner_id=owner.id)
    )

    assert result.is_ok()
    assert result.value.owner_id == owner.id
    mock_uow.property_owners.get_in_org.assert_awaited_once_with(ORG_ID, owner.id)


@pytest.mark.asyncio
async def test_create_with_unknown_owner_is_rejected(mock_uow):
    """Owners of other organizations are indistinguishable from missing ones"""
    mock_uow.property_owners.get_in_org.return_value = None

    result = await CreatePropertyUseCase(mock_uow).execute(
        ORG_ID, PropertyCreate(name="Casa Azul", owner_id=uuid4())
    )

    assert result.error.code == "OWNER_NOT_FOUND"
    assert result.error.message == "Owner not found"
    mock_uow.properties.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_property_outside_org_is_not_found(mock_uow):
    mock_uow.properties.get_in_org.return_value = None

    result = await GetPropertyUseCase(mock_uow).execute(ORG_ID, uuid4())

    assert result.error.code == "NOT_FOUND"
    assert result.error.message == "Not found"


@pytest.mark.asyncio
async def test_update_applies_only_sent_fields(mock_uow, villa):
    mock_uow.properties.get_in_org.return_value = villa

    result = await UpdatePropertyUseCase(mock_uow).execute(
        ORG_ID, villa.id, PropertyUpdate.model_validate({"name": "Villa Nueva"})
    )

    assert result.is_ok()
    assert villa.name == "Villa Nueva"
    assert villa.code == "VD-1"
    mock_uow.properties.update.assert_awaited_once_with(villa)


@pytest.mark.asyncio
async def test_update_can_clear_nullable_fields(mock_uow, villa):
    mock_uow.properties.get_in_org.return_value = villa

    await UpdatePropertyUseCase(mock_uow).execute(
        ORG_ID, villa.id, PropertyUpdate.model_validate({"code": None})
    )

    assert villa.code is None


def test_update_rejects_null_name():
    with pytest.raises(ValidationError):
        PropertyUpdate.model_validate({"name": None})


@pytest.mark.asyncio
async def test_deactivate_is_a_soft_delete(mock_uow, villa):
    mock_uow.properties.get_in_org.return_value = villa

    result = await DeactivatePropertyUseCase(mock_uow).execute(ORG_ID, villa.id)

    assert result.is_ok()
    assert villa.is_active is False
    mock_uow.properties.update.assert_awaited_once_with(villa)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_with_unknown_owner_is_rejected(mock_uow, villa):
    mock_uow.properties.get_in_org.return_value = villa
    mock_uow.property_owners.get_in_org.return_value = None
    foreign_owner_id = uuid4()

    result = await UpdatePropertyUseCase(mock_uow).execute(
        ORG_ID, villa.id, PropertyUpdate.model_validate({"ownerId": str(foreign_owner_id)})
    )

    assert result.error.code == "OWNER_NOT_FOUND"
    assert villa.owner_id is None
    mock_uow.property_owners.get_in_org.assert_awaited_once_with(ORG_ID, foreign_owner_id)
    mock_uow.properties.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_detaching_owner_skips_lookup(mock_uow, villa):
    villa.owner_id = uuid4()
    mock_uow.properties.get_in_org.return_value = villa

    result = await UpdatePropertyUseCase(mock_uow).execute(
        ORG_ID, villa.id, PropertyUpdate.model_validate({"ownerId": None})
    )

    assert result.is_ok()
    assert villa.owner_id is None
    mock_uow.property_owners.get_in_org.assert_not_called()
