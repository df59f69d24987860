"""Tests for CustomerService"""
import pytest

from winestock.services import CustomerService, ConflictError, NotFoundError, ValidationError
from winestock.services.customer.customer_service import project_customer_summary


@pytest.fixture
def service(mock_customer_repository):
    return CustomerService(mock_customer_repository)


@pytest.mark.asyncio
async def test_create_customer(service, mock_customer_repository, sample_customer):
    """Test creating a customer with unique data"""
    mock_customer_repository.existing_customer.return_value = None
    mock_customer_repository.create_customer.return_value = {"id": "customer-1"}

    result = await service.create_customer(sample_customer)

    assert result == {"customer_id": "customer-1"}
    mock_customer_repository.existing_customer.assert_awaited_once_with(
        document="12345678000195",
        email="contato@adegacentral.com.br",
        state_registration="123456789",
    )
    stored = mock_customer_repository.create_customer.call_args.args[0]
    assert stored["name"] == "Adega Central"
    assert stored["document"] == "12345678000195"


@pytest.mark.asyncio
async def test_create_customer_normalizes_document(service, mock_customer_repository, sample_customer):
    """Test punctuation in the document is dropped before the uniqueness check"""
    mock_customer_repository.existing_customer.return_value = None
    mock_customer_repository.create_customer.return_value = {"id": "customer-1"}

    await service.create_customer({**sample_customer, "document": "12.345.678/0001-95"})

    kwargs = mock_customer_repository.existing_customer.call_args.kwargs
    assert kwargs["document"] == "12345678000195"


@pytest.mark.asyncio
async def test_create_customer_conflict(service, mock_customer_repository, sample_customer):
    """Test duplicated document is rejected and nothing is written"""
    mock_customer_repository.existing_customer.return_value = {
        "id": "customer-9",
        "document": "12345678000195",
        "email": "other@example.com",
        "state_registration": "987654321",
    }

    with pytest.raises(ConflictError) as exc_info:
        await service.create_customer(sample_customer)

    assert "document: 12345678000195" in exc_info.value.message
    assert "email" not in exc_info.value.message
    assert exc_info.value.details == {"fields": ["document"]}
    mock_customer_repository.create_customer.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_customer_details(service, mock_customer_repository):
    """Test customer details are returned as the repository gives them"""
    customer = {"id": "customer-1", "name": "Adega Central", "address": None}
    mock_customer_repository.find_by_id.return_value = customer

    assert await service.get_customer_details("customer-1") == customer


@pytest.mark.asyncio
async def test_get_customer_details_not_found(service, mock_customer_repository):
    """Test unknown or disabled customer raises NotFoundError"""
    mock_customer_repository.find_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await service.get_customer_details("missing")


@pytest.mark.asyncio
async def test_list_customers_projects_fields(service, mock_customer_repository):
    """Test listing keeps only the list columns"""
    mock_customer_repository.list_customers.return_value = [{
        "id": "customer-1",
        "name": "Adega Central",
        "contact_person": "Marina",
        "email": "contato@adegacentral.com.br",
        "cellphone": "11987654321",
        "business_phone": None,
        "document": "12345678000195",
        "state_registration": "123456789",
    }]

    customers = await service.list_customers("adega")

    mock_customer_repository.list_customers.assert_awaited_once_with("adega")
    assert customers == [{
        "id": "customer-1",
        "name": "Adega Central",
        "contact_person": "Marina",
        "email": "contato@adegacentral.com.br",
        "cellphone": "11987654321",
        "business_phone": None,
    }]


@pytest.mark.asyncio
async def test_list_customers_empty(service, mock_customer_repository):
    mock_customer_repository.list_customers.return_value = []

    assert await service.list_customers() == []


@pytest.mark.asyncio
async def test_list_customers_summary(service, mock_customer_repository):
    """Test summary totals per in-progress consignment"""
    mock_customer_repository.list_customers_summary.return_value = [{
        "id": "c1",
        "name": "Adega",
        "consigned": [{
            "id": "k1",
            "wines_on_consigned": [
                {"balance": 10, "wine": {"type": "Tinto"}},
                {"balance": 5, "wine": {"type": "Tinto"}},
                {"balance": 3, "wine": {"type": "Branco"}},
            ],
        }],
    }]

    summary = await service.list_customers_summary()

    assert summary == [{
        "customer_id": "c1",
        "customer": "Adega",
        "consigned_id": "k1",
        "total_types": 2,
        "total_balance": 18,
    }]


@pytest.mark.asyncio
async def test_list_customers_summary_counts_distinct_types(service, mock_customer_repository):
    """Test repeated wine types count once while every balance is summed"""
    mock_customer_repository.list_customers_summary.return_value = [{
        "id": "c1",
        "name": "Adega",
        "consigned": [{
            "id": "k1",
            "wines_on_consigned": [
                {"balance": 10, "wine": {"type": "Tinto"}},
                {"balance": 20, "wine": {"type": "Branco"}},
                {"balance": 5, "wine": {"type": "Tinto"}},
            ],
        }],
    }]

    summary = await service.list_customers_summary()

    assert summary[0]["total_types"] == 2
    assert summary[0]["total_balance"] == 35


def test_project_customer_summary_empty_consignment():
    """Test a consignment with no line items totals zero"""
    rows = project_customer_summary({
        "id": "c1",
        "name": "Adega",
        "consigned": [{"id": "k1", "wines_on_consigned": []}],
    })

    assert rows == [{
        "customer_id": "c1",
        "customer": "Adega",
        "consigned_id": "k1",
        "total_types": 0,
        "total_balance": 0,
    }]


def test_project_customer_summary_one_row_per_consignment():
    rows = project_customer_summary({
        "id": "c1",
        "name": "Adega",
        "consigned": [
            {"id": "k1", "wines_on_consigned": [{"balance": 4, "wine": {"type": "Rosé"}}]},
            {"id": "k2", "wines_on_consigned": [{"balance": 6, "wine": {"type": "Tinto"}}]},
        ],
    })

    assert [row["consigned_id"] for row in rows] == ["k1", "k2"]
    assert [row["total_balance"] for row in rows] == [4, 6]


@pytest.mark.asyncio
async def test_update_customer(service, mock_customer_repository):
    """Test partial update only forwards fields that were sent"""
    mock_customer_repository.existing_customer.return_value = None
    mock_customer_repository.find_by_id.return_value = {"id": "customer-1"}
    mock_customer_repository.update_customer.return_value = {"id": "customer-1"}

    result = await service.update_customer({"name": "Adega Nova"}, "customer-1")

    assert result == {"updated_customer_id": "customer-1"}
    mock_customer_repository.existing_customer.assert_awaited_once_with(
        document=None, email=None, state_registration=None, exclude_id="customer-1",
    )
    mock_customer_repository.update_customer.assert_awaited_once_with("customer-1", {"name": "Adega Nova"})


@pytest.mark.asyncio
async def test_update_customer_conflict_reported_before_not_found(service, mock_customer_repository):
    """Test a conflicting payload for an unknown id reports the conflict"""
    mock_customer_repository.existing_customer.return_value = {
        "id": "customer-2",
        "email": "taken@example.com",
        "document": "98765432000110",
        "state_registration": None,
    }
    mock_customer_repository.find_by_id.return_value = None

    with pytest.raises(ConflictError) as exc_info:
        await service.update_customer({"email": "taken@example.com"}, "missing")

    assert "email: taken@example.com" in exc_info.value.message
    mock_customer_repository.find_by_id.assert_not_awaited()
    mock_customer_repository.update_customer.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_customer_not_found(service, mock_customer_repository):
    mock_customer_repository.existing_customer.return_value = None
    mock_customer_repository.find_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await service.update_customer({"name": "Adega Nova"}, "missing")

    mock_customer_repository.update_customer.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_customer_disables(service, mock_customer_repository):
    """Test delete is a soft delete"""
    mock_customer_repository.find_by_id.return_value = {"id": "customer-1"}

    assert await service.delete_customer("customer-1") is None

    mock_customer_repository.disable_customer.assert_awaited_once_with("customer-1")


@pytest.mark.asyncio
async def test_delete_customer_not_found(service, mock_customer_repository):
    mock_customer_repository.find_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await service.delete_customer("missing")

    mock_customer_repository.disable_customer.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "document", "state_registration"])
async def test_update_customer_rejects_null_required_field(service, mock_customer_repository, field):
    """Test a required column cannot be cleared through a partial update"""
    with pytest.raises(ValidationError) as exc_info:
        await service.update_customer({field: None}, "customer-1")

    assert exc_info.value.details == {"fields": [field]}
    mock_customer_repository.existing_customer.assert_not_awaited()
    mock_customer_repository.update_customer.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_customer_invalid_document(service, mock_customer_repository, sample_customer):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_customer({**sample_customer, "document": "123"})

    assert exc_info.value.field == "document"
    mock_customer_repository.create_customer.assert_not_awaited()
