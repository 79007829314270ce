"""
Test suite for POST /v1/loan-offers.

- Route validates the payload and maps it to the use case request
- Route delegates to the use case via dependency injection
- Amounts cross the boundary as strings
- Domain errors become structured 404/422/503 responses
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_credit.adapters.in_memory_bank_rate_repository import InMemoryBankRateRepository
from car_credit.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from car_credit.domain.errors import DataSourceUnavailableError, NotFoundError, ValidationError
from car_credit.domain.loan import ClientType, LoanParameters, RepaymentSchedule
from car_credit.domain.loan_calculator import assemble_offers
from car_credit.domain.rates import BankRates, BankRateTable
from car_credit.domain.vehicle import Vehicle
from car_credit.entrypoints.http.dependencies import get_calculate_loan_offers_use_case
from car_credit.entrypoints.http.exception_handlers import register_exception_handlers
from car_credit.entrypoints.http.routes.loan_offers import router
from car_credit.use_cases.calculate_loan_offers import (
    CalculateLoanOffers,
    CalculateLoanOffersResponse,
)

VEHICLE = Vehicle(
    full_model_code="1PP2A5HMJ6B0A0E0",
    model_name="Peugeot 2008",
    body_label="SUV",
    grade_label="Active",
    price=Decimal("1000000"),
    year=2024,
    engine_label="1.2 PureTech 100",
    transmission="MT6",
    fuel_type="Petrol",
    photo_link="2008/active.png",
)

FLAT = tuple(tuple(Decimal("12.5") for _ in range(7)) for _ in range(7))
RATES = BankRates(
    privatbank=BankRateTable(individual=FLAT, legal=FLAT),
    oshadbank=BankRateTable(individual=FLAT, legal=FLAT),
    agricole=BankRateTable(individual=FLAT, legal=FLAT),
)


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case(app: FastAPI) -> Mock:
    use_case = Mock()
    app.dependency_overrides[get_calculate_loan_offers_use_case] = lambda: use_case
    return use_case


@pytest.fixture
def real_use_case(app: FastAPI) -> CalculateLoanOffers:
    use_case = CalculateLoanOffers(
        vehicle_catalog_repository=InMemoryVehicleCatalogRepository([VEHICLE]),
        bank_rate_repository=InMemoryBankRateRepository(RATES),
    )
    app.dependency_overrides[get_calculate_loan_offers_use_case] = lambda: use_case
    return use_case


def sample_response() -> CalculateLoanOffersResponse:
    params = LoanParameters(60, 30, repayment_schedule=RepaymentSchedule.ANNUITY)
    return CalculateLoanOffersResponse(
        vehicle=VEHICLE,
        price=Decimal("1000000"),
        down_payment_amount=Decimal("300000"),
        parameters=params,
        offers=assemble_offers(Decimal("1000000"), params, RATES),
    )


# ==============================================================================
# Happy Path
# ==============================================================================


def test_returns_all_offers_as_strings(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = sample_response()

    response = client.post(
        "/v1/loan-offers",
        json={
            "vehicle_code": "1PP2A5HMJ6B0A0E0",
            "term_months": 60,
            "down_payment_percent": 30,
            "repayment_schedule": "annuity",
        },
    )

    assert response.status_code == 200
    data = response.json()

    assert data["vehicle_code"] == "1PP2A5HMJ6B0A0E0"
    assert data["price"] == "1000000"
    assert data["down_payment_amount"] == "300000"
    assert data["repayment_schedule"] == "annuity"
    assert [offer["product"] for offer in data["offers"]] == [
        "oschadbank",
        "agricole",
        "privatbank",
        "privatbank24",
        "privatbank36",
    ]
    for offer in data["offers"]:
        assert isinstance(offer["monthly_payment"], str)
        assert isinstance(offer["upfront_cost"], str)
        assert offer["visible"] is True
        assert offer["computable"] is True
    assert data["offers"][3]["rate"] == "3.9"


def test_maps_payload_to_use_case_request(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = sample_response()

    client.post(
        "/v1/loan-offers",
        json={
            "vehicle_code": "1PP2A5HMJ6B0A0E0",
            "base_price": "950000.50",
            "price_adjustment": "20000",
            "term_months": 48,
            "down_payment_percent": 35,
            "client_type": "legal",
        },
    )

    request = mock_use_case.execute.call_args[0][0]
    assert request.vehicle_code == "1PP2A5HMJ6B0A0E0"
    assert request.base_price == Decimal("950000.50")
    assert request.price_adjustment == Decimal("20000")
    assert request.parameters == LoanParameters(
        term_months=48,
        down_payment_percent=35,
        client_type=ClientType.LEGAL,
        repayment_schedule=RepaymentSchedule.CLASSIC,
    )


def test_legal_client_response_echoes_effective_parameters(
    client: TestClient, real_use_case: CalculateLoanOffers
) -> None:
    response = client.post(
        "/v1/loan-offers",
        json={
            "vehicle_code": "1PP2A5HMJ6B0A0E0",
            "term_months": 84,
            "down_payment_percent": 20,
            "client_type": "legal",
            "repayment_schedule": "annuity",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["term_months"] == 60
    assert data["down_payment_percent"] == 30
    assert data["repayment_schedule"] == "classic"
    visible = [offer["product"] for offer in data["offers"] if offer["visible"]]
    assert visible == ["oschadbank", "agricole"]


def test_upfront_cost_end_to_end(client: TestClient, real_use_case: CalculateLoanOffers) -> None:
    response = client.post(
        "/v1/loan-offers",
        json={"vehicle_code": "1PP2A5HMJ6B0A0E0", "term_months": 60, "down_payment_percent": 30},
    )

    offers = {offer["product"]: offer for offer in response.json()["offers"]}
    assert offers["privatbank"]["upfront_cost"] == "411166.67"
    assert offers["oschadbank"]["upfront_cost"] == "407756.67"


# ==============================================================================
# Validation
# ==============================================================================


def test_out_of_range_term_returns_422(
    client: TestClient, real_use_case: CalculateLoanOffers
) -> None:
    response = client.post(
        "/v1/loan-offers",
        json={"vehicle_code": "1PP2A5HMJ6B0A0E0", "term_months": 96, "down_payment_percent": 30},
    )

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "term_months"
    assert data["errors"][0]["code"] == "OUT_OF_RANGE"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"term_months": "sixty"}, "term_months"),
        ({"client_type": "company"}, "client_type"),
        ({"repayment_schedule": "balloon"}, "repayment_schedule"),
        ({"price_adjustment": "1e5"}, "price_adjustment"),
        ({"base_price": "-100"}, "base_price"),
        ({"vehicle_code": ""}, "vehicle_code"),
    ],
)
def test_malformed_payload_returns_422(
    client: TestClient, mock_use_case: Mock, overrides: dict, field: str
) -> None:
    payload = {"vehicle_code": "1PP2A5HMJ6B0A0E0", "term_months": 60, "down_payment_percent": 30}
    payload.update(overrides)

    response = client.post("/v1/loan-offers", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == field
    mock_use_case.execute.assert_not_called()


def test_oversized_base_price_returns_422(
    client: TestClient, real_use_case: CalculateLoanOffers
) -> None:
    response = client.post(
        "/v1/loan-offers",
        json={
            "vehicle_code": "1PP2A5HMJ6B0A0E0",
            "base_price": "1" + "0" * 27,
            "term_months": 60,
            "down_payment_percent": 30,
            "repayment_schedule": "annuity",
        },
    )

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "base_price"


def test_largest_accepted_base_price_returns_offers(
    client: TestClient, real_use_case: CalculateLoanOffers
) -> None:
    response = client.post(
        "/v1/loan-offers",
        json={
            "vehicle_code": "1PP2A5HMJ6B0A0E0",
            "base_price": "999999999999.99",
            "term_months": 60,
            "down_payment_percent": 30,
        },
    )

    assert response.status_code == 200
    assert response.json()["price"] == "999999999999.99"


def test_missing_required_field_returns_422(client: TestClient, mock_use_case: Mock) -> None:
    response = client.post("/v1/loan-offers", json={"vehicle_code": "1PP2A5HMJ6B0A0E0"})

    assert response.status_code == 422
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"term_months", "down_payment_percent"}


# ==============================================================================
# Domain errors
# ==============================================================================


def test_use_case_validation_error_returns_422(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = ValidationError(
        errors=[{"field": "price_adjustment", "message": "Must be a multiple of 1000", "code": "INVALID_STEP"}]
    )

    response = client.post(
        "/v1/loan-offers",
        json={"vehicle_code": "X", "term_months": 60, "down_payment_percent": 30},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_STEP"


def test_unknown_vehicle_returns_404(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError("Vehicle", "X")

    response = client.post(
        "/v1/loan-offers",
        json={"vehicle_code": "X", "term_months": 60, "down_payment_percent": 30},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_unavailable_rates_return_503(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = DataSourceUnavailableError("Bank rate API", "HTTP 502")

    response = client.post(
        "/v1/loan-offers",
        json={"vehicle_code": "X", "term_months": 60, "down_payment_percent": 30},
    )

    assert response.status_code == 503
    assert response.json() == {
        "detail": "Bank rate API is unavailable: HTTP 502",
        "code": "DATA_SOURCE_UNAVAILABLE",
    }
