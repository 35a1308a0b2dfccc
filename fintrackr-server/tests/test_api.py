import asyncio
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from fintrackr.core.security import create_access_token
from fintrackr.infrastructure.database.repositories.transfer_repository import SqlTransferRepository

from .conftest import OTHER_OWNER


async def create_wallet(client: AsyncClient, name: str, balance: str) -> dict:
    response = await client.post("/api/wallets", json={"name": name, "balance": balance})
    assert response.status_code == 201, response.text
    return response.json()


async def wallet_balance(client: AsyncClient, wallet_id: str) -> Decimal:
    response = await client.get(f"/api/wallets/{wallet_id}")
    assert response.status_code == 200, response.text
    return Decimal(response.json()["balance"])


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_requests_need_a_valid_token(client):
    anonymous = await client.get("/api/wallets", headers={"Authorization": ""})
    assert anonymous.status_code in (401, 403)

    forged = await client.get("/api/wallets", headers={"Authorization": "Bearer not-a-jwt"})
    assert forged.status_code == 401


async def test_transfer_scenario_over_http(client):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "500")

    created = await client.post(
        "/api/transfers",
        json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "200", "date": "2026-10-19"},
    )
    assert created.status_code == 201, created.text
    transfer = created.json()
    assert transfer["status"] == "completed"
    assert transfer["applied"] is True
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (800, 700)

    updated = await client.patch(f"/api/transfers/{transfer['id']}", json={"amount": "300"})
    assert updated.status_code == 200, updated.text
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (700, 800)

    deleted = await client.delete(f"/api/transfers/{transfer['id']}")
    assert deleted.status_code == 200
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (1000, 500)

    missing = await client.get(f"/api/transfers/{transfer['id']}")
    assert missing.status_code == 404


async def test_validation_errors_map_to_400(client):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "500")

    same = await client.post("/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": a["id"], "amount": "10"})
    zero = await client.post("/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "0"})

    assert same.status_code == 400
    assert same.json()["detail"] == "same wallet"
    assert zero.status_code == 400
    assert await wallet_balance(client, a["id"]) == 1000


async def test_failed_write_rolls_back_the_whole_operation(client, monkeypatch):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "500")

    async def broken_set_applied(self, model, **kwargs):
        raise SQLAlchemyError("disk I/O error")

    monkeypatch.setattr(SqlTransferRepository, "set_applied", broken_set_applied)
    response = await client.post(
        "/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "200"}
    )
    monkeypatch.undo()

    assert response.status_code == 503
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (1000, 500)
    listing = await client.get("/api/transfers")
    assert listing.json()["transfers"] == []


async def test_wallet_delete_conflict_and_summary_route(client):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "0")
    await client.post("/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "1"})

    conflict = await client.delete(f"/api/wallets/{a['id']}")
    assert conflict.status_code == 409

    summary = await client.get("/api/wallets/summary/balance")
    assert summary.status_code == 200
    [total] = summary.json()["totals"]
    assert Decimal(total["balance"]) == 1000
    assert total["wallet_count"] == 2


async def test_other_owner_cannot_see_wallets(client):
    wallet = await create_wallet(client, "Private", "10")
    other = {"Authorization": f"Bearer {create_access_token(OTHER_OWNER)}"}

    response = await client.get(f"/api/wallets/{wallet['id']}", headers=other)
    listing = await client.get("/api/wallets", headers=other)

    assert response.status_code == 404
    assert listing.json() == {"total": 0, "wallets": []}


async def test_transactions_categories_and_reports(client):
    wallet = await create_wallet(client, "Cash", "100")
    category = await client.post("/api/categories", json={"name": "Food", "color": "#f59e0b"})
    assert category.status_code == 201
    assert category.json()["color"] == "#F59E0B"
    duplicate = await client.post("/api/categories", json={"name": "FOOD"})
    assert duplicate.status_code == 409

    created = await client.post(
        "/api/transactions",
        json={
            "wallet_id": wallet["id"],
            "category_id": category.json()["id"],
            "reason": "Lunch",
            "type": "expense",
            "amount": "12.50",
            "date": "2026-10-19",
        },
    )
    assert created.status_code == 201, created.text
    assert await wallet_balance(client, wallet["id"]) == Decimal("87.50")

    report = await client.get("/api/reports/categories", params={"date_from": "2026-10-01", "date_to": "2026-10-31"})
    assert report.status_code == 200
    [row] = report.json()["rows"]
    assert row["category_name"] == "Food"
    assert Decimal(row["total_expense"]) == Decimal("12.50")

    monthly = await client.get("/api/reports/monthly", params={"year": 2026})
    assert Decimal(monthly.json()["months"][9]["expenses"]) == Decimal("12.50")

    bad_period = await client.get("/api/reports/categories", params={"period": "daily"})
    assert bad_period.status_code == 400
    no_range = await client.get("/api/reports/categories")
    assert no_range.status_code == 400

    removed = await client.delete(f"/api/transactions/{created.json()['id']}")
    assert removed.status_code == 200
    assert await wallet_balance(client, wallet["id"]) == Decimal("100")


async def test_loans_endpoints(client):
    created = await client.post("/api/loans", json={"name": "Car", "type": "borrowed", "amount": "5000"})
    assert created.status_code == 201, created.text
    loan = created.json()
    assert Decimal(loan["remaining_amount"]) == 5000

    repaid = await client.patch(f"/api/loans/{loan['id']}", json={"remaining_amount": "4000"})
    assert Decimal(repaid.json()["repaid_amount"]) == 1000

    summary = await client.get("/api/loans/summary")
    assert summary.status_code == 200
    assert Decimal(summary.json()["net_position"]) == -4000

    too_much = await client.patch(f"/api/loans/{loan['id']}", json={"remaining_amount": "6000"})
    assert too_much.status_code == 400


@pytest.mark.parametrize("amount", ["1e30", "100000000000000000", "100.999"])
async def test_unstorable_amounts_map_to_400_on_every_money_endpoint(client, amount):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "500")
    transfer = await client.post(
        "/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "10"}
    )
    loan = await client.post("/api/loans", json={"name": "Car", "type": "borrowed", "amount": "5000"})

    responses = [
        await client.post("/api/wallets", json={"name": "Huge", "balance": amount}),
        await client.post(
            "/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": amount}
        ),
        await client.patch(f"/api/transfers/{transfer.json()['id']}", json={"amount": amount}),
        await client.post(
            "/api/transactions",
            json={"wallet_id": a["id"], "reason": "Bonus", "type": "income", "amount": amount, "date": "2026-10-19"},
        ),
        await client.post("/api/loans", json={"name": "Yacht", "type": "lent", "amount": amount}),
        await client.patch(f"/api/loans/{loan.json()['id']}", json={"amount": amount}),
    ]

    assert [response.status_code for response in responses] == [400] * len(responses)
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (990, 510)
    wallets = await client.get("/api/wallets")
    assert wallets.json()["total"] == 2


async def test_wallet_balance_overflow_maps_to_400(client):
    a = await create_wallet(client, "A", "9999999999999.99")
    b = await create_wallet(client, "B", "9999999999999.99")

    response = await client.post(
        "/api/transfers", json={"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "0.01"}
    )

    assert response.status_code == 400
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (
        Decimal("9999999999999.99"),
        Decimal("9999999999999.99"),
    )
    listing = await client.get("/api/transfers")
    assert listing.json()["transfers"] == []


async def test_concurrent_transfers_keep_balances_consistent(client):
    a = await create_wallet(client, "A", "1000")
    b = await create_wallet(client, "B", "500")
    body = {"from_wallet_id": a["id"], "to_wallet_id": b["id"], "amount": "10.00"}

    responses = await asyncio.gather(*(client.post("/api/transfers", json=body) for _ in range(10)))

    assert [response.status_code for response in responses] == [201] * 10
    assert (await wallet_balance(client, a["id"]), await wallet_balance(client, b["id"])) == (
        Decimal("900.00"),
        Decimal("600.00"),
    )
    listing = await client.get("/api/transfers")
    assert len(listing.json()["transfers"]) == 10
