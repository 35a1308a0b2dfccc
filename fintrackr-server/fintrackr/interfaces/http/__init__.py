from fastapi import APIRouter

from fintrackr.interfaces.http.routers import categories, loans, reports, transactions, transfers, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(transfers.router, prefix="/transfers", tags=["transfers"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    router.include_router(categories.router, prefix="/categories", tags=["categories"])
    router.include_router(loans.router, prefix="/loans", tags=["loans"])
    router.include_router(reports.router, prefix="/reports", tags=["reports"])
    return router


__all__ = [
    "create_api_router",
]
