"""Pydantic schemas used across the project."""
import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# amounts outside this shape are rejected with 400, never rounded
AMOUNT_FORMAT = "whole cents (at most two decimal places), absolute value up to 9999999999999.99"


class TokenData(BaseModel):
    owner_id: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


# Wallets


class WalletCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    balance: Decimal = Field(Decimal("0"), description=f"Opening balance in {AMOUNT_FORMAT}")
    currency: Optional[str] = Field(None, min_length=3, max_length=10, description="Defaults to the configured currency")


class WalletUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    currency: Optional[str] = Field(None, min_length=3, max_length=10)


class WalletResponse(BaseModel):
    id: str
    name: str
    balance: Decimal
    currency: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WalletListResponse(BaseModel):
    total: int
    wallets: list[WalletResponse] = Field(default_factory=list)


class CurrencyTotalResponse(BaseModel):
    currency: str
    balance: Decimal
    wallet_count: int

    model_config = ConfigDict(from_attributes=True)


class WalletBalanceSummaryResponse(BaseModel):
    totals: list[CurrencyTotalResponse] = Field(default_factory=list)


# Transfers


class TransferCreate(BaseModel):
    from_wallet_id: str = Field(..., min_length=1)
    to_wallet_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., description=f"Positive amount in {AMOUNT_FORMAT}")
    date: dt.date = Field(default_factory=dt.date.today)
    status: str = Field("completed", description="completed, pending or cancelled")
    description: Optional[str] = Field(None, max_length=1000)


class TransferUpdate(BaseModel):
    from_wallet_id: Optional[str] = Field(None, min_length=1)
    to_wallet_id: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, description=f"Positive amount in {AMOUNT_FORMAT}")
    date: Optional[dt.date] = None
    status: Optional[str] = None
    description: Optional[str] = Field(None, max_length=1000)


class TransferResponse(BaseModel):
    id: str
    from_wallet_id: str
    to_wallet_id: str
    amount: Decimal
    date: dt.date
    status: str
    description: Optional[str] = None
    applied: bool
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransferListResponse(BaseModel):
    transfers: list[TransferResponse] = Field(default_factory=list)


# Transactions


class TransactionCreate(BaseModel):
    wallet_id: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    reason: str = Field(..., min_length=1, max_length=255)
    type: str = Field("expense", description="income or expense")
    amount: Decimal = Field(..., description=f"Positive amount in {AMOUNT_FORMAT}")
    date: dt.date = Field(default_factory=dt.date.today)


class TransactionUpdate(BaseModel):
    wallet_id: Optional[str] = Field(None, min_length=1)
    category_id: Optional[str] = None
    reason: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = None
    amount: Optional[Decimal] = Field(None, description=f"Positive amount in {AMOUNT_FORMAT}")
    date: Optional[dt.date] = None


class TransactionResponse(BaseModel):
    id: str
    wallet_id: str
    category_id: Optional[str] = None
    reason: str
    type: str
    amount: Decimal
    date: dt.date
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse] = Field(default_factory=list)


# Categories


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field("#3B82F6", description="Hex colour, e.g. #3B82F6")


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    color: str
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse] = Field(default_factory=list)


# Loans


class LoanCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    type: str = Field("borrowed", description="borrowed or lent")
    amount: Decimal = Field(..., description=f"Positive amount in {AMOUNT_FORMAT}")
    remaining_amount: Optional[Decimal] = Field(None, description="Defaults to the full amount")
    due_date: Optional[dt.date] = None
    status: str = Field("active", description="active or completed")
    description: Optional[str] = Field(None, max_length=1000)


class LoanUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    type: Optional[str] = None
    amount: Optional[Decimal] = Field(None, description=f"Positive amount in {AMOUNT_FORMAT}")
    remaining_amount: Optional[Decimal] = None
    due_date: Optional[dt.date] = None
    status: Optional[str] = None
    description: Optional[str] = Field(None, max_length=1000)


class LoanResponse(BaseModel):
    id: str
    name: str
    type: str
    amount: Decimal
    remaining_amount: Decimal
    repaid_amount: Decimal
    due_date: Optional[dt.date] = None
    status: str
    description: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LoanListResponse(BaseModel):
    loans: list[LoanResponse] = Field(default_factory=list)


class LoanSummaryResponse(BaseModel):
    total_borrowed: Decimal
    total_lent: Decimal
    net_position: Decimal
    active_count: int

    model_config = ConfigDict(from_attributes=True)


# Reports


class CategoryReportRowResponse(BaseModel):
    category_id: str
    category_name: str
    category_color: str
    total_income: Decimal
    total_expense: Decimal

    model_config = ConfigDict(from_attributes=True)


class CategoryReportResponse(BaseModel):
    date_from: dt.date
    date_to: dt.date
    rows: list[CategoryReportRowResponse] = Field(default_factory=list)
    total_income: Decimal
    total_expense: Decimal

    model_config = ConfigDict(from_attributes=True)


class MonthlyTotalsResponse(BaseModel):
    month: int
    income: Decimal
    expenses: Decimal
    savings: Decimal

    model_config = ConfigDict(from_attributes=True)


class MonthlySummaryResponse(BaseModel):
    year: int
    months: list[MonthlyTotalsResponse] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    balances: list[CurrencyTotalResponse] = Field(default_factory=list)
    wallet_count: int
    month_income: Decimal
    month_expense: Decimal
    income_count: int
    expense_count: int

    model_config = ConfigDict(from_attributes=True)
