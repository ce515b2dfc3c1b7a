"""API schemas package."""

from finance_app.api.schemas.assets import (
    AssetSnapshotRequest,
    AssetSnapshotResponse,
    FundAccountCreateRequest,
    FundAccountUpdateRequest,
    FundAccountResponse,
    FundAccountListResponse,
    CreditCardCreateRequest,
    CreditCardUpdateRequest,
    CreditCardResponse,
    CreditCardListResponse,
)
from finance_app.api.schemas.budget import (
    BudgetCategoryCreateRequest,
    BudgetCategoryUpdateRequest,
    BudgetCategoryResponse,
    BudgetCategoryListResponse,
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
    BulkTransactionRequest,
    BulkTransactionResponse,
    ReorderRequest,
    BudgetAnalysisResponse,
    OverspendingAnalysisResponse,
    TotalSpendingResponse,
)
from finance_app.api.schemas.recurring import (
    RecurringCategoryCreateRequest,
    RecurringCategoryUpdateRequest,
    RecurringCategoryResponse,
    RecurringTransactionCreateRequest,
    RecurringTransactionUpdateRequest,
    RecurringTransactionResponse,
    PaySettingsRequest,
    PaySettingsResponse,
    PendingBillsResponse,
    PendingOverrideRequest,
    PendingOverrideResponse,
    CompletedTransactionRequest,
    CompletedTransactionResponse,
    ManualPendingCreateRequest,
    ManualPendingUpdateRequest,
    ManualPendingCompletionRequest,
    ManualPendingResponse,
)
from finance_app.api.schemas.income import (
    IncomeDataRequest,
    IncomeDataResponse,
    IncomeEntryCreateRequest,
    IncomeEntryUpdateRequest,
    IncomeEntryResponse,
    IncomeEntryListResponse,
    SavingsPlanRequest,
    SavingsPlanResponse,
    SavingsProjectionResponse,
)
from finance_app.api.schemas.investment import (
    InvestmentCreateRequest,
    InvestmentUpdateRequest,
    InvestmentResponse,
    PriceUpdateRequest,
    PortfolioSummaryResponse,
    PriceRefreshResponse,
    SnapshotResponse,
    StockPriceResponse,
)
from finance_app.api.schemas.settings import UserSettingsRequest, UserSettingsResponse
from finance_app.api.schemas.dashboard import DashboardResponse
from finance_app.api.schemas.backup import ImportResponse

__all__ = [
    "AssetSnapshotRequest",
    "AssetSnapshotResponse",
    "FundAccountCreateRequest",
    "FundAccountUpdateRequest",
    "FundAccountResponse",
    "FundAccountListResponse",
    "CreditCardCreateRequest",
    "CreditCardUpdateRequest",
    "CreditCardResponse",
    "CreditCardListResponse",
    "BudgetCategoryCreateRequest",
    "BudgetCategoryUpdateRequest",
    "BudgetCategoryResponse",
    "BudgetCategoryListResponse",
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "BulkTransactionRequest",
    "BulkTransactionResponse",
    "ReorderRequest",
    "BudgetAnalysisResponse",
    "OverspendingAnalysisResponse",
    "TotalSpendingResponse",
    "RecurringCategoryCreateRequest",
    "RecurringCategoryUpdateRequest",
    "RecurringCategoryResponse",
    "RecurringTransactionCreateRequest",
    "RecurringTransactionUpdateRequest",
    "RecurringTransactionResponse",
    "PaySettingsRequest",
    "PaySettingsResponse",
    "PendingBillsResponse",
    "PendingOverrideRequest",
    "PendingOverrideResponse",
    "CompletedTransactionRequest",
    "CompletedTransactionResponse",
    "ManualPendingCreateRequest",
    "ManualPendingUpdateRequest",
    "ManualPendingCompletionRequest",
    "ManualPendingResponse",
    "IncomeDataRequest",
    "IncomeDataResponse",
    "IncomeEntryCreateRequest",
    "IncomeEntryUpdateRequest",
    "IncomeEntryResponse",
    "IncomeEntryListResponse",
    "SavingsPlanRequest",
    "SavingsPlanResponse",
    "SavingsProjectionResponse",
    "InvestmentCreateRequest",
    "InvestmentUpdateRequest",
    "InvestmentResponse",
    "PriceUpdateRequest",
    "PortfolioSummaryResponse",
    "PriceRefreshResponse",
    "SnapshotResponse",
    "StockPriceResponse",
    "UserSettingsRequest",
    "UserSettingsResponse",
    "DashboardResponse",
    "ImportResponse",
]
