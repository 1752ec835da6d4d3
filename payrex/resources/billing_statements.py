"""Billing Statements API."""
from dataclasses import dataclass
from typing import Optional

from payrex.models.billing_statements import (
    BillingStatement,
    CreateBillingStatement,
    UpdateBillingStatement,
)
from payrex.resources.base import Resource
from payrex.types.ids import BillingStatementId
from payrex.types.pagination import ListParams, PaginatedList


@dataclass
class BillingStatements(Resource):
    """
    Billing statements are one-time payment links with an itemized list of
    products or services.

    A statement starts as ``draft``; ``finalize`` opens it for payment and
    ``send`` e-mails it to the customer.
    """
    base_path: str = "/billing_statements"

    async def create(self, params: CreateBillingStatement) -> BillingStatement:
        return await self.http.post(self.base_path, params, BillingStatement)

    async def retrieve(self, id: BillingStatementId) -> BillingStatement:
        return await self.http.get(self._path(id), BillingStatement)

    async def update(self, id: BillingStatementId, params: UpdateBillingStatement) -> BillingStatement:
        return await self.http.put(self._path(id), params, BillingStatement)

    async def delete(self, id: BillingStatementId) -> None:
        """Delete a draft billing statement."""
        await self.http.delete(self._path(id))

    async def list(self, params: Optional[ListParams] = None) -> PaginatedList[BillingStatement]:
        return await self.http.get_with_params(
            self.base_path, params or ListParams(), PaginatedList[BillingStatement]
        )

    async def finalize(self, id: BillingStatementId) -> BillingStatement:
        return await self.http.post(self._path(id, "finalize"), None, BillingStatement)

    async def send(self, id: BillingStatementId) -> BillingStatement:
        return await self.http.post(self._path(id, "send"), None, BillingStatement)

    async def void(self, id: BillingStatementId) -> BillingStatement:
        return await self.http.post(self._path(id, "void"), None, BillingStatement)

    async def mark_uncollectible(self, id: BillingStatementId) -> BillingStatement:
        return await self.http.post(self._path(id, "mark_uncollectible"), None, BillingStatement)
