"""Billing Statement Line Items API."""
from dataclasses import dataclass

from payrex.models.billing_statement_line_items import (
    BillingStatementLineItem,
    CreateBillingStatementLineItem,
    UpdateBillingStatementLineItem,
)
from payrex.resources.base import Resource
from payrex.types.ids import BillingStatementLineItemId


@dataclass
class BillingStatementLineItems(Resource):
    base_path: str = "/billing_statement_line_items"

    async def create(self, params: CreateBillingStatementLineItem) -> BillingStatementLineItem:
        return await self.http.post(self.base_path, params, BillingStatementLineItem)

    async def update(
        self,
        id: BillingStatementLineItemId,
        params: UpdateBillingStatementLineItem,
    ) -> BillingStatementLineItem:
        return await self.http.put(self._path(id), params, BillingStatementLineItem)

    async def delete(self, id: BillingStatementLineItemId) -> None:
        await self.http.delete(self._path(id))
