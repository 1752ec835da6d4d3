"""Payouts API."""
from dataclasses import dataclass
from typing import Optional

from payrex.models.payouts import PayoutTransaction
from payrex.resources.base import Resource
from payrex.types.ids import PayoutId
from payrex.types.pagination import ListParams, PaginatedList


@dataclass
class Payouts(Resource):
    base_path: str = "/payouts"

    async def list_transactions(
        self,
        id: PayoutId,
        params: Optional[ListParams] = None,
    ) -> PaginatedList[PayoutTransaction]:
        """List the transactions settled by a payout. Endpoint: ``GET /payouts/:id/transactions``."""
        return await self.http.get_with_params(
            self._path(id, "transactions"), params or ListParams(), PaginatedList[PayoutTransaction]
        )
