"""Customers API."""
from dataclasses import dataclass
from typing import Optional

from payrex.models.customers import CreateCustomer, Customer, CustomerListParams, UpdateCustomer
from payrex.resources.base import Resource
from payrex.types.ids import CustomerId
from payrex.types.pagination import PaginatedList


@dataclass
class Customers(Resource):
    base_path: str = "/customers"

    async def create(self, params: CreateCustomer) -> Customer:
        """Create a customer. Endpoint: ``POST /customers``."""
        return await self.http.post(self.base_path, params, Customer)

    async def retrieve(self, id: CustomerId) -> Customer:
        """Retrieve a customer by ID. Endpoint: ``GET /customers/:id``."""
        return await self.http.get(self._path(id), Customer)

    async def update(self, id: CustomerId, params: UpdateCustomer) -> Customer:
        """Update a customer. Endpoint: ``PATCH /customers/:id``."""
        return await self.http.patch(self._path(id), params, Customer)

    async def delete(self, id: CustomerId) -> None:
        """
        Delete a customer. Endpoint: ``DELETE /customers/:id``.

        Deleted customers can still be retrieved to track their history.
        """
        await self.http.delete(self._path(id))

    async def list(self, params: Optional[CustomerListParams] = None) -> PaginatedList[Customer]:
        """List customers. Endpoint: ``GET /customers``."""
        return await self.http.get_with_params(
            self.base_path, params or CustomerListParams(), PaginatedList[Customer]
        )
