"""
Admin Catalog Mutator

Product create/update/delete. The backend is the only authorization gate;
the role check here exists for showing or hiding admin controls.
"""

import logging
from typing import Union

from pydantic import ValidationError

from ..core.errors import ValidationFailed, field_errors
from ..core.events import PRODUCTS, InvalidationBus, product_key
from ..models import ProductFields, UserRole
from .account import AccountService
from .backend_client import BackendClient

logger = logging.getLogger(__name__)


class AdminCatalogMutator:
    """Catalog writes; invalidates reader caches before returning"""

    def __init__(
        self,
        client: BackendClient,
        bus: InvalidationBus,
        account: AccountService,
    ):
        self._client = client
        self._bus = bus
        self._account = account

    async def can_manage_catalog(self) -> bool:
        """Advisory role check for the admin surface"""
        return await self._account.get_role() == UserRole.ADMIN

    async def create_product(self, fields: Union[ProductFields, dict]) -> str:
        product_id = await self._client.add_product(self._fields(fields))
        logger.info(f"Created product {product_id}")
        self._bus.publish(PRODUCTS, product_key(product_id))
        return product_id

    async def update_product(
        self, product_id: str, fields: Union[ProductFields, dict]
    ) -> None:
        await self._client.update_product(product_id, self._fields(fields))
        logger.info(f"Updated product {product_id}")
        self._bus.publish(PRODUCTS, product_key(product_id))

    async def delete_product(self, product_id: str) -> None:
        await self._client.delete_product(product_id)
        logger.info(f"Deleted product {product_id}")
        self._bus.publish(PRODUCTS, product_key(product_id))

    @staticmethod
    def _fields(fields: Union[ProductFields, dict]) -> ProductFields:
        if isinstance(fields, ProductFields):
            return fields
        try:
            return ProductFields.model_validate(fields)
        except ValidationError as e:
            raise ValidationFailed(field_errors(e)) from None
