"""Customer self-service profile updates."""

import logging
from typing import Optional

from techcare_identity.domain.principal import Customer, CustomerRepository
from techcare_identity.infrastructure.storage import BlobCategory, BlobStore, FileUpload

logger = logging.getLogger(__name__)


def customer_image_key(customer: Customer) -> str:
    return f"customer_{customer.id}"


class CustomerProfileService:
    def __init__(
        self,
        customer_repository: CustomerRepository,
        blob_store: BlobStore,
    ):
        self._customer_repo = customer_repository
        self._blob_store = blob_store

    async def update_profile(
        self,
        customer: Customer,
        full_name: Optional[str] = None,
        phone_number: Optional[str] = None,
        image: Optional[FileUpload] = None,
    ) -> Customer:
        """Apply the non-blank fields and save if anything changed."""
        changed = customer.update_profile(
            full_name=full_name,
            phone_number=phone_number,
        )

        if image is not None:
            url = await self._blob_store.store(
                customer_image_key(customer),
                image,
                BlobCategory.IMAGES,
            )
            customer.set_image(url)
            changed = True

        if changed:
            await self._customer_repo.save(customer)
            logger.info("Customer profile updated: %s", customer.id)
        return customer

    async def upload_image(self, customer: Customer, image: FileUpload) -> Customer:
        url = await self._blob_store.store(
            customer_image_key(customer),
            image,
            BlobCategory.IMAGES,
        )
        customer.set_image(url)
        await self._customer_repo.save(customer)
        logger.info("Customer image uploaded: %s", customer.id)
        return customer
