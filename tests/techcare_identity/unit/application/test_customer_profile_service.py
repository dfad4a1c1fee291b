"""Unit tests for CustomerProfileService."""

from unittest.mock import AsyncMock

import pytest

from techcare_identity import CustomerProfileService
from techcare_identity.infrastructure.storage import BlobCategory
from tests.shared.fixtures.factories import TestPrincipalFactory, png_upload

IMAGE_URL = "http://localhost:8080/uploads/images/customer_x.png"


class TestCustomerProfileService:
    def setup_method(self):
        self.repo = AsyncMock()
        self.blob_store = AsyncMock()
        self.blob_store.store.return_value = IMAGE_URL
        self.service = CustomerProfileService(
            customer_repository=self.repo,
            blob_store=self.blob_store,
        )
        self.customer = TestPrincipalFactory.customer()

    @pytest.mark.asyncio
    async def test_upload_image_stores_under_customer_key(self):
        customer = await self.service.upload_image(self.customer, png_upload())

        assert customer.image == IMAGE_URL
        owner_id, _upload, category = self.blob_store.store.await_args.args
        assert owner_id == f"customer_{self.customer.id}"
        assert category == BlobCategory.IMAGES
        self.repo.save.assert_awaited_once_with(self.customer)

    @pytest.mark.asyncio
    async def test_update_with_nothing_new_does_not_save(self):
        await self.service.update_profile(self.customer, full_name="", phone_number=None)

        self.repo.save.assert_not_called()
        self.blob_store.store.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_applies_fields_and_image(self):
        customer = await self.service.update_profile(
            self.customer,
            full_name="Alice M.",
            image=png_upload(),
        )

        assert customer.full_name == "Alice M."
        assert customer.image == IMAGE_URL
        self.repo.save.assert_awaited_once_with(self.customer)
