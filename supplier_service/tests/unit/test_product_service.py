from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_service.app.core.exceptions import (
    CategoryNotFoundError,
    ProductServiceError,
)
from supplier_service.app.models.category import Category
from supplier_service.app.models.product import Product
from supplier_service.app.schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductDto,
    ProductUpdate,
)
from supplier_service.app.services.product_service import ProductService


class TestProductService:
    """Unit tests for ProductService with mocked repositories."""

    @pytest.fixture
    def mock_session(self):
        """Mock async session."""
        return Mock(spec=AsyncSession)

    @pytest.fixture
    def product_service(self, mock_session):
        return ProductService(mock_session)

    @pytest.fixture
    def sample_category(self):
        return Category(id=1, name="Electronics")

    @pytest.fixture
    def sample_product(self, sample_category):
        return Product(
            id=10,
            name="Phone",
            description="Flagship phone",
            price=Decimal("999.99"),
            category_id=sample_category.id,
            category=sample_category,
        )

    @pytest.fixture
    def store_failure(self):
        return OperationalError("SELECT 1", {}, Exception("database is locked"))

    # Tests for create_product method
    @pytest.mark.asyncio
    async def test_create_product_success(
        self, product_service, sample_category, sample_product
    ):
        product_service.category_repository.get_category_by_id = AsyncMock(
            return_value=sample_category
        )
        product_service.repository.create_product = AsyncMock(
            return_value=sample_product
        )
        data = ProductCreate(
            name="Phone",
            description="Flagship phone",
            price=Decimal("999.99"),
            category_id=1,
        )

        result = await product_service.create_product(data)

        assert isinstance(result, ProductDetailResponse)
        assert result.id == 10
        assert result.category_id == 1
        assert result.category.name == "Electronics"
        product_service.repository.create_product.assert_awaited_once_with(
            name="Phone",
            description="Flagship phone",
            price=Decimal("999.99"),
            category=sample_category,
        )

    @pytest.mark.asyncio
    async def test_create_product_unknown_category(self, product_service):
        product_service.category_repository.get_category_by_id = AsyncMock(
            return_value=None
        )
        product_service.repository.create_product = AsyncMock()
        data = ProductCreate(
            name="Phone", description="Flagship phone", price=Decimal("1"), category_id=7
        )

        with pytest.raises(CategoryNotFoundError) as exc_info:
            await product_service.create_product(data)

        assert exc_info.value.category_id == 7
        assert str(exc_info.value) == "Category not found"
        product_service.repository.create_product.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_product_store_failure(self, product_service, store_failure):
        product_service.category_repository.get_category_by_id = AsyncMock(
            side_effect=store_failure
        )
        data = ProductCreate(
            name="Phone", description="Flagship phone", price=Decimal("1"), category_id=1
        )

        with pytest.raises(ProductServiceError) as exc_info:
            await product_service.create_product(data)

        assert not isinstance(exc_info.value, CategoryNotFoundError)
        assert "Failed to create product" in str(exc_info.value)

    # Tests for read methods
    @pytest.mark.asyncio
    async def test_get_product_found(self, product_service, sample_product):
        product_service.repository.get_product_by_id = AsyncMock(
            return_value=sample_product
        )

        result = await product_service.get_product(10)

        assert result.name == "Phone"
        assert result.category.id == 1

    @pytest.mark.asyncio
    async def test_get_product_missing(self, product_service):
        product_service.repository.get_product_by_id = AsyncMock(return_value=None)

        assert await product_service.get_product(10) is None

    @pytest.mark.asyncio
    async def test_get_all_products_maps_to_dtos(self, product_service, sample_product):
        product_service.repository.get_all_products = AsyncMock(
            return_value=[sample_product]
        )

        result = await product_service.get_all_products()

        assert result == [
            ProductDto(
                id=10,
                name="Phone",
                description="Flagship phone",
                price=Decimal("999.99"),
                category_id=1,
            )
        ]

    @pytest.mark.asyncio
    async def test_get_all_products_store_failure(self, product_service, store_failure):
        product_service.repository.get_all_products = AsyncMock(
            side_effect=store_failure
        )

        with pytest.raises(ProductServiceError, match="Failed to get all products"):
            await product_service.get_all_products()

    # Tests for update_product method
    @pytest.mark.asyncio
    async def test_update_product_success(self, product_service, sample_product):
        sample_product.name = "Phone X"
        product_service.repository.update_product = AsyncMock(
            return_value=sample_product
        )
        data = ProductUpdate(
            name="Phone X", description="Flagship phone", price=Decimal("999.99")
        )

        result = await product_service.update_product(10, data)

        assert result.name == "Phone X"
        assert result.category_id == 1
        product_service.repository.update_product.assert_awaited_once_with(10, data)

    @pytest.mark.asyncio
    async def test_update_product_missing(self, product_service):
        product_service.repository.update_product = AsyncMock(return_value=None)
        data = ProductUpdate(name="Ghost", description="None", price=Decimal("1"))

        assert await product_service.update_product(10, data) is None

    @pytest.mark.asyncio
    async def test_update_product_store_failure(self, product_service, store_failure):
        product_service.repository.update_product = AsyncMock(side_effect=store_failure)
        data = ProductUpdate(name="Ghost", description="None", price=Decimal("1"))

        with pytest.raises(ProductServiceError, match="Failed to update product"):
            await product_service.update_product(10, data)

    # Tests for delete_product method
    @pytest.mark.asyncio
    async def test_delete_product(self, product_service):
        product_service.repository.delete_product = AsyncMock(return_value=None)

        await product_service.delete_product(10)

        product_service.repository.delete_product.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_delete_product_store_failure(self, product_service, store_failure):
        product_service.repository.delete_product = AsyncMock(side_effect=store_failure)

        with pytest.raises(ProductServiceError, match="Failed to delete product"):
            await product_service.delete_product(10)

    # Tests for filters and searches
    @pytest.mark.asyncio
    async def test_price_filters_delegate_to_repository(
        self, product_service, sample_product
    ):
        repository = product_service.repository
        repository.find_by_price_between = AsyncMock(return_value=[sample_product])
        repository.find_by_price_greater_than = AsyncMock(return_value=[])
        repository.find_by_price_less_than = AsyncMock(return_value=[sample_product])

        in_range = await product_service.filter_products_by_price_range(
            Decimal("500"), Decimal("1500")
        )
        greater = await product_service.filter_products_by_price_greater(
            Decimal("999.99")
        )
        less = await product_service.filter_products_by_price_less(Decimal("1000"))

        assert [p.id for p in in_range] == [10]
        assert greater == []
        assert [p.id for p in less] == [10]
        repository.find_by_price_between.assert_awaited_once_with(
            Decimal("500"), Decimal("1500")
        )
        repository.find_by_price_greater_than.assert_awaited_once_with(
            Decimal("999.99")
        )
        repository.find_by_price_less_than.assert_awaited_once_with(Decimal("1000"))

    @pytest.mark.asyncio
    async def test_keyword_searches_delegate_to_repository(
        self, product_service, sample_product
    ):
        repository = product_service.repository
        repository.find_by_category_id = AsyncMock(return_value=[sample_product])
        repository.find_by_name_containing = AsyncMock(return_value=[sample_product])
        repository.find_by_name_not_containing = AsyncMock(return_value=[])
        repository.find_by_description_containing = AsyncMock(
            return_value=[sample_product]
        )

        assert len(await product_service.search_products_by_category_id(1)) == 1
        assert len(await product_service.search_products_by_name("pho")) == 1
        assert await product_service.search_products_by_name_not_containing("pho") == []
        assert len(await product_service.search_products_by_description("flag")) == 1

        repository.find_by_name_containing.assert_awaited_once_with("pho")
        repository.find_by_description_containing.assert_awaited_once_with("flag")

    @pytest.mark.asyncio
    async def test_search_store_failure(self, product_service, store_failure):
        product_service.repository.find_by_name_containing = AsyncMock(
            side_effect=store_failure
        )

        with pytest.raises(ProductServiceError, match="search products by name"):
            await product_service.search_products_by_name("pho")
