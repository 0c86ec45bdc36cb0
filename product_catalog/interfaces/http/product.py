from fastapi import APIRouter, Body, Depends, Path, Response, status

from product_catalog.application.product_service import ProductService
from product_catalog.config.logger_config import log
from product_catalog.core.exceptions import (
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from product_catalog.domain.models import Principal
from product_catalog.interfaces.http.dependencies import (
    authenticate,
    get_product_service,
)
from product_catalog.interfaces.http.errors import CatalogHTTPException
from product_catalog.interfaces.http.schemas import (
    ErrorCode,
    ErrorResponse,
    ProductCollectionResponse,
    ProductPayload,
)

router = APIRouter(
    prefix="/api/product",
    tags=["Product"],
    dependencies=[Depends(authenticate)],
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


def _internal_error(action: str) -> CatalogHTTPException:
    return CatalogHTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=ErrorCode.INTERNAL_SERVER_ERROR,
        message=f"An unexpected error occurred while {action}",
    )


@router.get("/products", response_model=ProductCollectionResponse)
async def list_products(
    principal: Principal = Depends(authenticate),
    product_service: ProductService = Depends(get_product_service),
):
    """
    Retrieve all products from the catalog.
    """
    try:
        log.info("List products request", requester=principal.name)
        products = product_service.list_products()
        return ProductCollectionResponse(products=products)

    except Exception as e:
        log.exception("Unexpected error during list products")
        raise _internal_error("retrieving products") from e


@router.get("/products/{product_id}", response_model=ProductCollectionResponse)
async def get_product(
    product_id: str = Path(..., description="ID of the product to retrieve"),
    principal: Principal = Depends(authenticate),
    product_service: ProductService = Depends(get_product_service),
):
    """
    Retrieve a product by ID.
    - An unknown ID yields an empty `products` list with status 200.
    """
    try:
        log.info("Get product request", product_id=product_id, requester=principal.name)
        products = product_service.get_product(product_id)
        return ProductCollectionResponse(products=products)

    except Exception as e:
        log.exception("Unexpected error during get product", product_id=product_id)
        raise _internal_error("retrieving product") from e


@router.post(
    "/products",
    response_model=ProductCollectionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Duplicate product ID"}},
)
async def create_product(
    payload: ProductPayload = Body(...),
    principal: Principal = Depends(authenticate),
    product_service: ProductService = Depends(get_product_service),
):
    """
    Create a new product.
    - If no ID is given one is generated as "P" + (current count + 1)
    - Returns the created product wrapped in a collection response
    """
    try:
        log.info(
            "Create product request",
            product_id=payload.id,
            name=payload.name,
            requester=principal.name,
        )
        product = product_service.create_product(payload)
        return ProductCollectionResponse(products=[product])

    except ProductAlreadyExistsError as e:
        log.warning("Product creation failed: id already exists", error=e.message)
        raise CatalogHTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=ErrorCode.DUPLICATE_PRODUCT,
            message=e.message,
        ) from e

    except Exception as e:
        log.exception("Unexpected error during product creation")
        raise _internal_error("creating product") from e


@router.put(
    "/products/{product_id}",
    response_model=ProductCollectionResponse,
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
async def update_product(
    payload: ProductPayload = Body(...),
    product_id: str = Path(..., description="ID of the product to update"),
    principal: Principal = Depends(authenticate),
    product_service: ProductService = Depends(get_product_service),
):
    """
    Replace an existing product.
    - The ID in the path overrides any ID in the body
    """
    try:
        log.info(
            "Update product request", product_id=product_id, requester=principal.name
        )
        product = product_service.update_product(product_id, payload)
        return ProductCollectionResponse(products=[product])

    except ProductNotFoundError as e:
        log.warning("Product not found", product_id=product_id)
        raise CatalogHTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            code=ErrorCode.PRODUCT_NOT_FOUND,
            message=e.message,
        ) from e

    except Exception as e:
        log.exception("Unexpected error during product update")
        raise _internal_error("updating product") from e


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
async def delete_product(
    product_id: str = Path(..., description="ID of the product to delete"),
    principal: Principal = Depends(authenticate),
    product_service: ProductService = Depends(get_product_service),
):
    """
    Delete a product.
    - Returns 204 No Content; a second delete of the same ID is a 404
    """
    try:
        log.info(
            "Delete product request", product_id=product_id, requester=principal.name
        )
        product_service.delete_product(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except ProductNotFoundError as e:
        log.warning("Product not found", product_id=product_id)
        raise CatalogHTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            code=ErrorCode.PRODUCT_NOT_FOUND,
            message=e.message,
        ) from e

    except Exception as e:
        log.exception("Unexpected error during product deletion")
        raise _internal_error("deleting product") from e
