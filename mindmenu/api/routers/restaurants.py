"""
Restaurant API endpoints.

Routes:
- POST /restaurants - Register restaurant
- GET /restaurants/{id} - Get restaurant
- GET /restaurants/{id}/branches - List branches of restaurant

Dependencies: mindmenu.application.services.restaurant_service, mindmenu.models
System role: Restaurant management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from mindmenu.api.deps import get_restaurant_service
from mindmenu.api.routers.router_utils import handle_service_errors
from mindmenu.application.services.restaurant_service import RestaurantService
from mindmenu.models.restaurant import BranchResponse, CreateRestaurantRequest, RestaurantResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors("Restaurant creation")
async def create_restaurant(
    request: CreateRestaurantRequest,
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    """
    Register a restaurant.

    Raises:
        HTTPException(400): Missing owner_id or name
        HTTPException(500): Creation failed
    """
    restaurant = await restaurant_service.create_restaurant(
        owner_id=request.owner_id,
        name=request.name,
        description=request.description,
    )
    return RestaurantResponse.model_validate(restaurant)


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
@handle_service_errors("Restaurant retrieval")
async def get_restaurant(
    restaurant_id: UUID,
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    """
    Get restaurant by ID.

    Raises:
        HTTPException(404): Restaurant not found
    """
    restaurant = await restaurant_service.get_restaurant(restaurant_id)
    return RestaurantResponse.model_validate(restaurant)


@router.get("/{restaurant_id}/branches", response_model=list[BranchResponse])
@handle_service_errors("Branch listing")
async def list_restaurant_branches(
    restaurant_id: UUID,
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> list[BranchResponse]:
    """
    List branches of a restaurant.

    Raises:
        HTTPException(404): Restaurant not found
    """
    branches = await restaurant_service.list_restaurant_branches(restaurant_id)
    return [BranchResponse.model_validate(branch) for branch in branches]
