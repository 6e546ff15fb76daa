"""
Branch API endpoints.

Routes:
- POST /branches - Create branch
- GET /branches - List all branches
- POST /branches/{id}/snapshots - Append menu snapshot
- GET /branches/{id}/snapshots - List snapshots (newest first)
- GET /branches/{id}/snapshots/latest - Latest snapshot

Dependencies: mindmenu.application.services, mindmenu.models
System role: Branch and menu snapshot HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from mindmenu.api.deps import get_restaurant_service, get_snapshot_service
from mindmenu.api.routers.router_utils import handle_service_errors
from mindmenu.application.services.restaurant_service import RestaurantService
from mindmenu.application.services.snapshot_service import SnapshotService
from mindmenu.models.restaurant import BranchResponse, CreateBranchRequest
from mindmenu.models.snapshot import CreateSnapshotRequest, SnapshotResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/branches", tags=["branches"])


@router.post("", response_model=BranchResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors("Branch creation")
async def create_branch(
    request: CreateBranchRequest,
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> BranchResponse:
    """
    Create a branch for an existing restaurant.

    Raises:
        HTTPException(400): Missing name
        HTTPException(404): Restaurant not found
    """
    branch = await restaurant_service.create_branch(
        restaurant_id=request.restaurant_id,
        name=request.name,
        address=request.address,
    )
    return BranchResponse.model_validate(branch)


@router.get("", response_model=list[BranchResponse])
@handle_service_errors("Branch listing")
async def list_branches(
    limit: int = 100,
    offset: int = 0,
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> list[BranchResponse]:
    """List all branches with pagination."""
    branches = await restaurant_service.list_branches(limit=limit, offset=offset)
    return [BranchResponse.model_validate(branch) for branch in branches]


@router.post(
    "/{branch_id}/snapshots",
    response_model=SnapshotResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors("Snapshot creation")
async def create_snapshot(
    branch_id: UUID,
    request: CreateSnapshotRequest,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> SnapshotResponse:
    """
    Append a menu snapshot to a branch.

    Raises:
        HTTPException(404): Branch not found
    """
    snapshot = await snapshot_service.create_snapshot(
        branch_id=branch_id,
        content=request.content,
        author=request.author,
        notes=request.notes,
    )
    return SnapshotResponse.model_validate(snapshot)


@router.get("/{branch_id}/snapshots", response_model=list[SnapshotResponse])
@handle_service_errors("Snapshot listing")
async def list_snapshots(
    branch_id: UUID,
    limit: int | None = None,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> list[SnapshotResponse]:
    """List snapshots of a branch, newest first."""
    snapshots = await snapshot_service.list_snapshots(branch_id, limit=limit)
    return [SnapshotResponse.model_validate(snapshot) for snapshot in snapshots]


@router.get("/{branch_id}/snapshots/latest", response_model=SnapshotResponse)
@handle_service_errors("Snapshot retrieval")
async def get_latest_snapshot(
    branch_id: UUID,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> SnapshotResponse:
    """
    Latest snapshot of a branch.

    Raises:
        HTTPException(404): Branch not found or branch has no snapshot
    """
    snapshot = await snapshot_service.get_latest_snapshot(branch_id)
    return SnapshotResponse.model_validate(snapshot)
