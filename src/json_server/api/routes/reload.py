from fastapi import APIRouter, Depends, HTTPException, status

from json_server.api.dependencies import get_holder
from json_server.api.schemas import ReloadResponse, SkippedFileResponse
from json_server.core.registry import RegistryHolder
from json_server.errors import DataDirectoryError

router = APIRouter(tags=["admin"])


@router.post("/_reload", response_model=ReloadResponse)
def reload(holder: RegistryHolder = Depends(get_holder)) -> ReloadResponse:
    """Re-scan the data directory and publish a new snapshot."""
    try:
        report = holder.reload()
    except DataDirectoryError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return ReloadResponse(
        generation=report.registry.generation,
        routes=report.registry.descriptors(),
        skipped=[SkippedFileResponse(file=s.path.name, reason=s.reason) for s in report.skipped],
    )
