# bgg_wrapped/routes/wrapped.py

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from bgg_wrapped.schemas.wrapped import ErrorKind, PipelineError, WrappedSlides, WrappedSummary
from bgg_wrapped.tasks import wrapped

router = APIRouter(prefix="/wrapped", tags=["BGG Wrapped"])

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.EMPTY_USERNAME: 422,
    ErrorKind.TRANSPORT_ERROR: 502,
    ErrorKind.EXPORT_TIMEOUT: 504,
    ErrorKind.UPSTREAM_REJECTED: 404,
    ErrorKind.EMPTY_COLLECTION: 404,
    ErrorKind.UNEXPECTED: 500,
}


def error_response(error: PipelineError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(error.kind, 500),
        content={"error": error.kind.value, "message": error.message},
    )


@router.get("/{username}", response_model=WrappedSummary)
async def get_wrapped(username: str):
    """Collection summary for one BGG user."""
    result = await wrapped.generate_wrapped(username)
    if isinstance(result, PipelineError):
        return error_response(result)
    return result


@router.get("/{username}/slides", response_model=WrappedSlides)
async def get_wrapped_slides(username: str):
    """Ordered slide payloads ready for the presentation layer."""
    result = await wrapped.generate_wrapped_slides(username)
    if isinstance(result, PipelineError):
        return error_response(result)
    return result
