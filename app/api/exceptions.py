import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.domain.exceptions import AppError, NotFound, Conflict, InvalidInput
from app.core.ctx import REQUEST_ID_CTX

logger = logging.getLogger("app.api")

MEDIA_TYPE = "application/problem+json"

_STATUS_BY_CLASS: dict[type[AppError], int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    AppError: status.HTTP_400_BAD_REQUEST,
}

_TITLES: dict[type[AppError], str] = {
    NotFound: "Not Found",
    Conflict: "Conflict",
    InvalidInput: "Bad Request",
    AppError: "Application Error",
}


def _status_for(exc: AppError) -> int:
    for cls in type(exc).mro():
        if cls in _STATUS_BY_CLASS:
            return _STATUS_BY_CLASS[cls]
    return status.HTTP_400_BAD_REQUEST


def _title_for(exc: AppError) -> str:
    for cls in type(exc).mro():
        if cls in _TITLES:
            return _TITLES[cls]
    return "Application Error"


def field_errors(errors: list[dict]) -> list[dict[str, str]]:
    """Flattens pydantic error entries into {field, message} pairs, dropping the 'body'/'query' prefix."""
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in {"body", "query", "path"}:
            loc = loc[1:]
        result.append({"field": ".".join(loc) or "__root__", "message": err.get("msg", "Invalid value")})
    return result


def _problem(
    request: Request,
    *,
    http_status: int,
    title: str,
    detail: str | None = None,
    extra: dict | None = None,
) -> JSONResponse:
    body = {
        "status": http_status,
        "title": title,
        "detail": detail,
        "instance": str(request.url),
    }
    req_id = REQUEST_ID_CTX.get()
    if req_id:
        body["trace_id"] = req_id
    if extra:
        body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=http_status, content=body, media_type=MEDIA_TYPE)


def register_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        status_code = _status_for(exc)
        extra = {"context": exc.ctx} if exc.ctx else None
        return _problem(
            request,
            http_status=status_code,
            title=_title_for(exc),
            detail=str(exc) or None,
            extra=extra,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        errors = field_errors(exc.errors())
        logger.info("Validation failed route=%s %s errors=%s", request.method, request.url.path, errors)
        return _problem(
            request,
            http_status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            title="Validation Failed",
            detail="Request payload is invalid",
            extra={"errors": errors},
        )
