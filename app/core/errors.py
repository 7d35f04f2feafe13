# app/core/errors.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

log = get_logger("errors")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies and path params are client errors: 400, not FastAPI's 422.
    # The offending input is not echoed back (it may be NaN, which JSON cannot carry).
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    log.info("bad_request %s %s: %d error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(errors)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
