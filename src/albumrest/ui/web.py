"""FastAPI routes for the album resource.

Each request opens its own unit of work through :func:`get_handler`, so no
SQLAlchemy session is ever shared between concurrent requests. Handler results
(:class:`~albumrest.domain.album_resource.AlbumResponse`) are rendered here:
JSON when there is a body, an empty response otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from http import HTTPStatus
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from albumrest import __version__
from albumrest.domain.album_resource import AlbumResourceHandler, AlbumResponse
from albumrest.domain.validation import ROOT_ERROR_KEY, AlbumValidator

if TYPE_CHECKING:
    from albumrest.domain.ports import AlbumUnitOfWork

log = logging.getLogger(__name__)

type UnitOfWorkFactory = Callable[[], AlbumUnitOfWork]

router = APIRouter(tags=["album"])


def get_handler(request: Request) -> Iterator[AlbumResourceHandler]:
    """Yield a handler bound to a fresh unit of work for the current request."""

    factory: UnitOfWorkFactory = request.app.state.unit_of_work_factory
    validator: AlbumValidator = request.app.state.validator
    with factory() as uow:
        yield AlbumResourceHandler(
            store=uow.repositories.albums,
            session=uow,
            validator=validator,
        )


HandlerDep = Annotated[AlbumResourceHandler, Depends(get_handler)]
# decoded as-is; the validator decides whether it is an object
PayloadBody = Annotated[Any, Body()]


def render(result: AlbumResponse, request: Request) -> Response:
    """Turn a handler result into an HTTP response."""

    if result.body is None:
        return Response(status_code=result.status)

    response = JSONResponse(content=result.body, status_code=result.status)
    if result.created_id is not None:
        location = request.app.url_path_for("get_album", album_id=result.created_id)
        response.headers["Location"] = str(location)
    return response


@router.get("/album/{album_id:int}", name="get_album")
def get_album(album_id: int, request: Request, handler: HandlerDep) -> Response:
    return render(handler.get(album_id), request)


@router.get("/album", name="cget_album")
def list_albums(request: Request, handler: HandlerDep) -> Response:
    return render(handler.list_all(), request)


@router.post("/album", name="post_album")
def post_album(request: Request, handler: HandlerDep, payload: PayloadBody = None) -> Response:
    return render(handler.create(payload), request)


@router.put("/album/{album_id:int}", name="put_album")
def put_album(
    album_id: int,
    request: Request,
    handler: HandlerDep,
    payload: PayloadBody = None,
) -> Response:
    return render(handler.replace(album_id, payload), request)


@router.patch("/album/{album_id:int}", name="patch_album")
def patch_album(
    album_id: int,
    request: Request,
    handler: HandlerDep,
    payload: PayloadBody = None,
) -> Response:
    return render(handler.update(album_id, payload), request)


@router.delete("/album/{album_id:int}", name="delete_album")
def delete_album(album_id: int, request: Request, handler: HandlerDep) -> Response:
    return render(handler.delete(album_id), request)


async def request_validation_error_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Report undecodable request bodies with the album error envelope."""

    details: list[Any] = list(exc.errors()) if isinstance(exc, RequestValidationError) else []
    messages = [str(detail.get("msg", detail)) for detail in details] or [str(exc)]
    log.debug("Rejected request to %s: %s", request.url.path, messages)
    return JSONResponse(
        content={"status": "error", "errors": {ROOT_ERROR_KEY: messages}},
        status_code=HTTPStatus.BAD_REQUEST,
    )


def create_app(
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    validator: AlbumValidator | None = None,
) -> FastAPI:
    """Build the FastAPI application serving the album resource."""

    app = FastAPI(
        title="albumrest",
        description="REST endpoints for the album resource",
        version=__version__,
    )
    app.state.unit_of_work_factory = unit_of_work_factory
    app.state.validator = validator or AlbumValidator()

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(router)
    return app
