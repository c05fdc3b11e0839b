from datetime import datetime
from typing import Any, Final

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from .. import __version__
from ..application.client_service import ClientRegistry
from ..application.upload_service import store_upload
from ..application.validation import create_client_with_logging
from ..config import AppConfig
from ..domain.clients import Client
from ..domain.constants import MAX_PAGE_SIZE
from ..domain.enums import ENUMERATIONS, describe, from_wire, get_enumeration

api_router: Final = APIRouter(
    prefix="/api/v1",
    responses={
        400: {"description": "Bad Request - Invalid input data"},
        429: {"description": "Too Many Requests - Throttle limit reached"},
    },
)


def get_config(request: Request) -> AppConfig:
    """Resolved configuration injected at application creation."""
    return request.app.state.config


def get_client_registry(request: Request) -> ClientRegistry:
    return request.app.state.client_registry


# Request Models
class ClientCreate(BaseModel):
    """Request model for registering a client.

    Fields are left untyped so the domain validator sees every value and
    reports type, length, emptiness and email syntax violations together.
    """

    name: Any = Field(
        None,
        description="Name of the client",
        examples=["Acme Corporation"],
        json_schema_extra={"type": "string", "maxLength": 255},
    )
    email: Any = Field(
        None,
        description="Email address of the client",
        examples=["contact@acme.com"],
        json_schema_extra={"type": "string", "format": "email", "maxLength": 255},
    )


# Response Models
class HealthResponse(BaseModel):
    status: str = Field(description="Service status")
    version: str = Field(description="Application version")
    node_env: str = Field(description="Environment name")


class ClientResponse(BaseModel):
    """Registered client returned by the API."""

    id: str = Field(description="Unique client identifier")
    name: str = Field(description="Client name")
    email: str = Field(description="Client email address")
    created_at: datetime = Field(description="Registration timestamp (UTC)")

    @classmethod
    def from_client(cls, client: Client) -> "ClientResponse":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            created_at=client.created_at,
        )


class ClientListResponse(BaseModel):
    data: list[ClientResponse]
    total: int = Field(description="Total number of clients")
    page: int = Field(description="Current page (1-based)")
    limit: int = Field(description="Page size")
    total_pages: int = Field(description="Number of pages")


class EnumValue(BaseModel):
    tag: str = Field(description="Variant name")
    value: str = Field(description="Wire value used in payloads")


class EnumResponse(BaseModel):
    name: str = Field(description="Enumeration name")
    values: list[EnumValue] = Field(description="Variants in declaration order")


class EnumListResponse(BaseModel):
    enumerations: list[EnumResponse]


class UploadResponse(BaseModel):
    filename: str = Field(description="Name the file was stored under")
    original_name: str | None = Field(description="Client-provided file name")
    content_type: str = Field(description="MIME type")
    size: int = Field(description="Size in bytes")


def _enum_response(name: str) -> EnumResponse:
    enum_cls = get_enumeration(name)
    return EnumResponse(
        name=name,
        values=[EnumValue(tag=tag, value=value) for tag, value in describe(enum_cls)],
    )


@api_router.get("/health", response_model=HealthResponse, tags=["system"])
async def api_health(config: AppConfig = Depends(get_config)) -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="ok", version=__version__, node_env=config.node_env)


@api_router.get(
    "/config",
    response_model=AppConfig,
    tags=["system"],
    summary="Show the resolved configuration",
)
async def api_config(config: AppConfig = Depends(get_config)) -> AppConfig:
    return config


@api_router.get("/enums", response_model=EnumListResponse, tags=["enumerations"])
async def api_list_enums() -> EnumListResponse:
    """List every domain vocabulary with its wire values."""
    return EnumListResponse(
        enumerations=[_enum_response(name) for name in ENUMERATIONS]
    )


@api_router.get(
    "/enums/{name}",
    response_model=EnumResponse,
    tags=["enumerations"],
    responses={404: {"description": "Unknown enumeration"}},
)
async def api_get_enum(name: str) -> EnumResponse:
    return _enum_response(name)


@api_router.get(
    "/enums/{name}/{value}",
    response_model=EnumValue,
    tags=["enumerations"],
    summary="Resolve a wire value to its variant",
    responses={404: {"description": "Unknown enumeration"}},
)
async def api_resolve_enum_value(name: str, value: str) -> EnumValue:
    member = from_wire(get_enumeration(name), value)
    return EnumValue(tag=member.name, value=member.value)


@api_router.post(
    "/clients",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["clients"],
    summary="Register a client",
    responses={409: {"description": "A client with this email already exists"}},
)
async def api_create_client(
    *,
    registry: ClientRegistry = Depends(get_client_registry),
    client_create: ClientCreate,
) -> ClientResponse:
    data = create_client_with_logging(client_create.model_dump())
    return ClientResponse.from_client(registry.register(data))


@api_router.get("/clients", response_model=ClientListResponse, tags=["clients"])
async def api_list_clients(
    *,
    registry: ClientRegistry = Depends(get_client_registry),
    page: int | None = Query(None, description="Page number, starting at 1"),
    limit: int | None = Query(
        None, description=f"Page size, at most {MAX_PAGE_SIZE}"
    ),
) -> ClientListResponse:
    result = registry.list_clients(page, limit)
    return ClientListResponse(
        data=[ClientResponse.from_client(c) for c in result.data],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
    )


@api_router.post(
    "/uploads",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["uploads"],
    summary="Upload an image",
    responses={
        413: {"description": "File larger than MAX_FILE_SIZE"},
        415: {"description": "File type not allowed"},
    },
)
async def api_upload_file(
    *,
    config: AppConfig = Depends(get_config),
    file: UploadFile = File(description="Image file (jpeg, png, gif or webp)"),
) -> UploadResponse:
    # One byte past the limit is enough to detect an oversized upload
    data = await file.read(config.max_file_size + 1)
    stored = await run_in_threadpool(
        store_upload, config, data, file.content_type, file.filename
    )
    return UploadResponse(
        filename=stored.filename,
        original_name=stored.original_name,
        content_type=stored.content_type,
        size=stored.size,
    )
