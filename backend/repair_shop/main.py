"""FastAPI application factory — the composition root."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repair_shop.application.interfaces import StorageBackend
from repair_shop.application.schemas import (
    ClientCreate,
    EquipmentCreate,
    PartCreate,
    TechnicianCreate,
)
from repair_shop.config import get_settings
from repair_shop.infrastructure.dependencies import build_repositories, create_storage_backend
from repair_shop.infrastructure.logging.log_config import setup_logging
from repair_shop.presentation.api.router import router as api_router
from repair_shop.presentation.ipc import IpcDispatcher, register_channels

logger = logging.getLogger(__name__)

_DEMO_CLIENTS = [
    ClientCreate(
        name="Escola Municipal Centro",
        phone="7199999-0001",
        email="escola.centro@edu.ba.gov.br",
        address="Av. Central, 500",
        city="Salvador",
        state="BA",
        notes="Projetor da sala 12",
    ),
    ClientCreate(
        name="Colégio Estadual Norte",
        phone="7199999-0002",
        email="colegio.norte@edu.ba.gov.br",
        address="Rua das Flores, 234",
        city="Feira de Santana",
        state="BA",
        notes='TV 55" da biblioteca',
    ),
    ClientCreate(
        name="Instituto Federal BA - Campus Salvador",
        phone="7199999-0003",
        email="ifba.salvador@ifba.edu.br",
        address="Av. Araújo Pinho, 39",
        city="Salvador",
        state="BA",
        notes="Múltiplos projetores",
    ),
]

_DEMO_PARTS = [
    PartCreate(part_type="Lâmpada", name="Lâmpada de Projetor Epson", quantity=15, unit_price=450.0),
    PartCreate(part_type="Lâmpada", name="Lâmpada de Projetor Sony", quantity=8, unit_price=520.0),
    PartCreate(part_type="Cabo Flat", name="Cabo HDMI 2.0 - 3m", quantity=25, unit_price=35.0),
    PartCreate(part_type="Controle Remoto", name="Controle Remoto Universal TV", quantity=10, unit_price=45.0),
    PartCreate(part_type="Placa T-CON", name='Placa T-CON TV LG 55"', quantity=3, unit_price=280.0),
    PartCreate(part_type="Fonte", name='Fonte TV Samsung 32"', quantity=5, unit_price=180.0),
]

_DEMO_EQUIPMENT = [
    EquipmentCreate(device_type="Projetor", brand="Epson", model="PowerLite X49",
                    serial_number="EP20230001", reported_problem="Lâmpada queimada"),
    EquipmentCreate(device_type="TV LED", brand="Samsung", model="UN55TU8000",
                    serial_number="SM20230045", reported_problem="Tela com manchas"),
    EquipmentCreate(device_type="Projetor", brand="BenQ", model="MH535FHD",
                    serial_number="BQ20230012", reported_problem="Ventilador com ruído"),
]

_DEMO_TECHNICIANS = [
    TechnicianCreate(name="Roberto Silva", phone="7191234-5001", specialty="Projetores e TVs"),
    TechnicianCreate(name="Ana Costa", phone="7191234-5002", specialty="Eletrônica de Áudio/Vídeo"),
    TechnicianCreate(name="Pedro Martins", phone="7191234-5003", specialty="Manutenção de Projetores"),
]


async def seed_demo_data(backend: StorageBackend) -> int:
    """Fill empty tables with demo records. Idempotent — populated tables are skipped."""
    created = 0
    async with backend.session() as session:
        repos = build_repositories(session)
        for repository, items in (
            (repos.clients, _DEMO_CLIENTS),
            (repos.parts, _DEMO_PARTS),
            (repos.equipment, _DEMO_EQUIPMENT),
            (repos.technicians, _DEMO_TECHNICIANS),
        ):
            if await repository.list_all():
                continue
            for item in items:
                await repository.add(item)
                created += 1
    if created:
        logger.info("Seeded %d demo records", created)
    return created


def create_app(backend: StorageBackend | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The storage backend is chosen here, once, and shared by every request.
    """
    settings = get_settings()
    backend = backend or create_storage_backend(settings)
    dispatcher = register_channels(IpcDispatcher(backend, locale=settings.locale))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan — prepare storage, seed, dispose."""
        setup_logging()
        await backend.initialize()
        logger.info("Using %s storage backend", backend.name)

        if settings.seed_demo_data:
            try:
                await seed_demo_data(backend)
            except Exception:
                logger.exception("Could not seed demo data — continuing without it")

        yield

        await backend.dispose()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.storage_backend = backend
    app.state.dispatcher = dispatcher

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "repair_shop.main:app",
        host="127.0.0.1",
        port=8020,
        reload=True,
    )
