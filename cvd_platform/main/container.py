"""
Dependency container injection module - Main Layer

Composition root wiring the durable slot backend, the history store, the
single prediction session, the scoring gateway and the use cases.
"""

from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any, Dict, List, Mapping

import pymongo.errors
from dependency_injector import containers, providers

from cvd_platform.application.services.history_store import HistoryStore
from cvd_platform.application.services.history_view import HistoryView
from cvd_platform.application.session import PredictionSession
from cvd_platform.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from cvd_platform.application.use_cases.history_use_cases import (
    DeleteRecordUseCase,
    GetHistoryPageUseCase,
    UpdateRemarksUseCase,
)
from cvd_platform.application.use_cases.prediction_use_case import (
    SubmitPredictionUseCase,
)
from cvd_platform.application.use_cases.session_use_cases import (
    DrainNotificationsUseCase,
    GetCurrentPredictionUseCase,
    ListMaterialsUseCase,
    SelectMaterialUseCase,
)
from cvd_platform.infrastructure.database import MongoDatabase
from cvd_platform.infrastructure.gateways.scoring_gateway import ScoringGateway
from cvd_platform.infrastructure.notifications.notification_feed import (
    NotificationFeed,
)
from cvd_platform.infrastructure.repositories.history_repository import (
    HistoryRepository,
)
from cvd_platform.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from cvd_platform.infrastructure.slots import (
    FileKeyValueSlot,
    InMemoryKeyValueSlot,
    MongoKeyValueSlot,
)
from cvd_platform.shared import EnumHistoryBackend, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    slot_retention = providers.Callable(
        lambda days: timedelta(days=days), config.history.retention_days
    )

    history_slot = providers.Selector(
        providers.Callable(_enum_value, config.history.backend),
        memory=providers.Singleton(
            InMemoryKeyValueSlot,
            retention=slot_retention,
            max_bytes=config.history.max_bytes,
        ),
        file=providers.Singleton(
            FileKeyValueSlot,
            directory=config.history.directory,
            retention=slot_retention,
            max_bytes=config.history.max_bytes,
        ),
        mongo=providers.Singleton(
            MongoKeyValueSlot,
            mongo_database=mongo_database,
            collection_name=config.database.collection,
            retention=slot_retention,
            max_bytes=config.history.max_bytes,
        ),
    )

    history_repository = providers.Singleton(
        HistoryRepository,
        slot=history_slot,
        key=config.history.slot_key,
    )

    notification_feed = providers.Singleton(NotificationFeed)

    # Gateways
    scoring_gateway = providers.Singleton(
        ScoringGateway,
        base_url=config.scoring.base_url,
        timeout=config.scoring.timeout,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        slot=history_slot,
        scoring_gateway=scoring_gateway,
        slot_key=config.history.slot_key,
        scoring_url=config.scoring.base_url,
    )

    # Application (session state)
    history_store = providers.Singleton(
        HistoryStore,
        repository=history_repository,
    )

    history_view = providers.Singleton(
        HistoryView,
        store=history_store,
        page_size=config.history.page_size,
    )

    session = providers.Singleton(
        PredictionSession,
        store=history_store,
        view=history_view,
    )

    # Application (use cases)
    submit_prediction_use_case = providers.Factory(
        SubmitPredictionUseCase,
        session=session,
        scoring_gateway=scoring_gateway,
        notifier=notification_feed,
        material_codes=config.scoring.material_codes,
        failure_policy=config.scoring.on_transport_failure,
    )

    get_history_page_use_case = providers.Factory(
        GetHistoryPageUseCase,
        session=session,
    )

    update_remarks_use_case = providers.Factory(
        UpdateRemarksUseCase,
        session=session,
    )

    delete_record_use_case = providers.Factory(
        DeleteRecordUseCase,
        session=session,
        notifier=notification_feed,
    )

    list_materials_use_case = providers.Factory(
        ListMaterialsUseCase,
        session=session,
        material_codes=config.scoring.material_codes,
    )

    select_material_use_case = providers.Factory(
        SelectMaterialUseCase,
        session=session,
    )

    get_current_prediction_use_case = providers.Factory(
        GetCurrentPredictionUseCase,
        session=session,
    )

    drain_notifications_use_case = providers.Factory(
        DrainNotificationsUseCase,
        notification_feed=notification_feed,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


def shared_material_codes(material_codes: Mapping[str, str]) -> Dict[str, List[str]]:
    """Remote codes that more than one material resolves to."""
    by_code: Dict[str, List[str]] = {}
    for material, code in material_codes.items():
        by_code.setdefault(code, []).append(material)
    return {code: sorted(mats) for code, mats in by_code.items() if len(mats) > 1}


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the prediction session and its storage backend.

    Prepares the Mongo collection when that backend is selected, loads the
    persisted history into the session, and releases the Mongo client on
    shutdown.
    """
    container = get_container()
    backend = _enum_value(container.config.history.backend())
    uses_mongo = backend == EnumHistoryBackend.MONGO.value

    for code, materials in shared_material_codes(
        container.config.scoring.material_codes() or {}
    ).items():
        logger.warning(
            "container.material_code_shared", remote_code=code, materials=materials
        )

    if uses_mongo:
        collection = container.config.database.collection()
        logger.info("container.mongo.ensure_indexes", collection=collection)
        try:
            await container.mongo_database().create_indexes(collection)
        except pymongo.errors.PyMongoError as exc:
            logger.error(
                "container.mongo.index_failed", collection=collection, error=str(exc)
            )

    session = container.session()
    await session.start()

    try:
        yield container
    finally:
        if uses_mongo:
            logger.info("container.mongo.close")
            container.mongo_database().close()
