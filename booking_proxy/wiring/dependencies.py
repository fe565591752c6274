from functools import lru_cache
import logging

from booking_proxy.core.config import settings
from booking_proxy.application.ports.scheduling import SchedulingPort
from booking_proxy.application.ports.service_catalog import ServiceCatalogPort
from booking_proxy.application.use_cases.booking import BookingUseCase
from booking_proxy.application.utils.service_resolver import ServiceIdResolver
from booking_proxy.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from booking_proxy.infrastructure.meevo.meevo_client import MeevoSchedulingClient
from booking_proxy.infrastructure.meevo.mock_scheduling import MockScheduling
from booking_proxy.infrastructure.meevo.token_cache import MeevoTokenCache


def _has_credentials() -> bool:
    return bool(settings.MEEVO_CLIENT_ID and settings.MEEVO_CLIENT_SECRET)


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_token_cache() -> MeevoTokenCache:
    return MeevoTokenCache()


@lru_cache
def get_scheduling() -> SchedulingPort:
    logger = logging.getLogger(__name__)
    if not _has_credentials():
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockScheduling (Meevo credentials missing, ENV=dev/local)")
            return MockScheduling()
        raise ValueError("MEEVO_CLIENT_ID and MEEVO_CLIENT_SECRET are required to book appointments.")

    logger.info("Using Meevo scheduling API", extra={"tenant_id": settings.MEEVO_TENANT_ID})
    return MeevoSchedulingClient(token_provider=get_token_cache())


def get_service_resolver() -> ServiceIdResolver:
    return ServiceIdResolver(catalog=get_service_catalog(), strict=settings.SERVICE_ID_STRICT)


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        scheduling=get_scheduling(),
        resolver=get_service_resolver(),
        client_gender=settings.CLIENT_GENDER,
    )
