"""Health probes for the configuration, the knowledge store and the model."""

import logging

from second_brain.core.llm_connector import LLMConnector
from second_brain.storage.knowledge_store import DocumentStore

from ..config import APIConfig
from ..models.health import HealthStatus, OverallState, ServiceStatus

logger = logging.getLogger(__name__)


def _config_status(config: APIConfig) -> ServiceStatus:
    source = config.config_path if config.config_path.exists() else "built-in defaults"
    return ServiceStatus(name="configuration", status="healthy", message=f"Loaded from {source}")


def _storage_status(store: DocumentStore | None) -> tuple[ServiceStatus, int | None]:
    if store is None:
        return ServiceStatus(name="storage", status="unhealthy", message="Store not initialized"), None

    try:
        count = len(store.find())
    except Exception as e:
        logger.error(f"Knowledge store probe failed: {e}")
        return ServiceStatus(name="storage", status="unhealthy", message=str(e)), None

    return ServiceStatus(name="storage", status="healthy", message=f"{count} item(s) stored"), count


async def _model_status(connector: LLMConnector | None) -> ServiceStatus:
    if connector is None:
        return ServiceStatus(name="llm", status="unknown", message="No model provider configured")

    label = f"{connector.provider}/{connector.model_name}"
    if await connector.check_health():
        return ServiceStatus(name="llm", status="healthy", message=label)
    return ServiceStatus(name="llm", status="unhealthy", message=f"{label} not responding")


def _overall(services: dict[str, ServiceStatus]) -> OverallState:
    # Without storage nothing works; a missing model only disables chat.
    if services["storage"].status == "unhealthy":
        return "unhealthy"
    if all(s.status == "healthy" for s in services.values()):
        return "healthy"
    return "degraded"


async def check_health(
    config: APIConfig,
    store: DocumentStore | None,
    connector: LLMConnector | None,
    version: str,
) -> HealthStatus:
    """Probe each collaborator and roll the results into one status.

    Args:
        config: API configuration
        store: Document store (None before startup completes)
        connector: Model connector, None when chat is disabled
        version: Application version reported back to the caller
    """
    storage, item_count = _storage_status(store)
    services = {
        "config": _config_status(config),
        "storage": storage,
        "llm": await _model_status(connector),
    }

    status = _overall(services)
    logger.info(f"Health check: {status}")
    return HealthStatus(status=status, version=version, item_count=item_count, services=services)
