"""Persisted service context.

The context file records which service instances the user is currently
working with, per named context::

    {
      "current_context": "default",
      "contexts": {
        "default": {"kafka_id": "c9m2...", "service_registry_id": null}
      }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from rhoas_kafka.utils.errors import ContextError

logger = logging.getLogger(__name__)


class ServiceConfig(BaseModel):
    """Service instances selected in one context."""

    kafka_id: str | None = Field(None, description="Current Kafka instance ID")
    service_registry_id: str | None = Field(None, description="Current Service Registry ID")


class ServiceContext(BaseModel):
    """All named contexts and the name of the current one."""

    current_context: str | None = Field(None, description="Name of the current context")
    contexts: dict[str, ServiceConfig] = Field(default_factory=dict)


def load_service_context(path: Path) -> ServiceContext:
    """Load the service context file.

    A missing file is an empty context, not an error.

    Raises:
        ContextError: If the file cannot be read or parsed.
    """
    if not path.exists():
        logger.debug(f"No service context found at {path}")
        return ServiceContext()

    try:
        data = json.loads(path.read_text())
    except OSError as e:
        raise ContextError(f"Failed to read service context {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ContextError(f"Service context {path} is not valid JSON: {e}") from e

    try:
        return ServiceContext.model_validate(data)
    except PydanticValidationError as e:
        raise ContextError(f"Service context {path} is invalid: {e}") from e


def get_current_context(context: ServiceContext) -> ServiceConfig:
    """Return the current context's service selection.

    Raises:
        ContextError: If the current context name has no entry.
    """
    if not context.current_context:
        return ServiceConfig()

    config = context.contexts.get(context.current_context)
    if config is None:
        raise ContextError(f"Context '{context.current_context}' does not exist")
    return config
