from __future__ import annotations

from typing import Union

from azure.identity.aio import ClientSecretCredential, DefaultAzureCredential
from loguru import logger

from src.config.settings import Settings

AsyncCredential = Union[ClientSecretCredential, DefaultAzureCredential]


def acquire_credential(settings: Settings) -> AsyncCredential:
    """
    Build the credential shared by blob and Service Bus clients for one run.

    Uses the configured service principal when tenant, client id and secret
    are all present; otherwise falls back to the default chain (managed
    identity, environment, CLI login).
    """
    if settings.has_client_secret:
        logger.debug("Using ClientSecretCredential client_id={}", settings.azure_client_id)
        return ClientSecretCredential(
            tenant_id=settings.azure_tenant_id,
            client_id=settings.azure_client_id,
            client_secret=settings.azure_client_secret,
        )
    logger.debug("Using DefaultAzureCredential")
    return DefaultAzureCredential()
