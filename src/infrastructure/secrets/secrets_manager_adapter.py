"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

load_into_env() runs once at startup, before Settings.from_env(), so the IEX
Cloud token can live in a managed secret instead of the process environment.
"""

import json
import os

import boto3
import structlog

from src.domain.ports.secret_store_port import ISecretStore

logger = structlog.get_logger()


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None) -> None:
        self._client = boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str) -> list[str]:
        """Copy the secret's key-value pairs into os.environ.

        Variables already present in the environment win over the secret.

        Returns:
            Names of the variables that were set.
        """
        loaded = []
        for key, value in self.get_secret(secret_id).items():
            if key in os.environ:
                continue
            os.environ[key] = str(value)
            loaded.append(key)

        logger.info("Secrets loaded into environment", keys=loaded)
        return loaded
