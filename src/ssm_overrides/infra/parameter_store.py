"""Parameter Store client implementation."""

import boto3
from typing import Any, Callable, Optional
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from ..domain.config import MARKER_PREFIX
from ..domain.errors import ConnectionInitError, ParameterFetchError
from ..domain.interfaces import ParameterClient
from .xray import xray_capture


class SSMParameterClient(ParameterClient):
    """Resolves marker-prefixed values against SSM Parameter Store.

    The boto3 client is created on the first fetch and reused afterwards, so
    building this object never needs AWS credentials or a region.
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        self.region = region
        self.endpoint_url = endpoint_url
        self._client_factory = client_factory or boto3.client
        self._ssm = None

    def resolve(self, raw_value: str) -> str:
        """Fetch the parameter named by a marker-prefixed value."""
        if not raw_value.startswith(MARKER_PREFIX):
            raise ValueError(f"Value does not start with {MARKER_PREFIX}: {raw_value!r}")
        return self.get_parameter(raw_value[len(MARKER_PREFIX):])

    @xray_capture("ssm_get_parameter")
    def get_parameter(self, name: str) -> str:
        """Get a decrypted parameter value by name."""
        ssm = self._get_client()
        try:
            response = ssm.get_parameter(Name=name, WithDecryption=True)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            raise ParameterFetchError(
                name, f"Failed to get parameter {name}: {e}", error_code=error_code
            ) from e
        except NoCredentialsError as e:
            # boto3 looks credentials up lazily, on the first request
            raise ConnectionInitError(f"No AWS credentials for SSM client: {e}") from e
        except BotoCoreError as e:
            raise ParameterFetchError(name, f"Failed to get parameter {name}: {e}") from e
        return response["Parameter"]["Value"]

    def _get_client(self):
        if self._ssm is None:
            try:
                self._ssm = self._client_factory(
                    "ssm",
                    region_name=self.region,
                    endpoint_url=self.endpoint_url,
                )
            except BotoCoreError as e:
                raise ConnectionInitError(f"Failed to create SSM client: {e}") from e
        return self._ssm
