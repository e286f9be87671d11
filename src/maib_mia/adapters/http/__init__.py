"""HTTP adapter – async httpx client for the MIA API."""
from maib_mia.adapters.http.api_client import MiaApiClient
from maib_mia.adapters.http.client import HttpxHttpClient
from maib_mia.adapters.http.envelope import unwrap_envelope, unwrap_response

__all__ = ["HttpxHttpClient", "MiaApiClient", "unwrap_envelope", "unwrap_response"]
