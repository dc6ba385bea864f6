from wdc_portal.http_client.backend_client import BackendClient

__all__ = ["BackendClient"]
