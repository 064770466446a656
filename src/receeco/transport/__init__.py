from receeco.transport.base import Transport, TransportError, TransportResponse
from receeco.transport.requests_transport import RequestsTransport

__all__ = ["RequestsTransport", "Transport", "TransportError", "TransportResponse"]
