from receeco.clients.ReceecoClient import ClientConfig, ReceecoClient

__all__ = ["ClientConfig", "ReceecoClient"]
