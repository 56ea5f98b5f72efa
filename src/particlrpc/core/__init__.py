"""Core del cliente: configuración, codec JSON-RPC, errores y fachada de comandos."""
