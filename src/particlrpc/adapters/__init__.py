"""Adaptadores de I/O (httpx).

Por qué un paquete:
- Aísla la librería HTTP del Core; la fachada solo ve `RpcTransport`.
"""
