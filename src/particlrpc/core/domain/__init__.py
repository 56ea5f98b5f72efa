"""Modelos del dominio.

Por qué:
- Aquí viven las estructuras de datos que devuelve el daemon (Pydantic v2).
- El dominio no conoce HTTP ni JSON-RPC: solo la forma de cada resultado.
"""
