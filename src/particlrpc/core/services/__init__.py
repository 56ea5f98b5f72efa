from particlrpc.core.services.commands import ParticlRpc

__all__ = ["ParticlRpc"]
