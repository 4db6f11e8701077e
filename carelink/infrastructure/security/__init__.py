from carelink.infrastructure.security.password_hasher import PasslibPasswordHasher

__all__ = ["PasslibPasswordHasher"]
