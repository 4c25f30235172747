from .synchronized_config_store import SynchronizedConfigStore

__all__ = ["SynchronizedConfigStore"]
