"""Registry loading exports."""

from .registry_builder import LoadedRegistry, RegistryLoadError, load_registry

__all__ = ["LoadedRegistry", "RegistryLoadError", "load_registry"]
