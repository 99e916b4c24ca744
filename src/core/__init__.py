"""Core: configuración, errores, logging, dominio y servicios.

No depende de la CLI; los adaptadores concretos viven en `adapters`.
"""
