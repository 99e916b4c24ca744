"""Adaptadores: transporte HTTP, builders de proveedores y comandos de recursos."""
