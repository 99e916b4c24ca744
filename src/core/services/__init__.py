"""Servicios de orquestación sobre el Core y los adaptadores."""
