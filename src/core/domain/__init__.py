"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y los
  descriptores de comandos.
- El dominio no conoce la CLI ni el cliente HTTP concreto: solo conceptos del problema.
"""
