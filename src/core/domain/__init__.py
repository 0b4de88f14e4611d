"""Modelos del dominio educativo y sus valores por defecto.

- `models`: forma de los recursos del backend (Pydantic v2).
- `defaults`: objetos sintetizados cuando el backend no responde.
"""
