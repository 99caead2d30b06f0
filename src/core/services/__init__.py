"""Servicios del Core.

Por qué:
- Construcción de formularios e interpretación de respuestas son funciones
  puras: se testean sin red y no dependen del transporte.
"""
