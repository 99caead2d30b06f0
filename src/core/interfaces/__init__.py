"""Contratos del Core.

Por qué:
- El transporte HTTP y las estrategias de interpretación se definen como
  Protocol; los adaptadores concretos los implementan.
"""
